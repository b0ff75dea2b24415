import logging
from typing import Any

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)


class TMDbError(Exception):
    """TMDb недоступен, отказал в запросе или вернул неожиданный ответ."""


class TMDbClient:
    """
    Асинхронный клиент The Movie Database (TMDb).

    Каждый вызов открывает своё соединение; повторов и кэша нет.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://api.themoviedb.org/3",
        language: str = "ja-JP",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        :param api_key: Ключ TMDb API (v3).
        :param base_url: Базовый URL API.
        :param language: Язык результатов.
        :param timeout: Таймаут запроса в секундах.
        :param transport: Транспорт httpx (подменяется в тестах).
        """
        self.api_key = api_key
        self.base_url = base_url
        self.language = language
        self.timeout = timeout
        self._transport = transport

    async def _get(self, path: str, **params: Any) -> dict[str, Any]:
        if not self.api_key:
            raise TMDbError("TMDB_API_KEY is not configured")

        params.update({"api_key": self.api_key, "language": self.language})
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.get(path, params=params)
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise TMDbError(f"TMDb request {path} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise TMDbError(f"TMDb returned invalid JSON for {path}") from e

    async def search_movies(self, query: str) -> list[dict[str, Any]]:
        """
        Поиск фильмов по названию.

        :param query: Поисковая строка.
        :return: Список фильмов в формате TMDb (поле results).
        :rtype: list[dict]
        :raises TMDbError: Если запрос к TMDb не удался.
        """
        data = await self._get("/search/movie", query=query)
        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise TMDbError("TMDb response has no results list")
        logger.debug("TMDb search %r returned %d movies", query, len(results))
        return results


def get_tmdb_client() -> TMDbClient:
    """DI клиента TMDb с параметрами из настроек."""
    return TMDbClient(
        api_key=settings.TMDB_API_KEY,
        base_url=settings.TMDB_BASE_URL,
        language=settings.TMDB_LANGUAGE,
        timeout=settings.TMDB_TIMEOUT,
    )
