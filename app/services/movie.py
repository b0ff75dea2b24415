import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.crud.movie import upsert_movie
from app.exceptions.movie import MovieSaveException, MovieSearchException, MovieSearchQueryMissingException
from app.schemas.movie import MovieResponse, SaveMovieRequest
from app.services.tmdb import TMDbClient, TMDbError

logger = logging.getLogger(__name__)


async def search_movies_service(query: str | None, tmdb: TMDbClient) -> list[dict[str, Any]]:
    """
    Поиск фильмов во внешнем сервисе TMDb.

    :param query: Поисковая строка.
    :param tmdb: Клиент TMDb.
    :return: Результаты поиска TMDb без изменений.
    :rtype: list[dict]
    :raises MovieSearchQueryMissingException: Если поисковая строка пустая.
    :raises MovieSearchException: Если TMDb не ответил.
    """
    if not query:
        raise MovieSearchQueryMissingException

    try:
        return await tmdb.search_movies(query=query)
    except TMDbError as e:
        logger.exception("Movie search failed")
        raise MovieSearchException from e


async def save_movie_service(movie: SaveMovieRequest, db: AsyncSession) -> MovieResponse:
    """
    Сохраняет выбранный фильм или обновляет уже сохранённый.

    Дата выхода перезаписывается всегда, постер и описание - только если переданы.

    :param movie: Данные фильма из TMDb.
    :param db: Асинхронная сессия базы данных.
    :return: Сохранённый фильм.
    :rtype: MovieResponse
    :raises MovieSaveException: Если не удалось записать фильм в БД.
    """
    movie_data = movie.model_dump(exclude_unset=True)
    movie_data["id"] = str(movie.id)
    movie_data["release_date"] = movie.release_date

    try:
        saved_movie = await upsert_movie(movie_data=movie_data, db=db)
    except SQLAlchemyError as e:
        logger.exception("Failed to save movie %s", movie.id)
        raise MovieSaveException from e

    return MovieResponse.model_validate(saved_movie)
