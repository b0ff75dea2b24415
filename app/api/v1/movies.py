from typing import Annotated, Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from app.api.openapi import generate_responses
from app.db.session import get_session
from app.exceptions.movie import MovieSaveException, MovieSearchException, MovieSearchQueryMissingException
from app.schemas.movie import MovieResponse, SaveMovieRequest
from app.services.movie import save_movie_service, search_movies_service
from app.services.tmdb import TMDbClient, get_tmdb_client

router = APIRouter(prefix="/movies", tags=["movies"])

get_session_ann = Annotated[AsyncSession, Depends(get_session)]
tmdb_client_ann = Annotated[TMDbClient, Depends(get_tmdb_client)]


@router.get(
    "/search",
    status_code=status.HTTP_200_OK,
    summary="Search movies in TMDb",
    responses=generate_responses(MovieSearchQueryMissingException, MovieSearchException),
)
async def search_movies(tmdb: tmdb_client_ann, query: str | None = None) -> list[dict[str, Any]]:
    """
    Поиск фильмов по названию во внешнем сервисе.

    :param tmdb: Клиент TMDb.
    :param query: Поисковая строка.
    :return: Результаты поиска TMDb.
    :rtype: list[dict]
    """
    return await search_movies_service(query=query, tmdb=tmdb)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MovieResponse,
    summary="Save movie",
    responses=generate_responses(MovieSaveException, validation=True),
)
async def save_movie(movie: SaveMovieRequest, db: get_session_ann) -> MovieResponse:
    """
    Сохраняет фильм из TMDb в БД (или обновляет сохранённый).

    :param movie: Данные фильма.
    :param db: Асинхронная сессия базы данных.
    :return: Сохранённый фильм.
    :rtype: MovieResponse
    """
    return await save_movie_service(movie=movie, db=db)
