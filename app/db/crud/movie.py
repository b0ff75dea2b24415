from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.model import Movie


async def get_movie_by_id(db: AsyncSession, movie_id: str) -> Movie | None:
    """
    Получает фильм по его идентификатору.

    :param db: Асинхронная сессия базы данных.
    :param movie_id: ID фильма (id из TMDb).
    :return: Фильм или None.
    :rtype: Movie | None
    """
    return await db.get(Movie, movie_id)


async def upsert_movie(movie_data: dict[str, Any], db: AsyncSession) -> Movie:
    """
    Создаёт фильм или обновляет уже сохранённый.

    Обновляются только поля, переданные в movie_data.

    :param movie_data: Данные фильма, обязательно содержат id.
    :param db: Асинхронная сессия базы данных.
    :return: Сохранённый фильм.
    :rtype: Movie
    """
    movie = await get_movie_by_id(db=db, movie_id=movie_data["id"])
    if movie is None:
        movie = Movie(**movie_data)
        db.add(movie)
    else:
        for field, value in movie_data.items():
            setattr(movie, field, value)
    await db.flush()

    return movie
