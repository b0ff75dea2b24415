from datetime import date

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.crud.movie import get_movie_by_id, upsert_movie
from app.db.model import Movie


@pytest.mark.asyncio
async def test_upsert_movie_creates(async_session: AsyncSession) -> None:
    movie = await upsert_movie(
        movie_data={"id": "603", "title": "The Matrix", "release_date": date(1999, 3, 31)},
        db=async_session,
    )

    assert movie.id == "603"
    assert await get_movie_by_id(async_session, "603") is movie


@pytest.mark.asyncio
async def test_upsert_movie_updates_existing(async_session: AsyncSession, saved_movie: Movie) -> None:
    """Повторное сохранение обновляет переданные поля и не создаёт дубликат."""
    movie = await upsert_movie(
        movie_data={"id": saved_movie.id, "title": "Inception (2010)", "release_date": None},
        db=async_session,
    )

    assert movie is saved_movie
    assert movie.title == "Inception (2010)"
    assert movie.release_date is None
    # Не переданный постер остаётся прежним
    assert movie.poster_path == "/inception.jpg"

    count = (await async_session.execute(select(func.count()).select_from(Movie))).scalar_one()
    assert count == 1


@pytest.mark.asyncio
async def test_get_movie_by_id_not_found(async_session: AsyncSession) -> None:
    assert await get_movie_by_id(async_session, "0") is None
