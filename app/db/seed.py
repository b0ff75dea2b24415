"""
Наполнение БД тестовыми данными: два фильма и десять пользователей с отзывами.

Запуск: ``python -m app.db.seed``
"""

import asyncio
import logging
import random

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.crud.movie import upsert_movie
from app.db.crud.review import create_review
from app.db.crud.user import create_new_user, get_user_by_email
from app.db.model import UserStatus
from app.db.session import async_session_maker, create_tables
from app.services.security.hash import get_password_hash

logger = logging.getLogger(__name__)

SEED_MOVIES = (
    {"id": "1", "title": "Test Movie 1"},
    {"id": "2", "title": "Test Movie 2"},
)
SEED_USERS_COUNT = 10
SEED_PASSWORD = "seedpassword1"


async def seed_database(db: AsyncSession, rng: random.Random | None = None) -> int:
    """
    Создаёт тестовые фильмы, пользователей и их отзывы.

    Уже существующие пользователи пропускаются, поэтому повторный запуск безопасен.

    :param db: Асинхронная сессия базы данных.
    :param rng: Генератор случайных оценок.
    :return: Количество созданных пользователей.
    :rtype: int
    """
    rng = rng or random.Random()
    movies = [await upsert_movie(movie_data=dict(movie), db=db) for movie in SEED_MOVIES]
    password_hash = get_password_hash(SEED_PASSWORD)

    created = 0
    for i in range(1, SEED_USERS_COUNT + 1):
        email = f"seeduser{i}@example.com"
        if await get_user_by_email(db=db, email=email) is not None:
            continue

        user = await create_new_user(
            user_data={
                "name": f"Seed User {i}",
                "email": email,
                "password_hash": password_hash,
                "status": UserStatus.ACTIVE,
            },
            db=db,
        )
        await create_review(
            review_data={
                "movie_id": movies[i % 2].id,
                "user_id": user.id,
                "rating": rng.randint(1, 5),
                "comment_general": f"Test comment by {user.name}",
            },
            db=db,
        )
        created += 1
        logger.info("Created user %s and their review", user.name)

    return created


async def main() -> None:
    await create_tables()
    async with async_session_maker() as session:
        created = await seed_database(session)
        await session.commit()
    logger.info("Seeding finished, %d users created", created)


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(main())
