from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.model import Review
from app.services.review_query import LATEST_QUERY, ReviewQuery, apply_review_query


async def create_review(review_data: dict[str, Any], db: AsyncSession) -> Review:
    """
    Создаёт отзыв в базе данных.

    Существование фильма и автора проверяет сама БД (внешние ключи).

    :param review_data: Данные отзыва (movie_id, user_id, rating, комментарии).
    :param db: Асинхронная сессия базы данных.
    :return: Созданный отзыв.
    :rtype: Review
    :raises IntegrityError: Если фильм или пользователь не существуют.
    """
    review = Review(**review_data)
    db.add(review)
    await db.flush()
    await db.refresh(review)

    return review


async def get_reviews(query: ReviewQuery, db: AsyncSession, limit: int | None = None) -> list[Review]:
    """
    Получает отзывы с автором и фильмом по условиям запроса.

    :param query: Условия сортировки и фильтрации.
    :param db: Асинхронная сессия базы данных.
    :param limit: Максимальное количество отзывов.
    :return: Список отзывов.
    :rtype: list[Review]
    """
    statement = apply_review_query(select(Review), query)
    if limit is not None:
        statement = statement.limit(limit)
    return list((await db.execute(statement)).scalars().all())


async def get_latest_reviews(db: AsyncSession, limit: int = 5) -> list[Review]:
    """
    Получает последние отзывы.

    :param db: Асинхронная сессия базы данных.
    :param limit: Количество отзывов.
    :return: Список отзывов от новых к старым.
    :rtype: list[Review]
    """
    return await get_reviews(query=LATEST_QUERY, db=db, limit=limit)
