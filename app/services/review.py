import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.crud.review import create_review, get_latest_reviews, get_reviews
from app.exceptions.review import ReviewCreationException, ReviewFetchException
from app.schemas.review import CreateReviewRequest, ReviewResponse, ReviewWithRelations
from app.schemas.token import TokenData
from app.services.review_query import ReviewQuery

logger = logging.getLogger(__name__)

LATEST_REVIEWS_LIMIT = 5


async def create_review_service(review: CreateReviewRequest, current_user: TokenData, db: AsyncSession) -> ReviewResponse:
    """
    Создаёт отзыв от имени текущего пользователя.

    :param review: Данные отзыва.
    :param current_user: Пользователь из access-токена.
    :param db: Асинхронная сессия базы данных.
    :return: Созданный отзыв.
    :rtype: ReviewResponse
    :raises ReviewCreationException: Если БД отклонила запись (например, фильм не сохранён).
    """
    review_data = review.model_dump(by_alias=False)
    review_data["user_id"] = current_user.id

    try:
        new_review = await create_review(review_data=review_data, db=db)
    except SQLAlchemyError as e:
        logger.exception("Failed to create review for movie %s", review.movie_id)
        raise ReviewCreationException from e

    logger.info("User %s reviewed movie %s", current_user.id, new_review.movie_id)
    return ReviewResponse.model_validate(new_review)


async def list_reviews_service(query: ReviewQuery, db: AsyncSession) -> list[ReviewWithRelations]:
    """
    Список отзывов с сортировкой и фильтром.

    :param query: Условия из параметров запроса.
    :param db: Асинхронная сессия базы данных.
    :return: Отзывы с автором и фильмом.
    :rtype: list[ReviewWithRelations]
    :raises ReviewFetchException: Если не удалось прочитать отзывы.
    """
    try:
        reviews = await get_reviews(query=query, db=db)
    except SQLAlchemyError as e:
        logger.exception("Failed to list reviews")
        raise ReviewFetchException from e

    return [ReviewWithRelations.model_validate(review) for review in reviews]


async def latest_reviews_service(db: AsyncSession) -> list[ReviewWithRelations]:
    """
    Пять последних отзывов.

    :param db: Асинхронная сессия базы данных.
    :return: Отзывы от новых к старым.
    :rtype: list[ReviewWithRelations]
    :raises ReviewFetchException: Если не удалось прочитать отзывы.
    """
    try:
        reviews = await get_latest_reviews(db=db, limit=LATEST_REVIEWS_LIMIT)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch latest reviews")
        raise ReviewFetchException from e

    return [ReviewWithRelations.model_validate(review) for review in reviews]
