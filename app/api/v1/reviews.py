from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from app.api.openapi import generate_responses
from app.db.session import get_session
from app.exceptions.auth import ExpiredTokenException, InvalidTokenException, TokenMissingException
from app.exceptions.review import ReviewCreationException, ReviewFetchException
from app.schemas.review import CreateReviewRequest, ReviewResponse, ReviewWithRelations
from app.services.auth import get_current_user_ann
from app.services.review import create_review_service, latest_reviews_service, list_reviews_service
from app.services.review_query import build_review_query

router = APIRouter(prefix="/reviews", tags=["reviews"])

get_session_ann = Annotated[AsyncSession, Depends(get_session)]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ReviewResponse,
    summary="Create review",
    responses=generate_responses(
        TokenMissingException,
        InvalidTokenException,
        ExpiredTokenException,
        ReviewCreationException,
        validation=True,
    ),
)
async def create_review(
    review: CreateReviewRequest,
    current_user: get_current_user_ann,
    db: get_session_ann,
) -> ReviewResponse:
    """
    Создание отзыва текущим пользователем.

    :param review: Данные отзыва.
    :param current_user: Пользователь из access-токена.
    :param db: Асинхронная сессия базы данных.
    :return: Созданный отзыв.
    :rtype: ReviewResponse
    """
    return await create_review_service(review=review, current_user=current_user, db=db)


@router.get(
    "/latest",
    status_code=status.HTTP_200_OK,
    response_model=list[ReviewWithRelations],
    summary="Get latest reviews",
    responses=generate_responses(ReviewFetchException),
)
async def latest_reviews(db: get_session_ann) -> list[ReviewWithRelations]:
    """Пять последних отзывов."""
    return await latest_reviews_service(db=db)


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=list[ReviewWithRelations],
    summary="List reviews",
    description="Сортировка только по rating или created_at, неизвестные значения параметров игнорируются",
    responses=generate_responses(ReviewFetchException),
)
async def list_reviews(
    db: get_session_ann,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    order: str | None = None,
    rating: str | None = None,
) -> list[ReviewWithRelations]:
    """
    Список отзывов.

    :param db: Асинхронная сессия базы данных.
    :param sort_by: Поле сортировки (rating, created_at).
    :param order: Направление (asc, иначе desc).
    :param rating: Фильтр по оценке.
    :return: Отзывы с автором и фильмом.
    :rtype: list[ReviewWithRelations]
    """
    query = build_review_query(sort_by=sort_by, order=order, rating=rating)
    return await list_reviews_service(query=query, db=db)
