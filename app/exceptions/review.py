from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from app.core import messages
from app.exceptions.base import AppHTTPException


class ReviewCreationException(AppHTTPException):
    """Не получилось создать отзыв (например, фильм не сохранён в БД)."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = messages.REVIEW_CREATE_FAILED
    example = {"detail": messages.REVIEW_CREATE_FAILED}


class ReviewFetchException(AppHTTPException):
    """Ошибка БД при получении отзывов."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = messages.REVIEW_FETCH_FAILED
    example = {"detail": messages.REVIEW_FETCH_FAILED}
