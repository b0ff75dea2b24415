from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from app.core import messages
from app.exceptions.base import AppHTTPException


class UserAlreadyExistsException(AppHTTPException):
    """Исключение, когда пользователь пытается зарегистрироваться с email, который уже есть в БД."""

    status_code = HTTP_409_CONFLICT
    detail = messages.DUPLICATE_EMAIL
    example = {"detail": messages.DUPLICATE_EMAIL}


class UserCreationException(AppHTTPException):
    """Не получилось создать пользователя в БД."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = messages.SOMETHING_WENT_WRONG
    example = {"detail": messages.SOMETHING_WENT_WRONG}


class UserNotFoundException(AppHTTPException):
    """Пользователь из токена не найден в БД."""

    status_code = HTTP_404_NOT_FOUND
    detail = "User is not found"
    example = {"detail": "User is not found"}
