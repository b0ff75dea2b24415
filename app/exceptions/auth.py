from starlette.status import HTTP_401_UNAUTHORIZED

from app.core import messages
from app.exceptions.base import AppHTTPException


class TokenMissingException(AppHTTPException):
    """В запросе нет заголовка Authorization вида `Bearer <token>`."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = messages.TOKEN_REQUIRED
    example = {"detail": messages.TOKEN_REQUIRED}
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidTokenException(AppHTTPException):
    """Невалидный токен (подпись, формат или содержимое)."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = messages.TOKEN_INVALID
    example = {"detail": messages.TOKEN_INVALID}
    headers = {"WWW-Authenticate": "Bearer"}


class ExpiredTokenException(AppHTTPException):
    """Истек срок действия токена."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = messages.TOKEN_INVALID
    example = {"detail": messages.TOKEN_INVALID}
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidCredentialsException(AppHTTPException):
    """Неверный email или пароль."""

    status_code = HTTP_401_UNAUTHORIZED
    detail = messages.INVALID_CREDENTIALS
    example = {"detail": messages.INVALID_CREDENTIALS}
    headers = {"WWW-Authenticate": "Bearer"}
