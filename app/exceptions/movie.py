from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from app.core import messages
from app.exceptions.base import AppHTTPException


class MovieSearchQueryMissingException(AppHTTPException):
    """Не передан поисковый запрос."""

    status_code = HTTP_400_BAD_REQUEST
    detail = messages.SEARCH_QUERY_REQUIRED
    example = {"detail": messages.SEARCH_QUERY_REQUIRED}


class MovieSearchException(AppHTTPException):
    """Внешний сервис метаданных (TMDb) не ответил или вернул ошибку."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = messages.MOVIE_SEARCH_FAILED
    example = {"detail": messages.MOVIE_SEARCH_FAILED}


class MovieSaveException(AppHTTPException):
    """Не получилось сохранить фильм в БД."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    detail = messages.MOVIE_SAVE_FAILED
    example = {"detail": messages.MOVIE_SAVE_FAILED}
