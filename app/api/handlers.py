import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from app.core import messages

logger = logging.getLogger(__name__)

_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def format_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """
    Превращает ошибки pydantic в пары (поле, сообщение).

    Проверки на уровне модели указывают поле через ctx["field"].

    :param errors: Ошибки из RequestValidationError.errors().
    :return: Список {"field": ..., "message": ...}.
    :rtype: list[dict[str, str]]
    """
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATIONS:
            loc = loc[1:]
        ctx = error.get("ctx") or {}
        field = ctx.get("field") if isinstance(ctx.get("field"), str) else ".".join(loc)
        formatted.append({"field": field or "body", "message": error.get("msg", messages.INVALID_REQUEST)})
    return formatted


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Ошибки валидации запроса - 400 с перечнем полей."""
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"detail": messages.INVALID_REQUEST, "errors": format_validation_errors(list(exc.errors()))},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Любая непредусмотренная ошибка - 500 без подробностей для клиента."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": messages.SOMETHING_WENT_WRONG},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Подключает обработчики ошибок к приложению."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
