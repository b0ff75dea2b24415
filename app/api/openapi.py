from typing import Any

from app.core import messages
from app.exceptions.base import AppHTTPException

VALIDATION_ERROR_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "detail": {"type": "string"},
        "errors": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {"field": {"type": "string"}, "message": {"type": "string"}},
            },
        },
    },
}


def generate_responses(*exceptions: type[AppHTTPException], validation: bool = False) -> dict[int | str, dict[str, Any]]:
    """
    Генерирует словарь с примерами ответов для документации OpenAPI из списка классов исключений.

    :param exceptions: Классы исключений, унаследованные от AppHTTPException.
    :param validation: Добавить ли ответ 400 с ошибками валидации тела запроса.
    :return: Словарь для параметра `responses` в декораторе FastAPI.
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for exc in exceptions:
        status_code = exc.status_code
        # Если статус-кода еще нет, создаем базовую структуру
        if status_code not in responses:
            responses[status_code] = {
                "description": exc.detail,
                "content": {"application/json": {"examples": {}}},
            }

        response_name = exc.__name__.replace("Exception", "")
        example_data: dict[str, Any] = {"summary": exc.detail, "value": exc.example}

        responses[status_code]["content"]["application/json"]["examples"][response_name] = example_data

    if validation:
        responses.setdefault(
            400,
            {"description": messages.INVALID_REQUEST, "content": {"application/json": {"examples": {}}}},
        )
        responses[400]["content"]["application/json"]["schema"] = VALIDATION_ERROR_SCHEMA
        responses[400]["content"]["application/json"]["examples"]["ValidationError"] = {
            "summary": messages.INVALID_REQUEST,
            "value": {
                "detail": messages.INVALID_REQUEST,
                "errors": [{"field": "email", "message": messages.INVALID_EMAIL}],
            },
        }

    return responses
