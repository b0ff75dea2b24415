from typing import Annotated, Any

from pydantic import EmailStr, ValidationError, ValidatorFunctionWrapHandler, WrapValidator
from pydantic_core import PydanticCustomError

from app.core import messages


def field_error(error_type: str, message: str, field: str | None = None) -> PydanticCustomError:
    """
    Ошибка валидации с нашим сообщением.

    :param error_type: Машиночитаемый тип ошибки.
    :param message: Сообщение для клиента.
    :param field: Поле, к которому относится ошибка (для проверок на уровне модели).
    :return: Исключение pydantic.
    :rtype: PydanticCustomError
    """
    context = {"field": field} if field else None
    return PydanticCustomError(error_type, message, context)


def _validate_email(value: Any, handler: ValidatorFunctionWrapHandler) -> str:
    try:
        return handler(value)
    except ValidationError as e:
        raise field_error("invalid_email", messages.INVALID_EMAIL) from e


Email = Annotated[EmailStr, WrapValidator(_validate_email)]
