from fastapi import HTTPException
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from app.core import messages


class AppHTTPException(HTTPException):
    """
    Базовый класс HTTP-исключений приложения.

    Клиент получает только `detail`, внутренние причины ошибки логируются на сервере.

    :cvar int status_code: Код ошибки из библиотеки starlette.
    :cvar str detail: Сообщение для клиента.
    :cvar dict example: Пример ответа для OpenAPI.
    :cvar dict headers: HTTP-заголовки ответа.
    """

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = messages.SOMETHING_WENT_WRONG
    example: dict[str, str] = {"detail": messages.SOMETHING_WENT_WRONG}
    headers: dict[str, str] = {}

    def __init__(
        self,
        status_code: int | None = None,
        detail: str | None = None,
        example: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """
        Инициализация исключения.

        :param status_code: HTTP-код состояния.
        :param detail: Описание ошибки.
        :param example: Пример ответа для документации.
        :param headers: HTTP-заголовки для ответа.
        """
        super().__init__(
            status_code=status_code or self.status_code, detail=detail or self.detail, headers=headers or self.headers
        )
        self.example = example or self.example
