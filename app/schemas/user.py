import re

from pydantic import BaseModel, ConfigDict, field_validator

from app.core import messages
from app.db.model.user import UserRole, UserStatus
from app.schemas.success_msg import SuccessResponse
from app.schemas.validators import Email, field_error

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 72
PASSWORD_PATTERN = re.compile(r"[A-Za-z0-9]+")


class RegisterUserRequest(BaseModel):
    """
    Схема запроса на регистрацию.

    :cvar str name: Имя пользователя.
    :cvar Email email: Электронная почта пользователя, уникальный идентификатор.
    :cvar str password: Пароль (латинские буквы и цифры, от 8 символов).
    """

    name: str
    email: Email
    password: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        """Имя не может быть пустым."""
        if not value:
            raise field_error("name_required", messages.NAME_REQUIRED)
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        """
        Валидация сложности пароля.

        Правила:
        - не короче 8 символов;
        - только латинские буквы и цифры;
        - не длиннее 72 символов (ограничение bcrypt).
        """
        if len(value) < PASSWORD_MIN_LENGTH:
            raise field_error("password_too_short", messages.PASSWORD_MIN_LENGTH)
        if not PASSWORD_PATTERN.fullmatch(value):
            raise field_error("password_not_alphanumeric", messages.PASSWORD_ALPHANUMERIC)
        if len(value) > PASSWORD_MAX_LENGTH:
            raise field_error("password_too_long", messages.PASSWORD_MAX_LENGTH)
        return value


class LoginUserRequest(BaseModel):
    """
    Схема запроса для входа.

    :cvar Email email: Электронная почта пользователя.
    :cvar str password: Пароль пользователя.
    """

    email: Email
    password: str

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise field_error("password_required", messages.PASSWORD_REQUIRED)
        return value


class UserPublic(BaseModel):
    """
    Публичные данные пользователя.

    :cvar int id: Уникальный идентификатор пользователя.
    :cvar str name: Имя пользователя.
    :cvar str email: Электронная почта пользователя.
    """

    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class UserResponse(UserPublic):
    """
    Данные текущего пользователя.

    :cvar UserRole role: Роль пользователя.
    :cvar UserStatus status: Статус учётной записи.
    """

    role: UserRole
    status: UserStatus


class RegisterResponse(SuccessResponse):
    """
    Ответ на успешную регистрацию.

    :cvar str msg: Сообщение об успехе.
    :cvar UserPublic user: Созданный пользователь.
    """

    user: UserPublic
