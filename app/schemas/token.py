from pydantic import BaseModel

from app.db.model.user import UserRole


class TokenResponse(BaseModel):
    """
    Выданный при входе access-токен.

    :cvar str token: JWT для заголовка `Authorization: Bearer <token>`.
    """

    token: str


class TokenData(BaseModel):
    """
    Информация о пользователе из токена.

    Возвращается зависимостью аутентификации и явно передается в бизнес-логику.

    :cvar int id: ID пользователя в БД.
    :cvar UserRole role: Роль пользователя.
    """

    id: int
    role: UserRole
