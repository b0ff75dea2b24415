from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import ExpiredSignatureError, InvalidTokenError
from pydantic import ValidationError

from app.core.config import settings
from app.db.model.user import UserRole
from app.exceptions.auth import ExpiredTokenException, InvalidTokenException
from app.schemas.token import TokenData

USER_ID = "userId"
ROLE = "role"
EXP = "exp"
IAT = "iat"


def _create_jwt_token_with_expire(payload: dict[str, Any], expires_delta: timedelta) -> str:
    """
    Генерация JWT-токена с указанным сроком действия.

    :param payload: Claim JWT.
    :param expires_delta: Срок действия.
    :return: Токен.
    :rtype: Str
    """
    to_encode = payload.copy()
    now = datetime.now(UTC)
    to_encode.update({IAT: now, EXP: now + expires_delta})
    return jwt.encode(payload=to_encode, key=settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def form_access_token(user_id: int, role: UserRole | str) -> str:
    """
    Генерация access-токена.

    Токен не хранится на сервере, поэтому истечение срока - единственный способ его отозвать.

    :param user_id: ID пользователя в БД.
    :param role: Роль пользователя.
    :return: Access-токен.
    :rtype: Str
    """
    role_value = role.value if isinstance(role, UserRole) else str(role)
    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return _create_jwt_token_with_expire(
        payload={USER_ID: user_id, ROLE: role_value},
        expires_delta=access_token_expires,
    )


def get_payload(token: str) -> dict[str, Any]:
    """
    Декодирование JWT-токена с проверкой подписи и срока действия.

    :param token: JWT-токен.
    :return: Данные payload токена.
    :rtype: Dict
    :raises ExpiredTokenException: Если токен просрочен.
    :raises InvalidTokenException: Если токен невалиден.
    """
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require": [EXP]},
        )
    except ExpiredSignatureError as e:
        raise ExpiredTokenException from e
    except InvalidTokenError as e:
        raise InvalidTokenException from e


def validate_token(token: str) -> TokenData:
    """
    Валидация access-токена.

    :param token: JWT-токен.
    :return: Данные пользователя (id и role).
    :rtype: TokenData
    :raises ExpiredTokenException: Если токен просрочен.
    :raises InvalidTokenException: Если токен невалиден или в нём нет id/роли.
    """
    payload = get_payload(token=token)
    try:
        return TokenData(id=payload[USER_ID], role=payload[ROLE])
    except (KeyError, ValidationError) as e:
        raise InvalidTokenException from e
