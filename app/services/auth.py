import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.crud.user import create_new_user, get_user_by_email
from app.db.model import User
from app.exceptions.auth import InvalidCredentialsException, TokenMissingException
from app.exceptions.user import UserAlreadyExistsException, UserCreationException
from app.schemas.token import TokenData, TokenResponse
from app.schemas.user import RegisterResponse, RegisterUserRequest, UserPublic
from app.services.security.hash import get_password_hash, verify_password
from app.services.security.jwt import form_access_token, validate_token

logger = logging.getLogger(__name__)

# Сверяется с паролем, если email не найден: bcrypt выполняется при любом входе
_DUMMY_PASSWORD_HASH = get_password_hash("dummy-password-for-unknown-email")


async def register_user_service(user: RegisterUserRequest, db: AsyncSession) -> RegisterResponse:
    """
    Регистрирует нового пользователя.

    :param user: Данные пользователя (name, email, password).
    :param db: Асинхронная сессия базы данных.
    :return: Сообщение об успехе и публичные данные пользователя.
    :rtype: RegisterResponse
    :raises UserAlreadyExistsException: Если email уже существует.
    :raises UserCreationException: Если произошла ошибка при создании пользователя.
    """
    existing_user = await get_user_by_email(email=user.email, db=db)
    if existing_user:
        raise UserAlreadyExistsException

    user_data: dict = user.model_dump(exclude={"password"})
    user_data["password_hash"] = get_password_hash(user.password)
    try:
        new_user = await create_new_user(user_data=user_data, db=db)
    except IntegrityError as e:
        # Параллельная регистрация с тем же email
        raise UserAlreadyExistsException from e
    except SQLAlchemyError as e:
        logger.exception("Failed to create user")
        raise UserCreationException from e

    logger.info("User %s registered", new_user.id)
    return RegisterResponse(msg="User created successfully", user=UserPublic.model_validate(new_user))


async def authenticate_user(email: str, password: str, db: AsyncSession) -> User:
    """
    Аутентифицирует пользователя по email и паролю.

    Неизвестный email и неверный пароль неразличимы для клиента.

    :param email: Электронная почта пользователя.
    :param password: Пароль пользователя.
    :param db: Асинхронная сессия базы данных.
    :return: Данные о пользователе в БД.
    :rtype: User
    :raises InvalidCredentialsException: Если пользователь не найден или пароль неверный.
    """
    user = await get_user_by_email(email=email, db=db)

    password_hash = user.password_hash if user is not None else _DUMMY_PASSWORD_HASH
    if not verify_password(password, password_hash) or user is None:
        logger.warning("Failed login attempt for %s", email)
        raise InvalidCredentialsException

    return user


async def login_user_service(email: str, password: str, db: AsyncSession) -> TokenResponse:
    """
    Аутентификация пользователя с возвращением access-токена.

    :param email: Электронная почта пользователя.
    :param password: Пароль пользователя.
    :param db: Асинхронная сессия базы данных.
    :return: Access-токен.
    :rtype: TokenResponse
    :raises InvalidCredentialsException: Если email или пароль неверные.
    """
    user = await authenticate_user(email=email, password=password, db=db)
    logger.info("User %s logged in", user.id)
    return TokenResponse(token=form_access_token(user_id=user.id, role=user.role))


bearer_scheme = HTTPBearer(auto_error=False)
bearer_ann = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


async def get_current_user(credentials: bearer_ann) -> TokenData:
    """
    DI для получения пользователя из заголовка `Authorization: Bearer <token>`.

    :param credentials: Схема и токен из заголовка (None, если заголовка нет).
    :return: ID, role пользователя.
    :rtype: TokenData
    :raises TokenMissingException: Если токен не передан или схема не "Bearer" (с учётом регистра).
    :raises ExpiredTokenException: Если токен просрочен.
    :raises InvalidTokenException: Если токен невалиден.
    """
    if credentials is None or credentials.scheme != "Bearer" or not credentials.credentials:
        raise TokenMissingException
    return validate_token(token=credentials.credentials)


get_current_user_ann = Annotated[TokenData, Depends(get_current_user)]
