from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from app.api.openapi import generate_responses
from app.db.session import get_session
from app.exceptions.auth import (
    ExpiredTokenException,
    InvalidCredentialsException,
    InvalidTokenException,
    TokenMissingException,
)
from app.exceptions.user import UserAlreadyExistsException, UserCreationException, UserNotFoundException
from app.schemas.token import TokenResponse
from app.schemas.user import LoginUserRequest, RegisterResponse, RegisterUserRequest, UserResponse
from app.services.auth import get_current_user_ann, login_user_service, register_user_service
from app.services.user import get_user_data_service

router = APIRouter(prefix="/users", tags=["users"])

get_session_ann = Annotated[AsyncSession, Depends(get_session)]


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    summary="Register a new user",
    responses=generate_responses(UserAlreadyExistsException, UserCreationException, validation=True),
)
async def register(user: RegisterUserRequest, db: get_session_ann) -> RegisterResponse:
    """
    Регистрация нового пользователя.

    :param user: Данные пользователя (name, email, password).
    :param db: Асинхронная сессия базы данных.
    :return: Публичные данные созданного пользователя.
    :rtype: RegisterResponse
    """
    return await register_user_service(user=user, db=db)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=TokenResponse,
    summary="Login user",
    responses=generate_responses(InvalidCredentialsException, validation=True),
)
async def login(credentials: LoginUserRequest, db: get_session_ann) -> TokenResponse:
    """
    Аутентификация пользователя с возвращением access-токена.

    :param credentials: Email и пароль.
    :param db: Асинхронная сессия базы данных.
    :return: Access-токен в теле ответа.
    :rtype: TokenResponse
    """
    return await login_user_service(email=credentials.email, password=credentials.password, db=db)


@router.get(
    "/me",
    status_code=status.HTTP_200_OK,
    response_model=UserResponse,
    summary="Get info about current user",
    responses=generate_responses(
        TokenMissingException,
        InvalidTokenException,
        ExpiredTokenException,
        UserNotFoundException,
    ),
)
async def read_user_me(current_user: get_current_user_ann, db: get_session_ann) -> UserResponse:
    """
    Возвращает основную информацию о пользователе.

    :param current_user: Текущий пользователь.
    :param db: Асинхронная сессия базы данных.
    :return: Данные текущего пользователя.
    :rtype: UserResponse
    """
    return await get_user_data_service(user_id=current_user.id, db=db)
