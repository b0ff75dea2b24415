from sqlalchemy.ext.asyncio import AsyncSession

from app.db.crud.user import get_user_by_id
from app.exceptions.user import UserNotFoundException
from app.schemas.user import UserResponse


async def get_user_data_service(user_id: int, db: AsyncSession) -> UserResponse:
    """
    Функция для получения данных о пользователе.

    :param user_id: ID пользователя в БД.
    :param db: Асинхронная сессия базы данных.
    :return: Основные данные пользователя.
    :rtype: UserResponse
    :raises UserNotFoundException: Если пользователь не найден.
    """
    user_db = await get_user_by_id(user_id=user_id, db=db)
    if user_db is None:
        raise UserNotFoundException
    return UserResponse.model_validate(user_db)
