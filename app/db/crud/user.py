from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.model import User


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """
    Получает пользователя из базы данных по электронной почте.

    :param db: Асинхронная сессия базы данных.
    :param email: Электронная почта пользователя.
    :return: Объект пользователя или None, если пользователь не найден.
    :rtype: User | None
    """
    query = select(User).where(User.email == email)
    result = (await db.execute(query)).scalar_one_or_none()

    return result


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """
    Получает пользователя из базы данных по ID.

    :param db: Асинхронная сессия базы данных.
    :param user_id: ID пользователя в БД.
    :return: Объект пользователя или None, если пользователь не найден.
    :rtype: User | None
    """
    query = select(User).where(User.id == user_id)
    result = (await db.execute(query)).scalar_one_or_none()

    return result


async def create_new_user(user_data: dict[str, Any], db: AsyncSession) -> User:
    """
    Создает нового пользователя в базе данных.

    :param user_data: Данные о пользователе (name, email, password_hash, опционально role и status).
    :param db: Асинхронная сессия базы данных.
    :return: Объект пользователя.
    :rtype: User
    :raises IntegrityError: Если email уже занят.
    """
    user: User = User(**user_data)
    db.add(user)
    await db.flush()

    return user
