from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum as SAEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.model.base import Base

if TYPE_CHECKING:
    from app.db.model.review import Review


class UserRole(str, Enum):
    """
    Роли пользователей в системе.

    :cvar str USER: Обычный пользователь.
    :cvar str ADMIN: Администратор.
    """

    USER = "USER"
    ADMIN = "ADMIN"


class UserStatus(str, Enum):
    """
    Статус учётной записи.

    :cvar str ACTIVE: Активный пользователь.
    :cvar str INACTIVE: Отключённый пользователь.
    """

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class User(Base):
    """Пользователь приложения с отзывами о фильмах.

    Пароль хранится только в виде хеша и никогда не возвращается клиенту.
    """

    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[UserRole] = mapped_column(SAEnum(UserRole, name="role"), default=UserRole.USER, nullable=False)
    status: Mapped[UserStatus] = mapped_column(
        SAEnum(UserStatus, name="user_status"), default=UserStatus.ACTIVE, nullable=False
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False
    )

    reviews: Mapped[list[Review]] = relationship("Review", back_populates="author")
