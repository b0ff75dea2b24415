from pathlib import Path
import os
import sys

# Добавляем корневую директорию проекта в sys.path
sys.path.append(str(Path(__file__).resolve().parent.parent))

# Настройки читаются при импорте app, поэтому окружение задаём до него
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("TEST_DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-movie-review-api-0123456789")
os.environ.setdefault("ALGORITHM", "HS256")

from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from typing import Any

from httpx import ASGITransport, AsyncClient
import pytest_asyncio
from sqlalchemy import NullPool, StaticPool
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings
from app.db.crud.movie import upsert_movie
from app.db.crud.user import create_new_user
from app.db.model import Base, Movie, Review, User
from app.db.session import get_session
from app.main import app
from app.services.security.hash import get_password_hash
from app.services.security.jwt import form_access_token

TEST_PASSWORD = "password123"


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Создает движок БД и таблицы для теста."""
    url = settings.TEST_DATABASE_URL
    if url.startswith("sqlite"):
        # In-memory SQLite живёт, пока жив единственный коннект
        engine = create_async_engine(
            url, poolclass=StaticPool, connect_args={"check_same_thread": False}, echo=False
        )
    else:
        engine = create_async_engine(url, poolclass=NullPool, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """
    Предоставляет асинхронную сессию базы данных для тестов.

    :param db_engine: Движок тестовой БД.
    :return: Асинхронная сессия базы данных.
    :rtype: AsyncGenerator[AsyncSession, None]
    """
    session_factory = async_sessionmaker(bind=db_engine, expire_on_commit=False, autoflush=False)
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(async_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Создаёт асинхронный тестовый клиент FastAPI с переопределённой зависимостью сессии.

    :param async_session: Асинхронная сессия SQLAlchemy.
    :returns: Асинхронный клиент FastAPI.
    :rtype: AsyncGenerator[AsyncClient, None]
    """

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        yield async_session

    # Сохраняем исходное состояние
    original_overrides = app.dependency_overrides.copy()

    # Добавляем только свое переопределение
    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", follow_redirects=True) as client:
        yield client

    # Восстанавливаем исходное состояние
    app.dependency_overrides = original_overrides


@pytest_asyncio.fixture
async def created_user(async_session: AsyncSession) -> User:
    """Создает тестового пользователя в базе данных."""
    user_data: dict[str, Any] = {
        "name": "Test User",
        "email": "test@example.com",
        "password_hash": get_password_hash(TEST_PASSWORD),
    }
    user = await create_new_user(user_data=user_data, db=async_session)
    await async_session.flush()
    return user


@pytest_asyncio.fixture
async def auth_headers(created_user: User) -> dict[str, str]:
    """Заголовок Authorization с валидным токеном тестового пользователя."""
    token = form_access_token(user_id=created_user.id, role=created_user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def saved_movie(async_session: AsyncSession) -> Movie:
    """Сохраняет тестовый фильм."""
    return await upsert_movie(
        movie_data={
            "id": "27205",
            "title": "Inception",
            "poster_path": "/inception.jpg",
            "release_date": datetime(2010, 7, 16).date(),
        },
        db=async_session,
    )


@pytest_asyncio.fixture
async def reviews(async_session: AsyncSession, created_user: User, saved_movie: Movie) -> list[Review]:
    """Шесть отзывов с разными оценками и датами (от старых к новым)."""
    ratings = [3, 5, 1, 4, 2, 5]
    items = [
        Review(
            movie_id=saved_movie.id,
            user_id=created_user.id,
            rating=rating,
            comment_general=f"Review #{i}",
            created_at=datetime(2024, 1, i + 1, 12, 0, tzinfo=UTC),
        )
        for i, rating in enumerate(ratings)
    ]
    async_session.add_all(items)
    await async_session.flush()
    return items
