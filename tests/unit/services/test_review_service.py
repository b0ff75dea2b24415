from datetime import UTC, date, datetime
from unittest.mock import AsyncMock

import pytest
from pytest_mock import MockerFixture
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.model import Movie, Review, User, UserRole
from app.exceptions.review import ReviewCreationException, ReviewFetchException
from app.schemas.review import CreateReviewRequest, ReviewResponse
from app.schemas.token import TokenData
from app.services.review import (
    LATEST_REVIEWS_LIMIT,
    create_review_service,
    latest_reviews_service,
    list_reviews_service,
)
from app.services.review_query import LATEST_QUERY, build_review_query


@pytest.fixture
def mock_db() -> AsyncSession:
    """Мокаем AsyncSession."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def current_user() -> TokenData:
    return TokenData(id=3, role=UserRole.USER)


@pytest.fixture
def db_review() -> Review:
    review = Review(
        id=10,
        movie_id="27205",
        user_id=3,
        rating=5,
        comment_general="Masterpiece",
        created_at=datetime(2024, 5, 1, tzinfo=UTC),
    )
    review.author = User(id=3, name="Test User", email="test@example.com", password_hash="hash")
    review.movie = Movie(id="27205", title="Inception", release_date=date(2010, 7, 16))
    return review


######################### ТЕСТЫ create_review_service ########################


@pytest.mark.asyncio
async def test_create_review_service_success(
    mock_db: AsyncSession, mocker: MockerFixture, current_user: TokenData, db_review: Review
) -> None:
    """Автор берётся из токена, а не из тела запроса."""
    create_mock = mocker.patch("app.services.review.create_review", return_value=db_review)
    request = CreateReviewRequest(movieId="27205", rating=5, comment_general="Masterpiece")

    result = await create_review_service(request, current_user, mock_db)

    assert isinstance(result, ReviewResponse)
    assert result.user_id == 3
    assert result.model_dump(by_alias=True)["movieId"] == "27205"
    assert create_mock.call_args.kwargs["review_data"] == {
        "movie_id": "27205",
        "user_id": 3,
        "rating": 5,
        "comment_general": "Masterpiece",
        "comment_spoiler": None,
    }


@pytest.mark.asyncio
async def test_create_review_service_unknown_movie(
    mock_db: AsyncSession, mocker: MockerFixture, current_user: TokenData
) -> None:
    """Нарушение внешнего ключа - 500."""
    mocker.patch(
        "app.services.review.create_review",
        side_effect=IntegrityError("statement", {}, Exception("FOREIGN KEY constraint failed")),
    )
    request = CreateReviewRequest(movieId="missing", rating=3, comment_spoiler="twist")

    with pytest.raises(ReviewCreationException) as exc:
        await create_review_service(request, current_user, mock_db)

    assert exc.value.status_code == 500


######################### ТЕСТЫ list_reviews_service ########################


@pytest.mark.asyncio
async def test_list_reviews_service_success(mock_db: AsyncSession, mocker: MockerFixture, db_review: Review) -> None:
    query = build_review_query(sort_by="rating", order="asc")
    get_mock = mocker.patch("app.services.review.get_reviews", return_value=[db_review])

    result = await list_reviews_service(query, mock_db)

    assert len(result) == 1
    assert result[0].author.name == "Test User"
    assert result[0].movie.title == "Inception"
    get_mock.assert_awaited_once_with(query=query, db=mock_db)


@pytest.mark.asyncio
async def test_list_reviews_service_db_error(mock_db: AsyncSession, mocker: MockerFixture) -> None:
    mocker.patch(
        "app.services.review.get_reviews",
        side_effect=OperationalError("statement", {}, Exception("db down")),
    )

    with pytest.raises(ReviewFetchException):
        await list_reviews_service(LATEST_QUERY, mock_db)


######################### ТЕСТЫ latest_reviews_service ########################


@pytest.mark.asyncio
async def test_latest_reviews_service(mock_db: AsyncSession, mocker: MockerFixture, db_review: Review) -> None:
    latest_mock = mocker.patch("app.services.review.get_latest_reviews", return_value=[db_review])

    result = await latest_reviews_service(mock_db)

    assert [review.id for review in result] == [10]
    latest_mock.assert_awaited_once_with(db=mock_db, limit=LATEST_REVIEWS_LIMIT)
