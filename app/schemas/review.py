from datetime import date, datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.core import messages
from app.schemas.validators import field_error

RATING_MIN = 1
RATING_MAX = 5
COMMENT_MAX_LENGTH = 1000


class CreateReviewRequest(BaseModel):
    """
    Схема запроса на создание отзыва.

    :cvar str movie_id: ID сохранённого фильма (в JSON - movieId).
    :cvar int rating: Оценка от 1 до 5.
    :cvar str | None comment_general: Комментарий без спойлеров.
    :cvar str | None comment_spoiler: Комментарий со спойлерами.

    Валидация:
    - должен быть заполнен хотя бы один комментарий.
    """

    movie_id: str = Field(alias="movieId")
    rating: int
    comment_general: str | None = None
    comment_spoiler: str | None = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("movie_id")
    @classmethod
    def validate_movie_id(cls, value: str) -> str:
        if not value:
            raise field_error("movie_id_required", messages.MOVIE_ID_REQUIRED)
        return value

    @field_validator("rating", mode="before")
    @classmethod
    def validate_rating_type(cls, value: Any) -> Any:
        """Оценка должна прийти в JSON целым числом, строки и дробные не приводятся."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise field_error("rating_not_integer", messages.RATING_NUMBER)
        return value

    @field_validator("rating")
    @classmethod
    def validate_rating_range(cls, value: int) -> int:
        if not RATING_MIN <= value <= RATING_MAX:
            raise field_error("rating_out_of_range", messages.RATING_RANGE)
        return value

    @field_validator("comment_general", "comment_spoiler")
    @classmethod
    def validate_comment_length(cls, value: str | None) -> str | None:
        if value is not None and len(value) > COMMENT_MAX_LENGTH:
            raise field_error("comment_too_long", messages.REVIEW_MAX_LENGTH)
        return value

    @model_validator(mode="after")
    def check_comment_present(self) -> Self:
        """Хотя бы один из комментариев должен быть непустым."""
        if not (self.comment_general or self.comment_spoiler):
            raise field_error("comment_required", messages.REVIEW_COMMENT_REQUIRED, field="comment_general")
        return self


class ReviewResponse(BaseModel):
    """
    Отзыв в ответе API.

    :cvar int id: ID отзыва.
    :cvar str movie_id: ID фильма (в JSON - movieId).
    :cvar int user_id: ID автора (в JSON - userId).
    :cvar int rating: Оценка.
    :cvar str | None comment_general: Комментарий без спойлеров.
    :cvar str | None comment_spoiler: Комментарий со спойлерами.
    :cvar datetime created_at: Дата создания.
    """

    id: int
    movie_id: str = Field(alias="movieId")
    user_id: int = Field(alias="userId")
    rating: int
    comment_general: str | None = None
    comment_spoiler: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ReviewAuthor(BaseModel):
    """Автор отзыва."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class ReviewMovie(BaseModel):
    """Фильм, к которому относится отзыв."""

    id: str
    title: str
    poster_path: str | None = None
    release_date: date | None = None

    model_config = ConfigDict(from_attributes=True)


class ReviewWithRelations(ReviewResponse):
    """Отзыв вместе с автором и фильмом для списков."""

    author: ReviewAuthor
    movie: ReviewMovie
