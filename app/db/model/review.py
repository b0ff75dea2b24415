from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.model.base import Base

if TYPE_CHECKING:
    from app.db.model.movie import Movie
    from app.db.model.user import User


class Review(Base):
    """Отзыв пользователя о фильме."""

    __tablename__ = "review"
    __table_args__ = (CheckConstraint("rating BETWEEN 1 AND 5", name="ck_review_rating_range"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    movie_id: Mapped[str] = mapped_column(String(32), ForeignKey("movie.id"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("user.id"), nullable=False, index=True)

    rating: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    comment_general: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    comment_spoiler: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False, index=True
    )

    author: Mapped[User] = relationship("User", back_populates="reviews")
    movie: Mapped[Movie] = relationship("Movie", back_populates="reviews")
