from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.model.base import Base

if TYPE_CHECKING:
    from app.db.model.review import Review


class Movie(Base):
    """Фильм, сохранённый из TMDb.

    Идентификатор совпадает с id фильма во внешнем сервисе (хранится строкой).
    """

    __tablename__ = "movie"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    poster_path: Mapped[str | None] = mapped_column(String(255), nullable=True)
    overview: Mapped[str | None] = mapped_column(Text, nullable=True)

    reviews: Mapped[list[Review]] = relationship("Review", back_populates="movie")
