from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, field_validator


class SaveMovieRequest(BaseModel):
    """
    Фильм, выбранный пользователем из результатов поиска TMDb.

    :cvar int id: ID фильма в TMDb.
    :cvar str title: Название.
    :cvar date | None release_date: Дата выхода.
    :cvar str | None poster_path: Путь к постеру в TMDb.
    :cvar str | None overview: Описание.
    """

    id: StrictInt
    title: StrictStr
    release_date: date | None = None
    poster_path: StrictStr | None = None
    overview: StrictStr | None = None

    @field_validator("release_date", mode="before")
    @classmethod
    def empty_release_date(cls, value: Any) -> Any:
        # TMDb отдаёт "" для фильмов без даты
        if value == "":
            return None
        return value


class MovieResponse(BaseModel):
    """Сохранённый фильм."""

    id: str
    title: str
    release_date: date | None = None
    poster_path: str | None = None
    overview: str | None = None

    model_config = ConfigDict(from_attributes=True)
