from datetime import date

from pydantic import ValidationError
import pytest

from app.schemas.movie import SaveMovieRequest


def test_save_movie_request_full() -> None:
    movie = SaveMovieRequest.model_validate(
        {
            "id": 27205,
            "title": "Inception",
            "release_date": "2010-07-16",
            "poster_path": "/inception.jpg",
            "overview": "Dreams",
        }
    )

    assert movie.id == 27205
    assert movie.release_date == date(2010, 7, 16)


def test_save_movie_request_empty_release_date() -> None:
    """Пустая дата из TMDb считается отсутствующей."""
    movie = SaveMovieRequest.model_validate({"id": 1, "title": "Untitled", "release_date": ""})

    assert movie.release_date is None


@pytest.mark.parametrize(
    "payload",
    [
        {"id": "27205", "title": "Inception"},
        {"id": 1.5, "title": "Inception"},
        {"id": 1, "title": 123},
        {"title": "Inception"},
        {"id": 1},
        {"id": 1, "title": "Inception", "release_date": "someday"},
    ],
)
def test_save_movie_request_invalid(payload: dict) -> None:
    with pytest.raises(ValidationError):
        SaveMovieRequest.model_validate(payload)
