"""
Построение запроса на список отзывов из параметров клиента.

Клиент может повлиять на запрос только через белый список: сортировка по
``rating`` или ``created_at`` и фильтр по точной оценке. Всё остальное
игнорируется.
"""

from dataclasses import dataclass
from enum import Enum
import re

from sqlalchemy import Select, false
from sqlalchemy.orm import load_only, selectinload

from app.db.model import Movie, Review, User
from app.schemas.review import RATING_MAX, RATING_MIN

# Больше 10 значащих цифр в любом случае дают число вне диапазона оценок
_LEADING_INT = re.compile(r"\s*([+-]?)0*(\d{1,10})")


class ReviewSortField(str, Enum):
    """
    Поля, по которым разрешена сортировка.

    :cvar str RATING: Оценка.
    :cvar str CREATED_AT: Дата создания.
    """

    RATING = "rating"
    CREATED_AT = "created_at"


class SortOrder(str, Enum):
    """Направление сортировки."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class ReviewQuery:
    """
    Безопасное описание запроса на список отзывов.

    :cvar ReviewSortField sort_field: Поле сортировки.
    :cvar SortOrder order: Направление сортировки.
    :cvar int | None rating: Фильтр по оценке.
    """

    sort_field: ReviewSortField = ReviewSortField.CREATED_AT
    order: SortOrder = SortOrder.DESC
    rating: int | None = None


LATEST_QUERY = ReviewQuery()

_SORT_COLUMNS = {
    ReviewSortField.RATING: Review.rating,
    ReviewSortField.CREATED_AT: Review.created_at,
}


def parse_rating(value: str | None) -> int | None:
    """
    Разбирает фильтр по оценке.

    Берётся целое число в начале строки ("4", " 4", "4stars"), иначе None.
    Длинные числа обрезаются до 10 значащих цифр и остаются вне диапазона оценок.

    :param value: Значение параметра rating.
    :return: Оценка или None.
    :rtype: int | None
    """
    if not value:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1) + match.group(2))


def build_review_query(sort_by: str | None = None, order: str | None = None, rating: str | None = None) -> ReviewQuery:
    """
    Превращает параметры запроса в ReviewQuery.

    :param sort_by: Поле сортировки (rating или created_at).
    :param order: Направление; только "asc" даёт сортировку по возрастанию.
    :param rating: Фильтр по оценке, нечисловые значения игнорируются.
    :return: Описание запроса.
    :rtype: ReviewQuery
    """
    try:
        sort_field = ReviewSortField(sort_by)
    except ValueError:
        return ReviewQuery(rating=parse_rating(rating))

    sort_order = SortOrder.ASC if order == SortOrder.ASC.value else SortOrder.DESC
    return ReviewQuery(sort_field=sort_field, order=sort_order, rating=parse_rating(rating))


def apply_review_query(statement: Select, query: ReviewQuery) -> Select:
    """
    Применяет ReviewQuery к SELECT по отзывам.

    Автор (id, name) и фильм (id, title, poster_path, release_date) подгружаются всегда.

    :param statement: Исходный запрос select(Review).
    :param query: Условия сортировки и фильтрации.
    :return: Итоговый запрос.
    :rtype: Select
    """
    column = _SORT_COLUMNS[query.sort_field]
    if query.order is SortOrder.ASC:
        statement = statement.order_by(column.asc(), Review.id.asc())
    else:
        statement = statement.order_by(column.desc(), Review.id.desc())

    if query.rating is not None:
        if RATING_MIN <= query.rating <= RATING_MAX:
            statement = statement.where(Review.rating == query.rating)
        else:
            # Оценок вне 1..5 не бывает
            statement = statement.where(false())

    return statement.options(
        selectinload(Review.author).options(load_only(User.id, User.name)),
        selectinload(Review.movie).options(load_only(Movie.id, Movie.title, Movie.poster_path, Movie.release_date)),
    )
