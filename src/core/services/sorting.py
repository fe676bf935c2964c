"""Sort policy shared by flight search and saved trip listing."""

from collections.abc import Iterable
from operator import attrgetter
from typing import Protocol, TypeVar

from core.models.trip import SortBy


class Sortable(Protocol):
    cost: float
    duration: float


T = TypeVar("T", bound=Sortable)

SORT_FIELDS: dict[SortBy, str] = {
    SortBy.FASTEST: "duration",
    SortBy.CHEAPEST: "cost",
}


def sort_trips(trips: Iterable[T], sort_by: SortBy | str | None) -> list[T]:
    """Return a new list ordered ascending by the field behind ``sort_by``.

    ``sorted`` is stable, so ties keep their input order. With no ``sort_by``
    the input order is returned as-is.
    """
    if sort_by is None:
        return list(trips)
    return sorted(trips, key=attrgetter(SORT_FIELDS[SortBy(sort_by)]))
