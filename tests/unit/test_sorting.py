import pytest

from core.models import SortBy, Trip
from core.services.sorting import sort_trips


def _trip(duration, cost, id=None):
    return Trip(origin="BCN", destination="MAD", duration=duration, cost=cost, id=id)


@pytest.fixture
def trips():
    return [_trip(3, 20, "1"), _trip(1, 90, "2"), _trip(2, 50, "3")]


def test_fastest_sorts_by_duration(trips):
    result = sort_trips(trips, SortBy.FASTEST)
    assert [(t.duration, t.cost) for t in result] == [(1, 90), (2, 50), (3, 20)]


def test_cheapest_sorts_by_cost(trips):
    result = sort_trips(trips, SortBy.CHEAPEST)
    assert [t.cost for t in result] == [20, 50, 90]


def test_accepts_plain_string_key(trips):
    assert [t.id for t in sort_trips(trips, "cheapest")] == ["1", "3", "2"]


def test_no_key_keeps_input_order(trips):
    result = sort_trips(trips, None)
    assert result == trips
    assert result is not trips


def test_input_is_not_mutated(trips):
    before = list(trips)
    sort_trips(trips, SortBy.FASTEST)
    assert trips == before


def test_ties_keep_input_order():
    trips = [_trip(2, 10, "a"), _trip(1, 10, "b"), _trip(2, 5, "c"), _trip(1, 7, "d")]

    assert [t.id for t in sort_trips(trips, SortBy.FASTEST)] == ["b", "d", "a", "c"]
    assert [t.id for t in sort_trips(trips, SortBy.CHEAPEST)] == ["c", "d", "a", "b"]


def test_sorting_sorted_input_is_idempotent(trips):
    once = sort_trips(trips, SortBy.CHEAPEST)
    assert sort_trips(once, SortBy.CHEAPEST) == once


def test_empty_input():
    assert sort_trips([], SortBy.FASTEST) == []


def test_unknown_key_rejected(trips):
    with pytest.raises(ValueError):
        sort_trips(trips, "shortest")
