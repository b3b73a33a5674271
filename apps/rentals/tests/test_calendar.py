"""Reservation calendar behaviour, run against every store backend."""

from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from apps.rentals.domain.calendar import ReservationCalendar
from apps.rentals.domain.entities import ApplicationRecord
from apps.rentals.domain.exceptions import ConflictError, ValidationError


def _owner(store, start: date, end: date):
    """Reserved dates reference an application row, so create one first."""
    record = ApplicationRecord(
        name="홍길동",
        phone="010-1234-5678",
        start_date=start,
        end_date=end,
        rental_period="1night2days",
    )
    return store.create(record).id


def test_reserve_range_claims_every_day(store):
    calendar = ReservationCalendar(store)
    owner = _owner(store, date(2025, 12, 1), date(2025, 12, 3))

    calendar.reserve_range(date(2025, 12, 1), date(2025, 12, 3), owner)

    assert calendar.list_reserved() == [date(2025, 12, 1), date(2025, 12, 2), date(2025, 12, 3)]
    assert calendar.owner_of(date(2025, 12, 2)) == owner


def test_partial_overlap_reserves_nothing(store):
    calendar = ReservationCalendar(store)
    first = _owner(store, date(2025, 12, 3), date(2025, 12, 3))
    second = _owner(store, date(2025, 12, 1), date(2025, 12, 5))
    calendar.reserve_range(date(2025, 12, 3), date(2025, 12, 3), first)

    with pytest.raises(ConflictError) as exc_info:
        calendar.reserve_range(date(2025, 12, 1), date(2025, 12, 5), second)

    assert exc_info.value.dates == [date(2025, 12, 3)]
    assert calendar.list_reserved() == [date(2025, 12, 3)]
    assert calendar.owner_of(date(2025, 12, 1)) is None


def test_same_owner_cannot_reserve_twice(store):
    calendar = ReservationCalendar(store)
    owner = _owner(store, date(2025, 12, 24), date(2025, 12, 26))
    calendar.reserve_range(date(2025, 12, 24), date(2025, 12, 26), owner)

    with pytest.raises(ConflictError):
        calendar.reserve_range(date(2025, 12, 24), date(2025, 12, 26), owner)

    assert len(calendar.list_reserved()) == 3


def test_list_reserved_honours_inclusive_bounds(store):
    calendar = ReservationCalendar(store)
    owner = _owner(store, date(2025, 12, 1), date(2025, 12, 10))
    calendar.reserve_range(date(2025, 12, 1), date(2025, 12, 10), owner)

    assert calendar.list_reserved(date(2025, 12, 9)) == [date(2025, 12, 9), date(2025, 12, 10)]
    assert calendar.list_reserved(None, date(2025, 12, 1)) == [date(2025, 12, 1)]
    assert calendar.list_reserved(date(2025, 12, 4), date(2025, 12, 5)) == [
        date(2025, 12, 4),
        date(2025, 12, 5),
    ]
    assert calendar.list_reserved(date(2025, 12, 5), date(2025, 12, 4)) == []


def test_reversed_range_is_a_validation_error(memory_store):
    calendar = ReservationCalendar(memory_store)

    with pytest.raises(ValidationError) as exc_info:
        calendar.reserve_range(date(2025, 12, 5), date(2025, 12, 1), uuid4())

    assert exc_info.value.issues[0]["field"] == "endDate"
    assert calendar.list_reserved() == []
