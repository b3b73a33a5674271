from datetime import date, datetime

import pytest

from shared.domain.value_objects import DateRange, as_calendar_date


def test_single_day_range_covers_one_date():
    dates = DateRange(date(2025, 12, 25), date(2025, 12, 25))

    assert list(dates.days()) == [date(2025, 12, 25)]
    assert len(dates) == 1
    assert dates.nights == 0


def test_days_are_inclusive_and_ascending():
    dates = DateRange(date(2025, 12, 30), date(2026, 1, 2))

    assert list(dates.days()) == [
        date(2025, 12, 30),
        date(2025, 12, 31),
        date(2026, 1, 1),
        date(2026, 1, 2),
    ]
    assert len(dates) == 4
    assert dates.nights == 3


def test_reversed_range_is_rejected():
    with pytest.raises(ValueError):
        DateRange(date(2025, 12, 5), date(2025, 12, 4))


def test_shared_boundary_day_overlaps():
    first = DateRange(date(2025, 12, 1), date(2025, 12, 3))

    assert first.overlaps_with(DateRange(date(2025, 12, 3), date(2025, 12, 5)))
    assert not first.overlaps_with(DateRange(date(2025, 12, 4), date(2025, 12, 6)))


def test_contains_checks_both_ends():
    dates = DateRange(date(2025, 12, 24), date(2025, 12, 26))

    assert dates.contains(date(2025, 12, 24))
    assert dates.contains(date(2025, 12, 26))
    assert not dates.contains(date(2025, 12, 27))


def test_datetimes_are_reduced_to_their_calendar_day():
    dates = DateRange(datetime(2025, 12, 24, 23, 59), datetime(2025, 12, 24, 0, 1))

    assert dates.start_date == dates.end_date == date(2025, 12, 24)
    assert as_calendar_date(datetime(2025, 1, 1, 12)) == date(2025, 1, 1)


def test_non_dates_are_rejected():
    with pytest.raises(TypeError):
        DateRange("2025-12-01", date(2025, 12, 2))
