"""
Common Value Objects

- DateRange: An inclusive range of calendar dates (rental start to return day)
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator

from shared.domain.base import ValueObject


def as_calendar_date(value) -> date:
    """Drop the time-of-day part; two datetimes on one day are the same date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date, got {type(value).__name__}")


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a range from start_date to end_date, both inclusive.
    A single-day rental has start_date == end_date.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        # Frozen dataclass, so normalise through object.__setattr__
        object.__setattr__(self, 'start_date', as_calendar_date(self.start_date))
        object.__setattr__(self, 'end_date', as_calendar_date(self.end_date))
        if self.start_date > self.end_date:
            raise ValueError(
                f"Start date ({self.start_date}) must not be after end date ({self.end_date})"
            )

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        Both ends are inclusive, so ranges sharing a boundary day overlap.

        Examples:
            - DateRange(1, 3) overlaps with DateRange(3, 5) -> True
            - DateRange(1, 3) overlaps with DateRange(4, 6) -> False (adjacent)
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        return (self.start_date <= other.end_date and
                self.end_date >= other.start_date)

    def contains(self, check_date: date) -> bool:
        """Check if a date is within this range"""
        return self.start_date <= as_calendar_date(check_date) <= self.end_date

    def days(self) -> Iterator[date]:
        """Iterate over every date in the range, ascending"""
        current = self.start_date
        while current <= self.end_date:
            yield current
            current += timedelta(days=1)

    @property
    def nights(self) -> int:
        """Number of nights between pick-up and return"""
        return (self.end_date - self.start_date).days

    def __len__(self) -> int:
        """Number of calendar days covered, both ends included"""
        return self.nights + 1

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
