"""
Reservation Calendar

The set of claimed dates, each mapped to the application holding it.
All date claims go through ``reserve_range``; it is the only writer of
reserved dates and is backend independent.

Strategy:
1. Expand the inclusive range into its days
2. Hand the whole batch to the store in one insert
3. Treat a uniqueness violation as the conflict, whatever a prior
   availability check said
"""

from __future__ import annotations

import logging
from datetime import date
from uuid import UUID

from shared.domain.value_objects import DateRange, as_calendar_date

from .exceptions import ConflictError, ReservedDatesTaken, ValidationError

logger = logging.getLogger(__name__)


def to_range(start, end) -> DateRange:
    """Build a DateRange, reporting a reversed range as a ValidationError."""
    try:
        return DateRange(start, end)
    except ValueError as exc:
        raise ValidationError.single("endDate", "반납일은 대여 시작일 이후여야 합니다.") from exc
    except TypeError as exc:
        raise ValidationError.single("startDate", str(exc)) from exc


class ReservationCalendar:
    """Claimed dates over a reservation store."""

    def __init__(self, store):
        self.store = store

    def list_reserved(self, start: date | None = None, end: date | None = None) -> list[date]:
        """
        Reserved dates, ascending, optionally bounded (bounds inclusive).

        An empty list is returned when ``start`` is after ``end``.
        """
        start = as_calendar_date(start) if start is not None else None
        end = as_calendar_date(end) if end is not None else None
        if start is not None and end is not None and start > end:
            return []
        return self.store.fetch_reserved(start, end)

    def reserve_range(self, start, end, owner_id: UUID) -> DateRange:
        """
        Claim every date in ``[start, end]`` for ``owner_id``

        All or nothing: either every date becomes reserved for the owner
        or none does.

        Raises:
            ConflictError: If any date is already reserved, including by
                the same owner. Carries the blocked dates.
        """
        dates = to_range(start, end)
        days = list(dates.days())

        try:
            self.store.insert_reserved(owner_id, days)
        except ReservedDatesTaken as exc:
            logger.info(f"Range {dates} for {owner_id} conflicts on {len(exc.dates)} date(s)")
            raise ConflictError(exc.dates) from exc

        logger.debug(f"Reserved {len(days)} date(s) {dates} for {owner_id}")
        return dates

    def owner_of(self, day) -> UUID | None:
        return self.store.owner_of(as_calendar_date(day))
