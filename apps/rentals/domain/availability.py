"""Read-only availability queries over the reservation calendar."""

from __future__ import annotations

from datetime import date

from .calendar import ReservationCalendar, to_range


class AvailabilityChecker:
    """
    Answers whether a range is free. No side effects.

    Inside a submission this is only a fast path; the calendar's insert
    is what actually decides a conflict.
    """

    def __init__(self, calendar: ReservationCalendar):
        self.calendar = calendar

    def is_range_available(self, start, end) -> bool:
        """True iff no date in ``[start, end]`` is reserved."""
        dates = to_range(start, end)
        return not self.calendar.store.has_reserved(dates.start_date, dates.end_date)

    def conflicting_dates(self, start, end) -> list[date]:
        """Reserved dates inside ``[start, end]``, ascending."""
        dates = to_range(start, end)
        return self.calendar.list_reserved(dates.start_date, dates.end_date)
