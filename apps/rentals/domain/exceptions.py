"""
Rental Domain Errors

Every failure the reservation engine reports to its callers is one of
these. The HTTP layer maps them to status codes in
``apps.rentals.exception_handlers``.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable


class RentalError(Exception):
    """Base class for reservation engine errors."""

    default_message = "Rental request failed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RentalError):
    """Malformed or missing input. Nothing is written."""

    default_message = "Invalid request data"

    def __init__(self, issues: Iterable[dict] | None = None, message: str | None = None):
        self.issues: list[dict] = list(issues or [])
        super().__init__(message)

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([{"field": field, "message": message}])

    def __str__(self) -> str:
        if not self.issues:
            return self.message
        details = "; ".join(f"{issue['field']}: {issue['message']}" for issue in self.issues)
        return f"{self.message} ({details})"


class ConflictError(RentalError):
    """Requested range intersects dates that are already reserved."""

    default_message = "선택하신 날짜에 이미 예약이 있습니다. 다른 날짜를 선택해주세요."

    def __init__(self, dates: Iterable[date] = (), message: str | None = None):
        self.dates: list[date] = sorted(set(dates))
        super().__init__(message)


class NotFoundError(RentalError):
    """Lookup by id matched no application."""

    default_message = "Application not found"

    def __init__(self, application_id=None, message: str | None = None):
        self.application_id = application_id
        super().__init__(message)


class InternalError(RentalError):
    """Store or infrastructure failure. Details are logged, never returned."""

    default_message = "Internal server error"


class ReservedDatesTaken(Exception):
    """Raised by stores when a reserved-date insert hits the unique date."""

    def __init__(self, dates: Iterable[date]):
        self.dates = sorted(set(dates))
        super().__init__(f"Dates already reserved: {', '.join(d.isoformat() for d in self.dates)}")
