"""
Reservation Store Interface

One storage contract, several interchangeable backends. Backends only
provide persistence mechanics: keeping records, keeping reserved-date
rows with a unique date, and running a block of work atomically. The
reservation rules themselves live in ``apps.rentals.domain.calendar``
and ``apps.rentals.application.command_handlers`` and are shared by
every backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, ContextManager
from uuid import UUID

from apps.rentals.domain.entities import ApplicationRecord
from apps.rentals.domain.exceptions import ReservedDatesTaken

__all__ = ["ReservationStore", "ReservedDatesTaken"]


class ReservationStore(ABC):
    """Abstract storage for application records and reserved dates."""

    backend_name = "abstract"

    # ===== Application records =====

    @abstractmethod
    def create(self, record: ApplicationRecord) -> ApplicationRecord:
        """Persist a new record and return it as stored."""

    @abstractmethod
    def list(self) -> list[ApplicationRecord]:
        """All records, newest start date first."""

    @abstractmethod
    def get_by_id(self, application_id: UUID) -> ApplicationRecord | None:
        """The record with this id, or None."""

    # ===== Reserved dates =====

    @abstractmethod
    def fetch_reserved(self, start: date | None = None, end: date | None = None) -> list[date]:
        """Reserved dates within the inclusive bounds, ascending."""

    @abstractmethod
    def has_reserved(self, start: date, end: date) -> bool:
        """True if any date in ``[start, end]`` is reserved."""

    @abstractmethod
    def insert_reserved(self, owner_id: UUID, days: list[date]) -> None:
        """
        Insert one row per day for ``owner_id`` as a single batch.

        Either every row is written or none is. Raises ReservedDatesTaken
        when any of the days already has a row.
        """

    @abstractmethod
    def owner_of(self, day: date) -> UUID | None:
        """Id of the application holding ``day``, or None."""

    # ===== Transactions =====

    @abstractmethod
    def atomic(self) -> ContextManager:
        """Context manager; everything inside commits or rolls back together."""

    @abstractmethod
    def on_commit(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once the enclosing ``atomic()`` block commits."""

    def __repr__(self):
        return f"{self.__class__.__name__}(backend={self.backend_name!r})"
