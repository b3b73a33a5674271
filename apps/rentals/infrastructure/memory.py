"""In-process reservation store, used in tests and single-process setups."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import date
from uuid import UUID

from apps.rentals.domain.entities import ApplicationRecord

from .base import ReservationStore, ReservedDatesTaken

logger = logging.getLogger(__name__)


class InMemoryReservationStore(ReservationStore):
    """
    Dict-backed store guarded by one re-entrant lock.

    ``atomic()`` holds the lock for the whole block and restores a
    snapshot if the block raises. Readers take the same lock, so they
    never see rows from a block that has not finished.
    """

    backend_name = "memory"

    def __init__(self):
        self._lock = threading.RLock()
        self._applications: dict[UUID, ApplicationRecord] = {}
        self._reserved: dict[date, UUID] = {}
        self._local = threading.local()

    # ===== Application records =====

    def create(self, record: ApplicationRecord) -> ApplicationRecord:
        with self._lock:
            if record.id in self._applications:
                raise ValueError(f"Application {record.id} already exists")
            self._applications[record.id] = record
        return record

    def list(self) -> list[ApplicationRecord]:
        with self._lock:
            records = list(self._applications.values())
        return sorted(records, key=lambda r: (r.start_date, r.created_at), reverse=True)

    def get_by_id(self, application_id: UUID) -> ApplicationRecord | None:
        with self._lock:
            return self._applications.get(application_id)

    # ===== Reserved dates =====

    def fetch_reserved(self, start: date | None = None, end: date | None = None) -> list[date]:
        with self._lock:
            days = list(self._reserved)
        return sorted(
            d for d in days
            if (start is None or d >= start) and (end is None or d <= end)
        )

    def has_reserved(self, start: date, end: date) -> bool:
        with self._lock:
            return any(start <= d <= end for d in self._reserved)

    def insert_reserved(self, owner_id: UUID, days: list[date]) -> None:
        with self._lock:
            taken = [d for d in days if d in self._reserved]
            if taken:
                raise ReservedDatesTaken(taken)
            for day in days:
                self._reserved[day] = owner_id

    def owner_of(self, day: date) -> UUID | None:
        with self._lock:
            return self._reserved.get(day)

    # ===== Transactions =====

    @contextmanager
    def atomic(self):
        with self._lock:
            depth = getattr(self._local, "depth", 0)
            if depth == 0:
                self._local.callbacks = []
            pending = len(self._local.callbacks)
            snapshot = (dict(self._applications), dict(self._reserved))
            self._local.depth = depth + 1
            try:
                yield
            except BaseException:
                self._applications, self._reserved = snapshot
                del self._local.callbacks[pending:]
                logger.debug("In-memory transaction rolled back")
                raise
            finally:
                self._local.depth = depth

        if depth == 0:
            callbacks, self._local.callbacks = self._local.callbacks, []
            for callback in callbacks:
                try:
                    callback()
                except Exception as e:
                    logger.error(f"Error in on_commit callback {callback!r}: {e}", exc_info=True)

    def on_commit(self, callback) -> None:
        if getattr(self._local, "depth", 0) > 0:
            self._local.callbacks.append(callback)
        else:
            callback()
