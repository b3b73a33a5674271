"""Relational reservation store on top of the Django ORM."""

from __future__ import annotations

import logging
from datetime import date
from uuid import UUID

from django.db import IntegrityError, transaction  # type: ignore

from apps.rentals.domain.entities import ApplicationRecord
from apps.rentals.models import RentalApplication, ReservedDate

from .base import ReservationStore, ReservedDatesTaken

logger = logging.getLogger(__name__)


class DjangoReservationStore(ReservationStore):
    """
    Store backed by the ``RentalApplication`` and ``ReservedDate`` tables.

    The unique index on ``ReservedDate.date`` is what decides races: two
    transactions inserting the same day cannot both commit.
    """

    backend_name = "orm"

    def __init__(self, using: str = "default"):
        self.using = using

    # ===== Application records =====

    def create(self, record: ApplicationRecord) -> ApplicationRecord:
        row = RentalApplication.from_record(record)
        row.save(using=self.using, force_insert=True)
        return row.to_record()

    def list(self) -> list[ApplicationRecord]:
        return [row.to_record() for row in RentalApplication.objects.using(self.using).all()]

    def get_by_id(self, application_id: UUID) -> ApplicationRecord | None:
        row = RentalApplication.objects.using(self.using).filter(pk=application_id).first()
        return row.to_record() if row else None

    # ===== Reserved dates =====

    def _reserved_qs(self):
        return ReservedDate.objects.using(self.using)

    def fetch_reserved(self, start: date | None = None, end: date | None = None) -> list[date]:
        qs = self._reserved_qs()
        if start is not None:
            qs = qs.filter(date__gte=start)
        if end is not None:
            qs = qs.filter(date__lte=end)
        return list(qs.order_by("date").values_list("date", flat=True))

    def has_reserved(self, start: date, end: date) -> bool:
        return self._reserved_qs().filter(date__range=(start, end)).exists()

    def insert_reserved(self, owner_id: UUID, days: list[date]) -> None:
        rows = [ReservedDate(date=day, application_id=owner_id) for day in days]
        try:
            # Savepoint: a failed batch leaves the outer transaction usable
            with transaction.atomic(using=self.using):
                ReservedDate.objects.using(self.using).bulk_create(rows)
        except IntegrityError as exc:
            taken = list(
                self._reserved_qs().filter(date__in=days).values_list("date", flat=True)
            )
            logger.info(f"Reserved-date insert for {owner_id} hit taken dates {taken}")
            raise ReservedDatesTaken(taken or days) from exc

    def owner_of(self, day: date) -> UUID | None:
        return (
            self._reserved_qs()
            .filter(date=day)
            .values_list("application_id", flat=True)
            .first()
        )

    # ===== Transactions =====

    def atomic(self):
        return transaction.atomic(using=self.using)

    def on_commit(self, callback) -> None:
        transaction.on_commit(callback, using=self.using)
