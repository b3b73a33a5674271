"""
Rental Domain Entities

- ApplicationRecord: an accepted rental request, immutable once created
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from shared.domain.value_objects import DateRange

from .rental_periods import label_for


@dataclass(frozen=True)
class ApplicationRecord:
    """
    Durable record of one accepted rental request.

    Records are never updated or deleted; the dates they cover stay
    reserved for as long as the record exists.
    """

    name: str
    phone: str
    start_date: date
    end_date: date
    rental_period: str
    email: str = ""
    additional_requests: str = ""
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def dates(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    @property
    def rental_period_label(self) -> str:
        return label_for(self.rental_period)

    def __str__(self):
        return f"ApplicationRecord({self.id}, {self.name}, {self.dates})"
