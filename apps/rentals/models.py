"""Rental domain models."""

from __future__ import annotations

import uuid

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .domain.entities import ApplicationRecord
from .domain.rental_periods import RentalPeriod


class RentalApplication(models.Model):
    """Accepted rental request for the camping heater."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    phone = models.CharField(max_length=30)
    email = models.EmailField(blank=True)
    start_date = models.DateField()
    end_date = models.DateField()
    rental_period = models.CharField(
        max_length=20,
        choices=RentalPeriod.choices(),
        help_text=_("Billed duration, descriptive only."),
    )
    additional_requests = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Rental application")
        verbose_name_plural = _("Rental applications")
        ordering = ["-start_date", "-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gte=models.F("start_date")),
                name="rental_application_valid_dates",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.start_date} - {self.end_date})"

    @classmethod
    def from_record(cls, record: ApplicationRecord) -> "RentalApplication":
        return cls(
            id=record.id,
            name=record.name,
            phone=record.phone,
            email=record.email,
            start_date=record.start_date,
            end_date=record.end_date,
            rental_period=record.rental_period,
            additional_requests=record.additional_requests,
        )

    def to_record(self) -> ApplicationRecord:
        return ApplicationRecord(
            id=self.id,
            name=self.name,
            phone=self.phone,
            email=self.email,
            start_date=self.start_date,
            end_date=self.end_date,
            rental_period=self.rental_period,
            additional_requests=self.additional_requests,
            created_at=self.created_at,
        )


class ReservedDate(models.Model):
    """A single unavailable day, held by one rental application."""

    date = models.DateField(unique=True)
    application = models.ForeignKey(
        RentalApplication,
        on_delete=models.PROTECT,
        related_name="reserved_dates",
    )

    class Meta:
        verbose_name = _("Reserved date")
        verbose_name_plural = _("Reserved dates")
        ordering = ["date"]

    def __str__(self) -> str:
        return f"{self.date} -> {self.application_id}"
