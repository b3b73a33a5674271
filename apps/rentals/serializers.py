"""Serializers for the rentals API.

The wire format uses camelCase keys; the domain uses snake_case. These
serializers only translate shapes. Business validation (required
contact fields, range order, known rental period) happens in the
reservation service so non-HTTP callers get the same checks.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .application.command_handlers import SubmitRentalApplicationCommand
from .domain.rental_periods import RentalPeriod


class RentalApplicationCreateSerializer(serializers.Serializer):
    """Incoming rental application."""

    name = serializers.CharField(allow_blank=True, trim_whitespace=True)
    phone = serializers.CharField(allow_blank=True, trim_whitespace=True)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    startDate = serializers.DateField(source="start_date", input_formats=["iso-8601"])
    endDate = serializers.DateField(source="end_date", input_formats=["iso-8601"])
    rentalPeriod = serializers.ChoiceField(
        source="rental_period",
        choices=[period.value for period in RentalPeriod],
        required=False,
        allow_blank=True,
        allow_null=True,
    )
    additionalRequests = serializers.CharField(
        source="additional_requests",
        required=False,
        allow_blank=True,
        allow_null=True,
    )

    def to_command(self) -> SubmitRentalApplicationCommand:
        data = self.validated_data
        return SubmitRentalApplicationCommand(
            name=data.get("name", ""),
            phone=data.get("phone", ""),
            email=data.get("email") or "",
            start_date=data["start_date"],
            end_date=data["end_date"],
            rental_period=data.get("rental_period") or None,
            additional_requests=data.get("additional_requests") or "",
        )


class RentalApplicationSerializer(serializers.Serializer):
    """Read-only representation of an ApplicationRecord."""

    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    email = serializers.SerializerMethodField()
    startDate = serializers.DateField(source="start_date", read_only=True)
    endDate = serializers.DateField(source="end_date", read_only=True)
    rentalPeriod = serializers.CharField(source="rental_period", read_only=True)
    rentalPeriodLabel = serializers.CharField(source="rental_period_label", read_only=True)
    additionalRequests = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    def get_email(self, record) -> str | None:
        return record.email or None

    def get_additionalRequests(self, record) -> str | None:
        return record.additional_requests or None
