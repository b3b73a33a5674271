"""
Rental Command Handlers

Use cases of the rentals app. They orchestrate the reservation
calendar and the store inside one unit of work.

Commands:
- SubmitRentalApplicationCommand: Submit a new rental application
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from django.core.validators import validate_email  # type: ignore

from shared.application.uow import StoreUnitOfWork
from shared.domain.value_objects import as_calendar_date
from apps.rentals.domain.availability import AvailabilityChecker
from apps.rentals.domain.calendar import ReservationCalendar, to_range
from apps.rentals.domain.entities import ApplicationRecord
from apps.rentals.domain.events import RentalApplicationSubmitted
from apps.rentals.domain.exceptions import (
    ConflictError,
    InternalError,
    NotFoundError,
    RentalError,
    ValidationError,
)
from apps.rentals.domain.rental_periods import RentalPeriod

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class SubmitRentalApplicationCommand:
    """
    Command to submit a rental application

    ``rental_period`` may be left empty; it is then derived from the
    number of nights in the range.
    """
    name: str
    phone: str
    start_date: date | None
    end_date: date | None
    email: str = ''
    rental_period: str | None = None
    additional_requests: str = ''


# ===== Service =====

class ReservationService:
    """
    Entry point of the reservation engine

    The store is passed in, never looked up, so each caller (the Django
    app at startup, or a test) decides which backend it talks to.

    Strategy for submissions:
    1. Validate the applicant fields and the range shape
    2. Open a unit of work on the store
    3. Fast-path availability check
    4. Create the record and claim its range (unique date decides races)
    5. Commit, then publish RentalApplicationSubmitted
    """

    def __init__(self, store, bus=None):
        self.store = store
        self.bus = bus
        self.calendar = ReservationCalendar(store)
        self.availability = AvailabilityChecker(self.calendar)

    def submit_application(self, command: SubmitRentalApplicationCommand) -> ApplicationRecord:
        """
        Handle a rental application submission

        Returns: The persisted ApplicationRecord

        Raises:
            ValidationError: Bad input; nothing written
            ConflictError: Range shares a date with an existing reservation
            InternalError: Store failure; the unit of work was rolled back
        """
        record = self._build_record(command)
        dates = record.dates

        logger.info(f"Submitting rental application {record.id} for {dates}")

        try:
            with StoreUnitOfWork(self.store, self.bus) as uow:
                if not self.availability.is_range_available(dates.start_date, dates.end_date):
                    raise ConflictError(
                        self.availability.conflicting_dates(dates.start_date, dates.end_date)
                    )

                created = self.store.create(record)
                self.calendar.reserve_range(created.start_date, created.end_date, created.id)

                uow.add_event(RentalApplicationSubmitted(
                    aggregate_id=created.id,
                    application_id=created.id,
                    dates=dates,
                    record=created,
                ))
        except ConflictError as exc:
            logger.warning(
                f"Rental application for {dates} rejected, "
                f"blocked dates: {[d.isoformat() for d in exc.dates]}"
            )
            raise
        except RentalError:
            raise
        except Exception as exc:
            logger.error(f"Failed to submit rental application for {dates}: {exc}", exc_info=True)
            raise InternalError() from exc

        logger.info(f"Rental application {created.id} accepted ({len(dates)} day(s))")
        return created

    def list_applications(self) -> list[ApplicationRecord]:
        return self.store.list()

    def get_application(self, application_id) -> ApplicationRecord:
        """Raises NotFoundError for unknown or malformed ids."""
        try:
            key = application_id if isinstance(application_id, UUID) else UUID(str(application_id))
        except ValueError:
            raise NotFoundError(application_id)

        record = self.store.get_by_id(key)
        if record is None:
            raise NotFoundError(application_id)
        return record

    def reserved_dates(self, start: date | None = None, end: date | None = None) -> list[date]:
        return self.calendar.list_reserved(start, end)

    def is_range_available(self, start, end) -> bool:
        return self.availability.is_range_available(start, end)

    # ===== Validation =====

    def _build_record(self, command: SubmitRentalApplicationCommand) -> ApplicationRecord:
        issues: list[dict] = []

        def issue(field: str, message: str):
            issues.append({"field": field, "message": message})

        name = (command.name or "").strip()
        phone = (command.phone or "").strip()
        email = (command.email or "").strip()

        if not name:
            issue("name", "이름을 입력해주세요.")
        if not phone:
            issue("phone", "연락처를 입력해주세요.")
        if email:
            try:
                validate_email(email)
            except DjangoValidationError:
                issue("email", "올바른 이메일 주소를 입력해주세요.")

        start_date = end_date = None
        try:
            if command.start_date is None:
                issue("startDate", "대여 시작일을 선택해주세요.")
            else:
                start_date = as_calendar_date(command.start_date)
        except TypeError:
            issue("startDate", "날짜 형식이 올바르지 않습니다.")
        try:
            if command.end_date is None:
                issue("endDate", "반납일을 선택해주세요.")
            else:
                end_date = as_calendar_date(command.end_date)
        except TypeError:
            issue("endDate", "날짜 형식이 올바르지 않습니다.")

        rental_period = None
        if start_date and end_date:
            try:
                dates = to_range(start_date, end_date)
            except ValidationError as exc:
                issues.extend(exc.issues)
            else:
                rental_period = self._resolve_period(command.rental_period, dates.nights, issue)

        if issues:
            raise ValidationError(issues)

        return ApplicationRecord(
            name=name,
            phone=phone,
            email=email,
            start_date=start_date,
            end_date=end_date,
            rental_period=rental_period,
            additional_requests=(command.additional_requests or "").strip(),
        )

    @staticmethod
    def _resolve_period(value: str | None, nights: int, issue) -> str | None:
        if not value:
            return RentalPeriod.for_nights(nights).value
        try:
            return RentalPeriod(value).value
        except ValueError:
            issue("rentalPeriod", "알 수 없는 대여 기간입니다.")
            return None
