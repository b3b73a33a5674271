"""
Rental Domain Events

Published on the message bus after the reservation has been committed.
"""

from dataclasses import dataclass
from uuid import UUID

from shared.domain.base import DomainEvent
from shared.domain.value_objects import DateRange

from .entities import ApplicationRecord


@dataclass(kw_only=True)
class RentalApplicationSubmitted(DomainEvent):
    """
    Event: A rental application was accepted and its dates reserved

    Triggers:
    - Admin notification email (Celery task)
    """
    application_id: UUID
    dates: DateRange
    record: ApplicationRecord
