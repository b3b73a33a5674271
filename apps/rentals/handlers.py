"""Message bus handlers for rental events."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore

from .domain.events import RentalApplicationSubmitted

logger = logging.getLogger(__name__)


def enqueue_admin_notification(event: RentalApplicationSubmitted) -> None:
    """Queue the admin email. A broker outage only costs the email."""

    if not getattr(settings, "RENTALS", {}).get("NOTIFY_ON_SUBMIT", True):
        return

    from .serializers import RentalApplicationSerializer
    from .tasks import send_application_notification

    payload = dict(RentalApplicationSerializer(event.record).data)
    try:
        send_application_notification.delay(payload)
    except Exception as exc:
        logger.error(
            f"Could not enqueue notification for application {event.application_id}: {exc}",
            exc_info=True,
        )
