"""Django app config for rentals: builds the reservation service once."""

from __future__ import annotations

import logging

from django.apps import AppConfig, apps  # type: ignore
from django.conf import settings  # type: ignore

logger = logging.getLogger(__name__)


class RentalsConfig(AppConfig):
    name = "apps.rentals"
    label = "rentals"
    default_auto_field = "django.db.models.BigAutoField"
    verbose_name = "Heater rentals"

    reservation_service = None

    def ready(self):
        from shared.application.message_bus import message_bus

        from .application.command_handlers import ReservationService
        from .domain.events import RentalApplicationSubmitted
        from .handlers import enqueue_admin_notification
        from .infrastructure import build_store

        config = getattr(settings, "RENTALS", {})
        store = build_store(config.get("STORE_BACKEND", "orm"))
        self.reservation_service = ReservationService(store, bus=message_bus)

        message_bus.register_event_handler(RentalApplicationSubmitted, enqueue_admin_notification)


def get_reservation_service():
    """The process-wide service constructed in ``RentalsConfig.ready``."""
    return apps.get_app_config("rentals").reservation_service
