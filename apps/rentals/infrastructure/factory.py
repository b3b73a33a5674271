"""Backend selection for the reservation store."""

from __future__ import annotations

import logging

from django.core.exceptions import ImproperlyConfigured  # type: ignore

from .base import ReservationStore

logger = logging.getLogger(__name__)

BACKENDS = ("orm", "memory")


def build_store(backend: str = "orm", **options) -> ReservationStore:
    """Construct the store named by ``backend``."""

    if backend == "orm":
        from .orm import DjangoReservationStore

        store = DjangoReservationStore(**options)
    elif backend == "memory":
        from .memory import InMemoryReservationStore

        store = InMemoryReservationStore()
    else:
        raise ImproperlyConfigured(
            f"Unknown RENTALS['STORE_BACKEND'] {backend!r}; expected one of {', '.join(BACKENDS)}"
        )

    logger.info(f"Reservation store initialised: {store!r}")
    return store
