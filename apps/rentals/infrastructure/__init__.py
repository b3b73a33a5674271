"""Storage backends for rental applications and reserved dates."""

from .base import ReservationStore, ReservedDatesTaken
from .factory import build_store

__all__ = ["ReservationStore", "ReservedDatesTaken", "build_store"]
