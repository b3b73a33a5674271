"""
Rental Period Catalogue

The billed duration options offered to customers. A period is only a
descriptor: conflict detection looks at the requested dates alone.
"""

from __future__ import annotations

from enum import Enum


class RentalPeriod(str, Enum):
    """Billed duration, keyed by the value the booking form submits."""

    ONE_NIGHT = "1night2days"
    TWO_NIGHTS = "2nights3days"
    THREE_NIGHTS = "3nights4days"
    FOUR_NIGHTS_PLUS = "4nightsPlus"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def price(self) -> int | None:
        """Flat price in KRW, None when billed per extra night."""
        return _PRICES[self]

    @classmethod
    def for_nights(cls, nights: int) -> "RentalPeriod":
        """Pick the period matching a stay length."""
        if nights <= 1:
            return cls.ONE_NIGHT
        if nights == 2:
            return cls.TWO_NIGHTS
        if nights == 3:
            return cls.THREE_NIGHTS
        return cls.FOUR_NIGHTS_PLUS

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        return [(period.value, period.label) for period in cls]


_LABELS = {
    RentalPeriod.ONE_NIGHT: "1박 2일 (15,000원)",
    RentalPeriod.TWO_NIGHTS: "2박 3일 (25,000원)",
    RentalPeriod.THREE_NIGHTS: "3박 4일 (35,000원)",
    RentalPeriod.FOUR_NIGHTS_PLUS: "4박 5일 이상 (5,000원/1박 추가)",
}

_PRICES = {
    RentalPeriod.ONE_NIGHT: 15000,
    RentalPeriod.TWO_NIGHTS: 25000,
    RentalPeriod.THREE_NIGHTS: 35000,
    RentalPeriod.FOUR_NIGHTS_PLUS: None,
}


def label_for(value: str) -> str:
    """Human label for a stored period value; unknown values pass through."""
    try:
        return RentalPeriod(value).label
    except ValueError:
        return value
