"""Shared fixtures for the rentals tests."""

from __future__ import annotations

from datetime import date

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from shared.application.message_bus import MessageBus
from apps.rentals.application.command_handlers import (
    ReservationService,
    SubmitRentalApplicationCommand,
)
from apps.rentals.infrastructure import build_store


@pytest.fixture
def bus() -> MessageBus:
    return MessageBus()


@pytest.fixture
def memory_store():
    return build_store("memory")


@pytest.fixture
def orm_store(db):
    return build_store("orm")


@pytest.fixture(params=["memory", "orm"])
def store(request):
    """Runs the test once per backend."""
    if request.param == "orm":
        request.getfixturevalue("db")
    return build_store(request.param)


@pytest.fixture
def service(store, bus) -> ReservationService:
    return ReservationService(store, bus=bus)


@pytest.fixture
def memory_service(memory_store, bus) -> ReservationService:
    return ReservationService(memory_store, bus=bus)


@pytest.fixture
def make_command():
    def _make(start: date, end: date, **overrides) -> SubmitRentalApplicationCommand:
        fields = {
            "name": "홍길동",
            "phone": "010-1234-5678",
            "start_date": start,
            "end_date": end,
        }
        fields.update(overrides)
        return SubmitRentalApplicationCommand(**fields)

    return _make


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def memory_app_service(monkeypatch, memory_service):
    """Point the HTTP layer at an isolated in-memory service."""
    config = apps.get_app_config("rentals")
    monkeypatch.setattr(config, "reservation_service", memory_service)
    return memory_service
