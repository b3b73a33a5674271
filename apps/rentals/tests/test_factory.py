import pytest
from django.core.exceptions import ImproperlyConfigured

from apps.rentals.apps import get_reservation_service
from apps.rentals.infrastructure import build_store
from apps.rentals.infrastructure.memory import InMemoryReservationStore
from apps.rentals.infrastructure.orm import DjangoReservationStore


def test_builds_each_backend():
    assert isinstance(build_store("memory"), InMemoryReservationStore)
    assert isinstance(build_store("orm"), DjangoReservationStore)
    assert build_store("orm").backend_name == "orm"


def test_unknown_backend_is_a_configuration_error():
    with pytest.raises(ImproperlyConfigured, match="redis"):
        build_store("redis")


def test_app_service_uses_configured_backend():
    service = get_reservation_service()

    assert service is not None
    assert service.store.backend_name == "orm"


def test_sqlite_takes_the_write_lock_at_begin(settings):
    options = settings.DATABASES["default"]["OPTIONS"]

    assert options["transaction_mode"] == "IMMEDIATE"
