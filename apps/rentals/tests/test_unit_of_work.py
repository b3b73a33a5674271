"""Unit of work over the in-memory store."""

from dataclasses import dataclass
from datetime import date
from uuid import uuid4

import pytest

from shared.application.message_bus import MessageBus
from shared.application.uow import StoreUnitOfWork
from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class Touched(DomainEvent):
    name: str


@pytest.fixture
def published(bus: MessageBus):
    seen = []
    bus.register_event_handler(Touched, lambda e: seen.append(e.name))
    return seen


def test_events_wait_for_the_outermost_commit(memory_store, bus, published):
    with memory_store.atomic():
        with StoreUnitOfWork(memory_store, bus) as uow:
            uow.add_event(Touched(name="inner"))
        assert published == []

    assert published == ["inner"]


def test_rollback_discards_events_and_writes(memory_store, bus, published):
    with pytest.raises(RuntimeError):
        with StoreUnitOfWork(memory_store, bus) as uow:
            memory_store.insert_reserved(uuid4(), [date(2025, 12, 1)])
            uow.add_event(Touched(name="lost"))
            raise RuntimeError("boom")

    assert published == []
    assert memory_store.fetch_reserved() == []


def test_outer_rollback_drops_inner_callbacks(memory_store, bus, published):
    with pytest.raises(RuntimeError):
        with memory_store.atomic():
            with StoreUnitOfWork(memory_store, bus) as uow:
                memory_store.insert_reserved(uuid4(), [date(2025, 12, 1)])
                uow.add_event(Touched(name="inner"))
            raise RuntimeError("outer failed")

    assert published == []
    assert memory_store.fetch_reserved() == []


def test_failing_commit_callback_does_not_skip_the_rest(memory_store):
    ran = []

    def broken():
        raise RuntimeError("handler crashed")

    with memory_store.atomic():
        memory_store.on_commit(broken)
        memory_store.on_commit(lambda: ran.append("second"))

    assert ran == ["second"]
