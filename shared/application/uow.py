"""
Unit of Work Pattern

Wraps a store transaction and ensures that domain events
are published only after the transaction commits.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        """Commit the transaction"""
        pass

    @abstractmethod
    def rollback(self):
        """Rollback the transaction"""
        pass

    @abstractmethod
    def add_event(self, event: DomainEvent):
        """Queue an event for publishing after commit"""
        pass


class StoreUnitOfWork(AbstractUnitOfWork):
    """
    Unit of Work over a reservation store

    The store supplies the transaction (``store.atomic()``) and the
    after-commit hook (``store.on_commit()``); the unit of work only
    decides what gets published and when.

    Usage:
        with StoreUnitOfWork(store, bus) as uow:
            store.create(record)
            calendar.reserve_range(start, end, record.id)
            uow.add_event(RentalApplicationSubmitted(...))
            # Transaction commits here
        # Events are published after commit
    """

    def __init__(self, store, bus=None):
        self.store = store
        self.bus = bus
        self._events: List[DomainEvent] = []
        self._transaction = None

    def __enter__(self):
        """Start store transaction"""
        self._transaction = self.store.atomic()
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def commit(self):
        """
        Schedule event publishing

        Events go through ``store.on_commit`` so they are only sent after
        the store has made the changes durable.
        """
        logger.debug(f"Committing unit of work with {len(self._events)} events")

        events = self._events.copy()
        self._events.clear()

        if events and self.bus is not None:
            self.store.on_commit(lambda: self._publish_events(events))

    def rollback(self):
        """Rollback changes and discard events"""
        logger.warning(f"Rolling back unit of work, discarding {len(self._events)} events")
        self._events.clear()

    def add_event(self, event: DomainEvent):
        self._events.append(event)

    def _publish_events(self, events: List[DomainEvent]):
        logger.info(f"Publishing {len(events)} domain events after commit")

        try:
            self.bus.publish_events(events)
        except Exception as e:
            logger.error(f"Error publishing events: {e}", exc_info=True)
            # The changes are already committed; publishing is best effort
