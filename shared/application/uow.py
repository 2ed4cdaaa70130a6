"""
Unit of Work

One service operation maps to one database transaction. Domain events
raised by the aggregates touched inside it are held back until the
outermost transaction has committed.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from django.db import transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """
    Transaction boundary used as a context manager

    A clean exit commits. An exception rolls back everything written in
    the block and is re-raised to the caller.
    """

    @abstractmethod
    def commit(self):
        """Make the writes of the block durable"""

    @abstractmethod
    def rollback(self):
        """Discard the writes of the block"""

    @abstractmethod
    def collect_events(self, aggregate):
        """Take over the pending events of ``aggregate``"""


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Unit of work over ``django.db.transaction.atomic``

    Usage:
        with DjangoUnitOfWork() as uow:
            property_obj = property_repo.get_by_id(property_id)
            trace = property_obj.record_price_change(new_price, at=now)
            property_repo.update(property_obj)
            property_repo.add_trace(trace)
            uow.collect_events(property_obj)
    """

    def __init__(self):
        self._pending: List[DomainEvent] = []
        self._atomic = None

    def __enter__(self):
        self._atomic = transaction.atomic()
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        atomic, self._atomic = self._atomic, None
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            # Leaving atomic() with an exception rolls the block back
            atomic.__exit__(exc_type, exc_val, exc_tb)

    def commit(self):
        events, self._pending = self._pending, []
        logger.debug(f"Unit of work done, {len(events)} events waiting for commit")
        if events:
            transaction.on_commit(lambda: self._publish(events))

    def rollback(self):
        logger.warning(f"Unit of work rolled back, dropping {len(self._pending)} events")
        self._pending = []

    def collect_events(self, aggregate):
        events = aggregate.events
        if not events:
            return
        self._pending.extend(events)
        aggregate.clear_events()
        logger.debug(
            f"Took {len(events)} events from {aggregate.__class__.__name__} {aggregate.id}"
        )

    def _publish(self, events: List[DomainEvent]):
        from shared.application.message_bus import message_bus

        logger.info(f"Publishing {len(events)} domain events")
        try:
            message_bus.publish_events(events)
        except Exception as e:
            # The transaction is already committed at this point
            logger.error(f"Error publishing events: {e}", exc_info=True)
