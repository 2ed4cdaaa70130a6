"""
Base Domain Classes

This module provides the foundational building blocks for Domain-Driven Design:
- Entity: Objects with identity assigned by the persistence gateway
- ValueObject: Immutable objects compared by value
- Aggregate: Consistency boundaries with domain events
- DomainEvent: Events that represent something that happened
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime
from typing import List
from uuid import UUID, uuid4

from shared.domain.exceptions import ConflictError


@dataclass(eq=False, kw_only=True)
class Entity(ABC):
    """
    Base class for all entities

    Entities have identity and are mutable. The identity is an integer
    assigned by the persistence gateway on insert, so a freshly created
    entity has ``id = None`` until it is saved.
    Two persisted entities are equal if their IDs are equal; transient
    entities are only equal to themselves.
    """
    id: int | None = None

    def assign_identity(self, entity_id: int):
        """
        Bind the identity generated by the gateway

        Re-binding the same id is a no-op, a different one is a conflict.
        """
        if self.id is not None and self.id != entity_id:
            raise ConflictError(
                f"{self.__class__.__name__} already has id {self.id}, "
                f"cannot assign {entity_id}"
            )
        self.id = entity_id

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        if self.id is None:
            return id(self)
        return hash((self.__class__.__name__, self.id))


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass


@dataclass(eq=False, kw_only=True)
class Aggregate(Entity):
    """
    Base class for aggregate roots

    Aggregates are the consistency boundaries in DDD.
    They collect domain events that will be published after successful transaction.
    """
    _events: List['DomainEvent'] = field(default_factory=list, repr=False, init=False)

    def add_event(self, event: 'DomainEvent'):
        """Add a domain event to be published"""
        self._events.append(event)

    def clear_events(self):
        """Clear all collected events (called after publishing)"""
        self._events.clear()

    @property
    def events(self) -> List['DomainEvent']:
        """Get copy of collected events"""
        return self._events.copy()


@dataclass(kw_only=True)
class DomainEvent:
    """
    Base class for domain events

    Domain events represent something that happened in the domain.
    They are published by the unit of work after commit.
    """
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=datetime.now)
    aggregate_id: int | None = None
