"""
Property Domain Events

Events that represent things that have happened to a property.
These are published after successful transaction commits.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from shared.domain.base import DomainEvent


@dataclass
class PropertyCreated(DomainEvent):
    """
    Event: A new property was registered for an owner
    """
    property_id: int
    owner_id: int
    code_internal: str
    price: Decimal


@dataclass
class PropertyPriceChanged(DomainEvent):
    """
    Event: The price of a property changed

    Raised together with the "Price Change" trace that records it in the
    price ledger.
    """
    property_id: int
    old_price: Decimal
    new_price: Decimal
    changed_at: datetime


@dataclass
class PropertyImageAdded(DomainEvent):
    """Event: An image was attached to a property"""
    property_id: int
    file: str


@dataclass
class PropertyImageDisabled(DomainEvent):
    """Event: An image of a property was disabled"""
    property_id: int
    image_id: int
