"""
Property Event Handlers

Subscribers of the property domain events. They run after the unit of
work has committed, so they only observe state and never change it.
"""

import structlog

from shared.application.message_bus import MessageBus, message_bus

from apps.properties.domain.events import (
    PropertyCreated,
    PropertyImageAdded,
    PropertyImageDisabled,
    PropertyPriceChanged,
)

logger = structlog.get_logger(__name__)


def log_property_created(event: PropertyCreated):
    logger.info(
        "property.created",
        property_id=event.property_id,
        owner_id=event.owner_id,
        code_internal=event.code_internal,
        price=str(event.price),
    )


def log_price_changed(event: PropertyPriceChanged):
    logger.info(
        "property.price_changed",
        property_id=event.property_id,
        old_price=str(event.old_price),
        new_price=str(event.new_price),
        changed_at=event.changed_at.isoformat(),
    )


def log_image_added(event: PropertyImageAdded):
    logger.info("property.image_added", property_id=event.property_id)


def log_image_disabled(event: PropertyImageDisabled):
    logger.info(
        "property.image_disabled",
        property_id=event.property_id,
        image_id=event.image_id,
    )


def register_handlers(bus: MessageBus = message_bus):
    bus.register_event_handler(PropertyCreated, log_property_created)
    bus.register_event_handler(PropertyPriceChanged, log_price_changed)
    bus.register_event_handler(PropertyImageAdded, log_image_added)
    bus.register_event_handler(PropertyImageDisabled, log_image_disabled)
