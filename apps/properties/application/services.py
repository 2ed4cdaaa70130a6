"""
Property Services

Use cases of the real-estate domain. Every mutating operation runs inside
one unit of work: the aggregate and all of its new children are written
together or not at all, and domain events go out only after the commit.

Services:
- PropertyService: property lifecycle, images, price ledger and queries
- OwnerService: owner registration and maintenance
"""

from datetime import datetime
from typing import Callable, List
import logging

from django.utils import timezone

from shared.application.uow import AbstractUnitOfWork, DjangoUnitOfWork
from shared.domain.exceptions import NotFoundError, ValidationError
from shared.domain.value_objects import PagedResult

from apps.properties.application.commands import (
    CreateOwnerCommand,
    CreatePropertyCommand,
    OwnerPatch,
    PropertyPatch,
)
from apps.properties.application.dto import OwnerDTO, PropertyDTO
from apps.properties.domain.entities import Owner, Property, PropertyImage
from apps.properties.domain.query import PropertyFilter
from apps.properties.domain.repositories import (
    AbstractOwnerRepository,
    AbstractPropertyRepository,
)

logger = logging.getLogger(__name__)


class PropertyService:
    """
    Application service for properties

    Collaborators are injected so tests can swap the gateways, the unit of
    work or the clock. ``clock`` returns the timestamp stamped on new
    price traces.
    """

    def __init__(
        self,
        properties: AbstractPropertyRepository | None = None,
        owners: AbstractOwnerRepository | None = None,
        uow_factory: Callable[[], AbstractUnitOfWork] = DjangoUnitOfWork,
        clock: Callable[[], datetime] = timezone.now,
    ):
        if properties is None or owners is None:
            from apps.properties.repositories import (
                DjangoOwnerRepository,
                DjangoPropertyRepository,
            )
            properties = properties or DjangoPropertyRepository()
            owners = owners or DjangoOwnerRepository()
        self.properties = properties
        self.owners = owners
        self.uow_factory = uow_factory
        self.clock = clock

    def create(self, command: CreatePropertyCommand) -> PropertyDTO:
        """
        Register a new property for an existing owner

        Raises:
            ValidationError: If any field of the command is invalid
            NotFoundError: If the owner does not exist
            DuplicateCodeError: If the internal code is already taken
        """
        ValidationError.raise_if_any(command.errors())

        with self.uow_factory() as uow:
            owner = self.owners.get_by_id(command.owner_id)
            if owner is None:
                raise NotFoundError("Owner", command.owner_id)

            property_obj = Property.create(
                name=command.name,
                address=command.address,
                price=command.price,
                code_internal=command.code_internal,
                year=command.year,
                owner_id=owner.id,
            )
            owner.add_property(property_obj)

            self.properties.add(property_obj)
            property_obj.mark_created()
            uow.collect_events(property_obj)

        logger.info(
            f"Property {property_obj.id} ({property_obj.code_internal}) "
            f"created for owner {owner.id}"
        )
        return PropertyDTO.from_entity(property_obj)

    def add_image(self, property_id: int, file: str) -> None:
        """Attach an enabled image to a property"""
        with self.uow_factory() as uow:
            property_obj = self._get_property(property_id)

            image = PropertyImage.create(property_id=property_obj.id, file=file)
            property_obj.add_image(image)

            self.properties.add_image(image)
            uow.collect_events(property_obj)

        logger.info(f"Image {image.id} added to property {property_id}")

    def disable_image(self, property_id: int, image_id: int) -> None:
        """Disable one image of a property; disabling twice is a no-op"""
        with self.uow_factory() as uow:
            property_obj = self._get_property(property_id)

            image = property_obj.disable_image(image_id)

            self.properties.update_image(image)
            uow.collect_events(property_obj)

        logger.info(f"Image {image_id} of property {property_id} disabled")

    def change_price(self, property_id, new_price) -> None:
        """
        Change the price of a property

        The new price and its "Price Change" trace are written in the same
        transaction; a failure on either write persists neither.
        """
        with self.uow_factory() as uow:
            property_obj = self._get_property(property_id)
            old_price = property_obj.price

            trace = property_obj.record_price_change(new_price, self.clock())

            self.properties.update(property_obj)
            self.properties.add_trace(trace)
            uow.collect_events(property_obj)

        logger.info(
            f"Price of property {property_id} changed from {old_price} to {property_obj.price}"
        )

    def update(self, property_id: int, patch: PropertyPatch) -> PropertyDTO:
        """
        Apply a partial update

        Only fields carrying a value are written. A changed price also
        appends a "Price Change" trace.
        """
        ValidationError.raise_if_any(patch.errors())

        with self.uow_factory() as uow:
            property_obj = self._get_property(property_id)

            trace = property_obj.update_details(**patch.changes(), at=self.clock())

            self.properties.update(property_obj)
            if trace is not None:
                self.properties.add_trace(trace)
            uow.collect_events(property_obj)

        logger.info(f"Property {property_id} updated: {sorted(patch.changes())}")
        return PropertyDTO.from_entity(property_obj)

    def list(self, filter_: PropertyFilter) -> PagedResult[PropertyDTO]:
        """One page of the properties matching ``filter_``, ordered by id"""
        filter_.validate()
        page = self.properties.list_paged(filter_)
        logger.debug(
            f"Listed page {page.page_number} ({len(page)} of {page.total_count} properties)"
        )
        return page.map(PropertyDTO.from_entity)

    def get_by_owner(self, owner_id: int) -> List[PropertyDTO]:
        """Properties of an owner, empty for unknown owners"""
        return [
            PropertyDTO.from_entity(property_obj)
            for property_obj in self.properties.get_by_owner_id(owner_id)
        ]

    def get_details(self, property_id: int) -> PropertyDTO:
        """Property with its owner, images and traces"""
        property_obj = self.properties.get_details(property_id)
        if property_obj is None:
            raise NotFoundError("Property", property_id)
        return PropertyDTO.from_entity(property_obj)

    def _get_property(self, property_id) -> Property:
        property_obj = self.properties.get_by_id(property_id)
        if property_obj is None:
            raise NotFoundError("Property", property_id)
        return property_obj


class OwnerService:
    """Application service for owners"""

    def __init__(
        self,
        owners: AbstractOwnerRepository | None = None,
        uow_factory: Callable[[], AbstractUnitOfWork] = DjangoUnitOfWork,
    ):
        if owners is None:
            from apps.properties.repositories import DjangoOwnerRepository
            owners = DjangoOwnerRepository()
        self.owners = owners
        self.uow_factory = uow_factory

    def create(self, command: CreateOwnerCommand) -> OwnerDTO:
        owner = Owner.create(
            name=command.name,
            address=command.address,
            birthday=command.birthday,
            photo=command.photo,
        )
        with self.uow_factory():
            self.owners.add(owner)

        logger.info(f"Owner {owner.id} created")
        return OwnerDTO.from_entity(owner)

    def update(self, owner_id: int, patch: OwnerPatch) -> OwnerDTO:
        with self.uow_factory():
            owner = self._get_owner(owner_id)
            owner.update_details(**patch.changes())
            self.owners.update(owner)

        logger.info(f"Owner {owner_id} updated: {sorted(patch.changes())}")
        return OwnerDTO.from_entity(owner)

    def get(self, owner_id: int) -> OwnerDTO:
        return OwnerDTO.from_entity(self._get_owner(owner_id))

    def _get_owner(self, owner_id) -> Owner:
        owner = self.owners.get_by_id(owner_id)
        if owner is None:
            raise NotFoundError("Owner", owner_id)
        return owner
