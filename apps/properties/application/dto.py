"""
Read models returned by the property use cases

DTOs are plain frozen snapshots of the entities, so nothing returned to
the presentation layer can be used to mutate an aggregate. Owners are
mapped without their properties: the Owner -> Property direction is a
query, never part of a serialized graph.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Tuple

from apps.properties.domain.entities import Owner, Property, PropertyImage, PropertyTrace


@dataclass(frozen=True)
class OwnerDTO:
    id: int
    name: str
    address: str
    birthday: date | None
    photo: str | None

    @classmethod
    def from_entity(cls, owner: Owner) -> OwnerDTO:
        return cls(
            id=owner.id,
            name=owner.name,
            address=owner.address,
            birthday=owner.birthday,
            photo=owner.photo,
        )


@dataclass(frozen=True)
class PropertyImageDTO:
    id: int
    property_id: int
    file: str
    enabled: bool

    @classmethod
    def from_entity(cls, image: PropertyImage) -> PropertyImageDTO:
        return cls(
            id=image.id,
            property_id=image.property_id,
            file=image.file,
            enabled=image.enabled,
        )


@dataclass(frozen=True)
class PropertyTraceDTO:
    id: int
    property_id: int
    date_sale: datetime
    name: str
    value: Decimal
    tax: Decimal

    @classmethod
    def from_entity(cls, trace: PropertyTrace) -> PropertyTraceDTO:
        return cls(
            id=trace.id,
            property_id=trace.property_id,
            date_sale=trace.date_sale,
            name=trace.name,
            value=trace.value,
            tax=trace.tax,
        )


@dataclass(frozen=True)
class PropertyDTO:
    id: int
    name: str
    address: str
    price: Decimal
    code_internal: str
    year: int
    owner_id: int
    owner: OwnerDTO | None = None
    images: Tuple[PropertyImageDTO, ...] = ()
    traces: Tuple[PropertyTraceDTO, ...] = ()

    @classmethod
    def from_entity(cls, property_obj: Property) -> PropertyDTO:
        return cls(
            id=property_obj.id,
            name=property_obj.name,
            address=property_obj.address,
            price=property_obj.price,
            code_internal=property_obj.code_internal,
            year=property_obj.year,
            owner_id=property_obj.owner_id,
            owner=OwnerDTO.from_entity(property_obj.owner) if property_obj.owner else None,
            images=tuple(PropertyImageDTO.from_entity(image) for image in property_obj.images),
            traces=tuple(PropertyTraceDTO.from_entity(trace) for trace in property_obj.traces),
        )
