"""
Property Domain Entities

Core business entities of the real-estate domain:
- Owner: a person holding properties
- Property: main aggregate with its images and price ledger
- PropertyImage: picture attached to a property, can only be disabled
- PropertyTrace: immutable record in the price ledger of a property

Every entity has two construction paths. ``create`` is the public factory
that enforces the creation invariants. ``restore`` rebuilds an entity from
persisted fields and is used by repositories only, it trusts its input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import List

from shared.domain.base import Aggregate, Entity
from shared.domain.exceptions import ConflictError, NotFoundError, ValidationError

from apps.properties.domain.events import (
    PropertyCreated,
    PropertyImageAdded,
    PropertyImageDisabled,
    PropertyPriceChanged,
)

PRICE_CHANGE_TRACE_NAME = "Price Change"

# Storage precision of every money column
MONEY_MAX_DIGITS = 18
MONEY_DECIMAL_PLACES = 2
_MONEY_STEP = Decimal(1).scaleb(-MONEY_DECIMAL_PLACES)
_MONEY_LIMIT = Decimal(10) ** (MONEY_MAX_DIGITS - MONEY_DECIMAL_PLACES)


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


def _to_decimal(value, label: str, errors: List[str]) -> Decimal | None:
    if value is None:
        errors.append(f"{label} is required")
        return None
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        amount = None
    if amount is None or not amount.is_finite():
        errors.append(f"{label} must be a number")
        return None
    if abs(amount) >= _MONEY_LIMIT:
        errors.append(
            f"{label} must have at most {MONEY_MAX_DIGITS - MONEY_DECIMAL_PLACES} integer digits"
        )
        return None
    if amount != amount.quantize(_MONEY_STEP):
        errors.append(f"{label} must have at most {MONEY_DECIMAL_PLACES} decimal places")
        return None
    return amount


def _positive_decimal(value, label: str, errors: List[str]) -> Decimal | None:
    amount = _to_decimal(value, label, errors)
    if amount is not None and not amount > 0:
        errors.append(f"{label} must be positive")
        return None
    return amount


@dataclass(eq=False)
class PropertyImage(Entity):
    """
    Image attached to a property

    ``enabled`` only ever goes from True to False.
    """

    property_id: int | None
    file: str
    enabled: bool = True

    @classmethod
    def create(cls, property_id: int | None, file: str) -> PropertyImage:
        if _is_blank(file):
            raise ValidationError("File cannot be empty")
        return cls(property_id=property_id, file=file)

    @classmethod
    def restore(cls, *, id: int, property_id: int, file: str, enabled: bool) -> PropertyImage:
        return cls(id=id, property_id=property_id, file=file, enabled=enabled)

    def disable(self) -> bool:
        """Disable the image, returns False if it already was disabled"""
        if not self.enabled:
            return False
        self.enabled = False
        return True


@dataclass(eq=False)
class PropertyTrace(Entity):
    """
    Record of the price ledger

    Traces are append-only: there is no mutator at all.
    """

    property_id: int | None
    date_sale: datetime
    name: str
    value: Decimal
    tax: Decimal = Decimal("0")

    @classmethod
    def create(
        cls,
        property_id: int | None,
        date_sale: datetime,
        name: str,
        value,
        tax=Decimal("0"),
    ) -> PropertyTrace:
        errors: List[str] = []
        amount = _positive_decimal(value, "Value", errors)
        tax_amount = _to_decimal(tax, "Tax", errors)
        if date_sale is None:
            errors.append("Sale date is required")
        ValidationError.raise_if_any(errors)
        return cls(
            property_id=property_id,
            date_sale=date_sale,
            name=name,
            value=amount,
            tax=tax_amount,
        )

    @classmethod
    def restore(
        cls,
        *,
        id: int,
        property_id: int,
        date_sale: datetime,
        name: str,
        value: Decimal,
        tax: Decimal,
    ) -> PropertyTrace:
        return cls(
            id=id,
            property_id=property_id,
            date_sale=date_sale,
            name=name,
            value=value,
            tax=tax,
        )


@dataclass(eq=False)
class Property(Aggregate):
    """
    Property Aggregate Root

    Key invariants:
    - price is always positive
    - owner_id matches the attached owner, which cannot be swapped
    - images and traces are only ever appended
    - every price transition leaves a "Price Change" trace
    """

    name: str
    address: str
    price: Decimal
    code_internal: str
    year: int
    owner_id: int | None = None
    owner: Owner | None = field(default=None, repr=False)
    images: List[PropertyImage] = field(default_factory=list, repr=False)
    traces: List[PropertyTrace] = field(default_factory=list, repr=False)

    @classmethod
    def create(
        cls,
        name: str,
        address: str,
        price,
        code_internal: str,
        year: int,
        owner_id: int | None = None,
    ) -> Property:
        errors: List[str] = []
        if _is_blank(name):
            errors.append("Name cannot be empty")
        amount = _positive_decimal(price, "Price", errors)
        ValidationError.raise_if_any(errors)
        return cls(
            name=name,
            address=address,
            price=amount,
            code_internal=code_internal,
            year=year,
            owner_id=owner_id,
        )

    @classmethod
    def restore(
        cls,
        *,
        id: int,
        name: str,
        address: str,
        price: Decimal,
        code_internal: str,
        year: int,
        owner_id: int,
        owner: Owner | None = None,
        images: List[PropertyImage] | None = None,
        traces: List[PropertyTrace] | None = None,
    ) -> Property:
        return cls(
            id=id,
            name=name,
            address=address,
            price=price,
            code_internal=code_internal,
            year=year,
            owner_id=owner_id,
            owner=owner,
            images=list(images or []),
            traces=list(traces or []),
        )

    def mark_created(self):
        """Record the creation once the gateway has assigned an id"""
        self.add_event(PropertyCreated(
            aggregate_id=self.id,
            property_id=self.id,
            owner_id=self.owner_id,
            code_internal=self.code_internal,
            price=self.price,
        ))

    def change_price(self, new_price):
        """Set a new price, rejecting non-positive values"""
        errors: List[str] = []
        amount = _positive_decimal(new_price, "Price", errors)
        ValidationError.raise_if_any(errors)
        self.price = amount

    def record_price_change(self, new_price, at: datetime) -> PropertyTrace:
        """
        Change the price and append the matching ledger entry

        Returns the new trace, which the caller must persist in the same
        unit of work as the property itself.
        """
        old_price = self.price
        self.change_price(new_price)
        trace = PropertyTrace.create(
            property_id=self.id,
            date_sale=at,
            name=PRICE_CHANGE_TRACE_NAME,
            value=self.price,
            tax=Decimal("0"),
        )
        self.add_trace(trace)
        self.add_event(PropertyPriceChanged(
            aggregate_id=self.id,
            property_id=self.id,
            old_price=old_price,
            new_price=self.price,
            changed_at=at,
        ))
        return trace

    def update_details(
        self,
        name: str | None = None,
        address: str | None = None,
        price=None,
        code_internal: str | None = None,
        year: int | None = None,
        *,
        at: datetime | None = None,
    ) -> PropertyTrace | None:
        """
        Overwrite the given fields, leaving ``None`` ones untouched

        All fields are checked before any of them is applied. A different
        price goes through ``record_price_change`` and its trace is returned.
        """
        errors: List[str] = []
        if name is not None and _is_blank(name):
            errors.append("Name cannot be empty")
        if address is not None and _is_blank(address):
            errors.append("Address cannot be empty")
        if code_internal is not None and _is_blank(code_internal):
            errors.append("Internal code cannot be empty")
        amount = None
        if price is not None:
            amount = _positive_decimal(price, "Price", errors)
        ValidationError.raise_if_any(errors)

        if name is not None:
            self.name = name
        if address is not None:
            self.address = address
        if code_internal is not None:
            self.code_internal = code_internal
        if year is not None:
            self.year = year
        if amount is not None and amount != self.price:
            return self.record_price_change(amount, at or datetime.now(timezone.utc))
        return None

    def set_owner(self, owner: Owner):
        if owner is None:
            raise ValidationError("Owner is required")
        current_owner_id = self.owner.id if self.owner is not None else self.owner_id
        if current_owner_id is not None and current_owner_id != owner.id:
            raise ConflictError(
                f"Property {self.id} already belongs to owner {current_owner_id}, "
                f"cannot change owner"
            )
        self.owner = owner
        self.owner_id = owner.id

    def add_image(self, image: PropertyImage):
        if image is None:
            raise ValidationError("Image is required")
        if image.property_id is not None and self.id is not None and image.property_id != self.id:
            raise ConflictError(
                f"Image belongs to property {image.property_id}, not {self.id}"
            )
        self.images.append(image)
        self.add_event(PropertyImageAdded(
            aggregate_id=self.id,
            property_id=self.id,
            file=image.file,
        ))

    def disable_image(self, image_id: int) -> PropertyImage:
        image = next((img for img in self.images if img.id == image_id), None)
        if image is None:
            raise NotFoundError("PropertyImage", image_id)
        if image.disable():
            self.add_event(PropertyImageDisabled(
                aggregate_id=self.id,
                property_id=self.id,
                image_id=image_id,
            ))
        return image

    def add_trace(self, trace: PropertyTrace):
        if trace is None:
            raise ValidationError("Trace is required")
        self.traces.append(trace)

    @property
    def enabled_images(self) -> List[PropertyImage]:
        return [image for image in self.images if image.enabled]

    @property
    def latest_trace(self) -> PropertyTrace | None:
        return self.traces[-1] if self.traces else None

    def __str__(self):
        return f"Property {self.code_internal} ({self.name})"


@dataclass(eq=False)
class Owner(Entity):
    """
    Owner of properties

    ``properties`` is a navigational view filled by queries; the foreign
    key lives on Property.
    """

    name: str
    address: str
    birthday: date | None
    photo: str | None = None
    properties: List[Property] = field(default_factory=list, repr=False)

    @classmethod
    def create(cls, name: str, address: str, birthday: date, photo: str | None = None) -> Owner:
        errors: List[str] = []
        if _is_blank(name):
            errors.append("Name cannot be empty")
        if _is_blank(address):
            errors.append("Address cannot be empty")
        if birthday is None:
            errors.append("Birthday is required")
        ValidationError.raise_if_any(errors)
        return cls(name=name, address=address, birthday=birthday, photo=photo)

    @classmethod
    def restore(
        cls,
        *,
        id: int,
        name: str,
        address: str,
        birthday: date | None,
        photo: str | None = None,
    ) -> Owner:
        return cls(id=id, name=name, address=address, birthday=birthday, photo=photo)

    def update_details(
        self,
        name: str | None = None,
        address: str | None = None,
        birthday: date | None = None,
        photo: str | None = None,
    ):
        errors: List[str] = []
        if name is not None and _is_blank(name):
            errors.append("Name cannot be empty")
        if address is not None and _is_blank(address):
            errors.append("Address cannot be empty")
        ValidationError.raise_if_any(errors)

        if name is not None:
            self.name = name
        if address is not None:
            self.address = address
        if birthday is not None:
            self.birthday = birthday
        if photo is not None:
            self.photo = photo

    def add_property(self, property_obj: Property):
        if property_obj is None:
            raise ValidationError("Property is required")
        if property_obj in self.properties:
            raise ConflictError(f"Property {property_obj.id} is already owned by owner {self.id}")
        property_obj.set_owner(self)
        self.properties.append(property_obj)

    def __str__(self):
        return self.name
