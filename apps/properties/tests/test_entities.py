"""Unit tests for the property domain entities."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from apps.properties.domain.entities import (
    PRICE_CHANGE_TRACE_NAME,
    Owner,
    Property,
    PropertyImage,
    PropertyTrace,
)
from apps.properties.domain.events import (
    PropertyImageAdded,
    PropertyImageDisabled,
    PropertyPriceChanged,
)
from shared.domain.exceptions import ConflictError, NotFoundError, ValidationError

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_property(**overrides) -> Property:
    fields = {
        "id": 1,
        "name": "Test",
        "address": "Addr",
        "price": Decimal("100.00"),
        "code_internal": "CODE-1",
        "year": 2020,
        "owner_id": 7,
    }
    fields.update(overrides)
    return Property.restore(**fields)


def make_owner(owner_id: int = 7) -> Owner:
    return Owner.restore(id=owner_id, name="Jane", address="Main St 1", birthday=date(1980, 1, 1))


class TestPropertyCreate:
    def test_keeps_price_and_starts_transient(self):
        property_obj = Property.create("Test", "Addr", Decimal("100"), "CODE-1", 2020, owner_id=7)

        assert property_obj.price == Decimal("100")
        assert property_obj.id is None
        assert property_obj.images == []
        assert property_obj.traces == []

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-5"), None, "abc", "NaN"])
    def test_rejects_non_positive_or_invalid_price(self, price):
        with pytest.raises(ValidationError):
            Property.create("Test", "Addr", price, "CODE-1", 2020)

    def test_reports_every_violation(self):
        with pytest.raises(ValidationError) as exc_info:
            Property.create("  ", "Addr", Decimal("-1"), "CODE-1", 2020)

        assert exc_info.value.errors == ["Name cannot be empty", "Price must be positive"]
        assert str(exc_info.value) == "Name cannot be empty; Price must be positive"

    @pytest.mark.parametrize(
        "price, message",
        [
            (Decimal("0.004"), "Price must have at most 2 decimal places"),
            (Decimal("10.125"), "Price must have at most 2 decimal places"),
            (Decimal("1E16"), "Price must have at most 16 integer digits"),
        ],
    )
    def test_rejects_price_the_money_column_cannot_hold(self, price, message):
        with pytest.raises(ValidationError) as exc_info:
            Property.create("", "Addr", price, "CODE-1", 2020)

        assert exc_info.value.errors == ["Name cannot be empty", message]

    def test_trailing_zeros_are_not_extra_precision(self):
        property_obj = Property.create("Test", "Addr", Decimal("12.5000"), "CODE-1", 2020)

        assert property_obj.price == Decimal("12.50")

    def test_restore_does_not_validate(self):
        property_obj = make_property(price=Decimal("0"))

        assert property_obj.price == Decimal("0")


class TestPriceLedger:
    def test_record_price_change_appends_trace(self):
        property_obj = make_property()

        trace = property_obj.record_price_change(Decimal("200"), NOW)

        assert property_obj.price == Decimal("200")
        assert trace.name == PRICE_CHANGE_TRACE_NAME
        assert trace.value == Decimal("200")
        assert trace.tax == Decimal("0")
        assert trace.date_sale == NOW
        assert trace.property_id == 1
        assert property_obj.latest_trace is trace

    def test_record_price_change_raises_event(self):
        property_obj = make_property()

        property_obj.record_price_change(Decimal("150"), NOW)

        [event] = property_obj.events
        assert isinstance(event, PropertyPriceChanged)
        assert event.old_price == Decimal("100.00")
        assert event.new_price == Decimal("150")

    def test_invalid_price_leaves_state_untouched(self):
        property_obj = make_property()

        with pytest.raises(ValidationError):
            property_obj.record_price_change(Decimal("0"), NOW)

        assert property_obj.price == Decimal("100.00")
        assert property_obj.traces == []
        assert property_obj.events == []

    def test_trace_factory_validates_value(self):
        with pytest.raises(ValidationError):
            PropertyTrace.create(property_id=1, date_sale=NOW, name="Sale", value=Decimal("0"))

    def test_sub_cent_price_change_is_rejected(self):
        property_obj = make_property()

        with pytest.raises(ValidationError):
            property_obj.record_price_change(Decimal("0.004"), NOW)

        assert property_obj.price == Decimal("100.00")
        assert property_obj.traces == []


class TestUpdateDetails:
    def test_missing_fields_are_preserved(self):
        property_obj = make_property()

        trace = property_obj.update_details(address="New Addr")

        assert trace is None
        assert property_obj.name == "Test"
        assert property_obj.address == "New Addr"
        assert property_obj.price == Decimal("100.00")

    def test_changed_price_records_trace(self):
        property_obj = make_property()

        trace = property_obj.update_details(price=Decimal("300"), at=NOW)

        assert trace is not None
        assert trace.value == Decimal("300")
        assert property_obj.traces == [trace]

    def test_same_price_records_nothing(self):
        property_obj = make_property()

        assert property_obj.update_details(price=Decimal("100")) is None
        assert property_obj.traces == []

    def test_nothing_applied_when_any_field_is_invalid(self):
        property_obj = make_property()

        with pytest.raises(ValidationError) as exc_info:
            property_obj.update_details(name="Renamed", address=" ", price=Decimal("-1"))

        assert len(exc_info.value.errors) == 2
        assert property_obj.name == "Test"
        assert property_obj.address == "Addr"


class TestImages:
    def test_add_image_raises_event(self):
        property_obj = make_property()
        image = PropertyImage.create(property_id=1, file="photo.jpg")

        property_obj.add_image(image)

        assert image.enabled is True
        assert property_obj.images == [image]
        assert isinstance(property_obj.events[0], PropertyImageAdded)

    def test_blank_file_is_rejected(self):
        with pytest.raises(ValidationError):
            PropertyImage.create(property_id=1, file="")

    def test_image_of_another_property_is_a_conflict(self):
        property_obj = make_property()

        with pytest.raises(ConflictError):
            property_obj.add_image(PropertyImage.create(property_id=2, file="photo.jpg"))

    def test_disable_image_is_one_way(self):
        image = PropertyImage.restore(id=10, property_id=1, file="a.jpg", enabled=True)
        property_obj = make_property(images=[image])

        property_obj.disable_image(10)
        property_obj.disable_image(10)

        assert image.enabled is False
        assert property_obj.enabled_images == []
        assert [type(event) for event in property_obj.events] == [PropertyImageDisabled]

    def test_disable_unknown_image(self):
        property_obj = make_property()

        with pytest.raises(NotFoundError):
            property_obj.disable_image(99)


class TestOwnership:
    def test_add_property_links_both_sides(self):
        owner = make_owner()
        property_obj = Property.create("Test", "Addr", Decimal("100"), "CODE-1", 2020)

        owner.add_property(property_obj)

        assert property_obj.owner is owner
        assert property_obj.owner_id == owner.id
        assert owner.properties == [property_obj]

    def test_add_property_twice_is_a_conflict(self):
        owner = make_owner()
        property_obj = make_property()
        owner.add_property(property_obj)

        with pytest.raises(ConflictError):
            owner.add_property(property_obj)

    def test_owner_cannot_be_swapped(self):
        property_obj = make_property()
        property_obj.set_owner(make_owner(7))

        with pytest.raises(ConflictError):
            property_obj.set_owner(make_owner(8))

    def test_loaded_property_keeps_its_owner_id(self):
        property_obj = make_property(owner_id=7)

        with pytest.raises(ConflictError):
            property_obj.set_owner(make_owner(8))

        assert property_obj.owner_id == 7
        assert property_obj.owner is None

    def test_owner_factory_reports_every_violation(self):
        with pytest.raises(ValidationError) as exc_info:
            Owner.create(name="", address="", birthday=None)

        assert len(exc_info.value.errors) == 3

    def test_owner_update_ignores_missing_fields(self):
        owner = make_owner()

        owner.update_details(address="Elm St 2")

        assert owner.name == "Jane"
        assert owner.address == "Elm St 2"
        assert owner.birthday == date(1980, 1, 1)


class TestIdentity:
    def test_persisted_entities_compare_by_id(self):
        assert make_property() == make_property(name="Other")
        assert make_property(id=1) != make_property(id=2)

    def test_transient_entities_are_only_equal_to_themselves(self):
        first = Property.create("Test", "Addr", Decimal("100"), "CODE-1", 2020)
        second = Property.create("Test", "Addr", Decimal("100"), "CODE-1", 2020)

        assert first == first
        assert first != second

    def test_identity_cannot_be_reassigned(self):
        property_obj = make_property(id=1)

        property_obj.assign_identity(1)
        with pytest.raises(ConflictError):
            property_obj.assign_identity(2)
