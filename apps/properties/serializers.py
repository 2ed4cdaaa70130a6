"""Serializers for the properties domain.

Input serializers only parse transport types and build the commands of the
application layer; business rules are enforced by the services so every
violation is reported together. Output serializers render the read-only
DTOs returned by the services.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .application.commands import (
    CreateOwnerCommand,
    CreatePropertyCommand,
    OwnerPatch,
    PropertyPatch,
)
from .domain.entities import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS
from .domain.query import DEFAULT_PAGE_SIZE, PropertyFilter

MONEY = {"max_digits": MONEY_MAX_DIGITS, "decimal_places": MONEY_DECIMAL_PLACES}


# ===== Input =====

class PropertyCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, allow_blank=True)
    address = serializers.CharField(max_length=255, allow_blank=True)
    price = serializers.DecimalField(**MONEY)
    code_internal = serializers.CharField(max_length=100, allow_blank=True)
    year = serializers.IntegerField()
    owner_id = serializers.IntegerField()

    def to_command(self) -> CreatePropertyCommand:
        return CreatePropertyCommand(**self.validated_data)


class PropertyUpdateSerializer(serializers.Serializer):
    """Absent and null fields both mean "leave unchanged"."""

    name = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    address = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    price = serializers.DecimalField(required=False, allow_null=True, **MONEY)
    code_internal = serializers.CharField(max_length=100, required=False, allow_null=True, allow_blank=True)
    year = serializers.IntegerField(required=False, allow_null=True)

    def to_patch(self) -> PropertyPatch:
        return PropertyPatch(**self.validated_data)


class PriceChangeSerializer(serializers.Serializer):
    price = serializers.DecimalField(**MONEY)


class PropertyImageCreateSerializer(serializers.Serializer):
    file = serializers.CharField(allow_blank=True)


class PropertyQuerySerializer(serializers.Serializer):
    """Query string of the property listing."""

    name = serializers.CharField(required=False, allow_blank=True)
    address = serializers.CharField(required=False, allow_blank=True)
    code_internal = serializers.CharField(required=False, allow_blank=True)
    min_price = serializers.DecimalField(required=False, **MONEY)
    max_price = serializers.DecimalField(required=False, **MONEY)
    min_year = serializers.IntegerField(required=False)
    max_year = serializers.IntegerField(required=False)
    owner_id = serializers.IntegerField(required=False)
    page_number = serializers.IntegerField(required=False, default=1)
    page_size = serializers.IntegerField(required=False, default=DEFAULT_PAGE_SIZE)

    def to_filter(self) -> PropertyFilter:
        data = {key: value for key, value in self.validated_data.items() if value != ""}
        return PropertyFilter(**data)


class OwnerCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, allow_blank=True)
    address = serializers.CharField(max_length=255, allow_blank=True)
    birthday = serializers.DateField()
    photo = serializers.CharField(max_length=500, required=False, allow_null=True, allow_blank=True)

    def to_command(self) -> CreateOwnerCommand:
        data = dict(self.validated_data)
        data["photo"] = data.get("photo") or None
        return CreateOwnerCommand(**data)


class OwnerUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    address = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    birthday = serializers.DateField(required=False, allow_null=True)
    photo = serializers.CharField(max_length=500, required=False, allow_null=True)

    def to_patch(self) -> OwnerPatch:
        return OwnerPatch(**self.validated_data)


# ===== Output =====

class OwnerSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    address = serializers.CharField(read_only=True)
    birthday = serializers.DateField(read_only=True)
    photo = serializers.CharField(read_only=True, allow_null=True)


class PropertyImageSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    property_id = serializers.IntegerField(read_only=True)
    file = serializers.CharField(read_only=True)
    enabled = serializers.BooleanField(read_only=True)


class PropertyTraceSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    property_id = serializers.IntegerField(read_only=True)
    date_sale = serializers.DateTimeField(read_only=True)
    name = serializers.CharField(read_only=True)
    value = serializers.DecimalField(read_only=True, **MONEY)
    tax = serializers.DecimalField(read_only=True, **MONEY)


class PropertySerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    address = serializers.CharField(read_only=True)
    price = serializers.DecimalField(read_only=True, **MONEY)
    code_internal = serializers.CharField(read_only=True)
    year = serializers.IntegerField(read_only=True)
    owner_id = serializers.IntegerField(read_only=True)
    owner = OwnerSerializer(read_only=True, allow_null=True)
    images = PropertyImageSerializer(many=True, read_only=True)
    traces = PropertyTraceSerializer(many=True, read_only=True)


class PropertyPageSerializer(serializers.Serializer):
    items = PropertySerializer(many=True, read_only=True)
    total_count = serializers.IntegerField(read_only=True)
    page_number = serializers.IntegerField(read_only=True)
    page_size = serializers.IntegerField(read_only=True)
    total_pages = serializers.IntegerField(read_only=True)
    has_next = serializers.BooleanField(read_only=True)
