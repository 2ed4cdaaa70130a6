"""FilterSet definitions for property search and listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .domain.query import PropertyFilter
from .models import Property


class PropertyFilterSet(django_filters.FilterSet):
    """Predicates of ``PropertyFilter`` expressed as ORM lookups."""

    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    address = django_filters.CharFilter(field_name="address", lookup_expr="icontains")
    code_internal = django_filters.CharFilter(field_name="code_internal", lookup_expr="icontains")

    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    min_year = django_filters.NumberFilter(field_name="year", lookup_expr="gte")
    max_year = django_filters.NumberFilter(field_name="year", lookup_expr="lte")
    owner_id = django_filters.NumberFilter(field_name="owner_id", lookup_expr="exact")

    class Meta:
        model = Property
        fields: list[str] = []


def apply_property_filter(queryset, property_filter: PropertyFilter):
    """Narrow ``queryset`` by the predicates present in ``property_filter``."""

    data = {key: str(value) for key, value in property_filter.predicates().items()}
    if not data:
        return queryset
    filterset = PropertyFilterSet(data=data, queryset=queryset)
    if not filterset.is_valid():
        # Reached only if a caller skipped PropertyFilter.validate()
        raise ValueError(f"Invalid property filter: {dict(filterset.errors)}")
    return filterset.qs
