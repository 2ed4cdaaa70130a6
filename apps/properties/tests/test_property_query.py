"""Tests for the property filter and paged results."""

from __future__ import annotations

from decimal import Decimal

import pytest

from apps.properties.domain.query import MAX_PAGE_SIZE, PropertyFilter
from shared.domain.exceptions import ValidationError
from shared.domain.value_objects import PagedResult


def test_defaults_are_valid():
    property_filter = PropertyFilter()

    assert property_filter.validate() is property_filter
    assert property_filter.page_number == 1
    assert property_filter.page_size == 20
    assert property_filter.predicates() == {}


def test_inverted_price_range_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        PropertyFilter(min_price=Decimal("500"), max_price=Decimal("100")).validate()

    assert exc_info.value.errors == ["Min price must be less than or equal to max price"]


@pytest.mark.parametrize("page_size", [0, MAX_PAGE_SIZE + 1])
def test_page_size_out_of_bounds(page_size):
    with pytest.raises(ValidationError):
        PropertyFilter(page_size=page_size).validate()


def test_all_violations_are_reported():
    property_filter = PropertyFilter(
        page_number=0,
        page_size=101,
        min_price=Decimal("-1"),
        min_year=2020,
        max_year=2000,
    )

    assert property_filter.errors() == [
        "Page number must be greater than 0",
        "Page size must be between 1 and 100",
        "Min year must be less than or equal to max year",
        "Min price must be greater than or equal to 0",
    ]


def test_window_is_derived_from_page():
    property_filter = PropertyFilter(page_number=3, page_size=10)

    assert property_filter.skip == 20
    assert property_filter.take == 10


def test_predicates_skip_empty_values():
    property_filter = PropertyFilter(name="", address="Main", min_year=2000)

    assert property_filter.predicates() == {"address": "Main", "min_year": 2000}


def test_paged_result_counts_pages():
    page = PagedResult(items=[1, 2], total_count=5, page_number=1, page_size=2)

    assert page.items == (1, 2)
    assert page.total_pages == 3
    assert page.has_next is True
    assert page.map(str).items == ("1", "2")


def test_page_past_the_end_keeps_total():
    page = PagedResult(items=[], total_count=5, page_number=4, page_size=2)

    assert len(page) == 0
    assert page.total_count == 5
    assert page.has_next is False
