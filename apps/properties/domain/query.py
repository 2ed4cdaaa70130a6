"""
Property Query

Immutable description of a property search: optional predicates plus the
requested page. Validation reports every broken rule at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List

from shared.domain.exceptions import ValidationError
from shared.domain.value_objects import PageRequest

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PropertyFilter:
    """
    Filter over Property attributes

    Text predicates are case-insensitive substring matches, numeric ones
    are inclusive bounds and ``None`` means "no constraint". Results are
    always ordered by property id so pages are stable.
    """

    name: str | None = None
    address: str | None = None
    code_internal: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    min_year: int | None = None
    max_year: int | None = None
    owner_id: int | None = None
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def errors(self) -> List[str]:
        errors = []
        if self.page_number is None or self.page_number <= 0:
            errors.append("Page number must be greater than 0")
        if self.page_size is None or not 1 <= self.page_size <= MAX_PAGE_SIZE:
            errors.append(f"Page size must be between 1 and {MAX_PAGE_SIZE}")
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            errors.append("Min price must be less than or equal to max price")
        if (
            self.min_year is not None
            and self.max_year is not None
            and self.min_year > self.max_year
        ):
            errors.append("Min year must be less than or equal to max year")
        if self.min_price is not None and self.min_price < 0:
            errors.append("Min price must be greater than or equal to 0")
        return errors

    def validate(self) -> PropertyFilter:
        ValidationError.raise_if_any(self.errors())
        return self

    @property
    def page(self) -> PageRequest:
        return PageRequest(page_number=self.page_number, page_size=self.page_size)

    @property
    def skip(self) -> int:
        return self.page.skip

    @property
    def take(self) -> int:
        return self.page.take

    def predicates(self) -> dict:
        """Non-empty predicates keyed by field name"""
        values = {
            "name": self.name,
            "address": self.address,
            "code_internal": self.code_internal,
            "min_price": self.min_price,
            "max_price": self.max_price,
            "min_year": self.min_year,
            "max_year": self.max_year,
            "owner_id": self.owner_id,
        }
        return {
            key: value for key, value in values.items()
            if value is not None and value != ""
        }
