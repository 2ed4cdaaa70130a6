"""
Common Value Objects

Value objects used across multiple domains:
- PageRequest: Page number and size of a paginated query
- PagedResult: One page of items plus the total count of the full match
"""

from dataclasses import dataclass
from math import ceil
from typing import Callable, Generic, Sequence, TypeVar

from shared.domain.base import ValueObject

T = TypeVar('T')
R = TypeVar('R')


@dataclass(frozen=True)
class PageRequest(ValueObject):
    """
    Page request value object

    Pages are numbered from 1. Range checks are left to the query
    objects that own their limits, this only derives the window.
    """
    page_number: int = 1
    page_size: int = 20

    @property
    def skip(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def take(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class PagedResult(ValueObject, Generic[T]):
    """
    Paged result value object

    Wraps one window of a deterministically ordered result set.
    ``total_count`` always covers the whole filtered set, so a page past
    the end has no items but still reports the real total.
    """
    items: Sequence[T]
    total_count: int
    page_number: int
    page_size: int

    def __post_init__(self):
        if self.total_count < 0:
            raise ValueError("Total count cannot be negative")
        # Freeze the window
        object.__setattr__(self, 'items', tuple(self.items))

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    def map(self, func: Callable[[T], R]) -> 'PagedResult[R]':
        """Return the same page with every item converted by ``func``"""
        return PagedResult(
            items=[func(item) for item in self.items],
            total_count=self.total_count,
            page_number=self.page_number,
            page_size=self.page_size,
        )

    def __len__(self) -> int:
        return len(self.items)
