"""
Pagination helpers shared by list endpoints.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PageRequest:
    """1-based page number and page size, clamped to sane bounds."""

    page_number: int = 1
    page_size: int = 10
    max_page_size: int = 100

    def __post_init__(self):
        object.__setattr__(self, "page_number", max(1, self.page_number))
        object.__setattr__(self, "page_size", min(max(1, self.page_size), self.max_page_size))

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass
class Page(Generic[T]):
    items: list[T] = field(default_factory=list)
    total_items: int = 0
    page_number: int = 1
    page_size: int = 10

    @property
    def total_pages(self) -> int:
        if self.total_items == 0:
            return 0
        return math.ceil(self.total_items / self.page_size)

    def map(self, func: Callable[[T], U]) -> "Page[U]":
        return Page(
            items=[func(item) for item in self.items],
            total_items=self.total_items,
            page_number=self.page_number,
            page_size=self.page_size,
        )
