"""
Shared API schemas.

JSON bodies use camelCase; Python code uses snake_case names.
"""

from typing import Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from bakery.core.shared import Page

T = TypeVar("T")
S = TypeVar("S")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageResponse(CamelModel, Generic[T]):
    """Paginated envelope."""

    items: list[T]
    total_items: int
    page_number: int
    page_size: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page[S], convert: Callable[[S], T]) -> "PageResponse[T]":
        return cls(
            items=[convert(item) for item in page.items],
            total_items=page.total_items,
            page_number=page.page_number,
            page_size=page.page_size,
            total_pages=page.total_pages,
        )


class ErrorResponse(BaseModel):
    error: bool = True
    code: str | None = None
    message: str
    details: dict | list | None = None
    status_code: int
