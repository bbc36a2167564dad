"""Test utilities and helpers."""

from tests.utils.builders import (
    DiscountCodeBuilder,
    OrderBuilder,
    make_custom_order,
    make_flavor,
    make_occasion,
    make_size,
)
from tests.utils.fakes import (
    InMemoryCakeCatalogRepository,
    InMemoryCustomOrderRepository,
    InMemoryDiscountCodeRepository,
    InMemoryOrderRepository,
    InMemoryShippingFeeRepository,
)

__all__ = [
    # Builders
    "OrderBuilder",
    "DiscountCodeBuilder",
    "make_occasion",
    "make_size",
    "make_flavor",
    "make_custom_order",
    # Fakes
    "InMemoryOrderRepository",
    "InMemoryShippingFeeRepository",
    "InMemoryDiscountCodeRepository",
    "InMemoryCustomOrderRepository",
    "InMemoryCakeCatalogRepository",
]
