"""
Custom Orders Application Ports

Interface definitions (ports) for the Custom Orders domain.
Uses Protocol for structural typing.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Protocol, runtime_checkable
from uuid import UUID

from bakery.core.shared import Page, PageRequest
from bakery.domains.custom_orders.domain import CakeSize, CustomOrder, CustomOrderStatus, Flavor, Occasion


@dataclass
class CustomOrderStats:
    """Dashboard figures. Revenue counts completed orders at their displayed price."""

    total_orders: int = 0
    pending_orders: int = 0
    in_progress_orders: int = 0
    completed_orders: int = 0
    cancelled_orders: int = 0
    today_orders: int = 0
    this_month_orders: int = 0
    total_revenue: Decimal = Decimal("0.00")
    this_month_revenue: Decimal = Decimal("0.00")
    most_popular_occasion: str | None = None
    most_popular_size: str | None = None
    most_popular_flavor: str | None = None
    status_counts: dict[str, int] = field(default_factory=dict)


@runtime_checkable
class ICustomOrderRepository(Protocol):
    async def create(self, custom_order: CustomOrder) -> CustomOrder:
        """Insert and assign the order number. Commits."""
        ...

    async def get_by_id(self, custom_order_id: UUID) -> CustomOrder | None:
        ...

    async def list_custom_orders(
        self,
        page: PageRequest,
        status: CustomOrderStatus | None = None,
    ) -> Page[CustomOrder]:
        """Newest first"""
        ...

    async def update(self, custom_order: CustomOrder, expected_version: int) -> CustomOrder:
        """
        Persist status, final price, admin notes and updated_at only if the
        stored version still equals `expected_version`. Commits.

        Raises:
            ConcurrencyException: the row was changed since it was read
        """
        ...

    async def delete(self, custom_order_id: UUID) -> bool:
        ...

    async def get_stats(self, now: datetime) -> CustomOrderStats:
        ...


@runtime_checkable
class ICakeCatalogRepository(Protocol):
    """Read-only access to the cake configuration catalog."""

    async def get_occasion(self, occasion_id: UUID) -> Occasion | None:
        """Occasion with its size prices"""
        ...

    async def get_size(self, size_id: UUID) -> CakeSize | None:
        ...

    async def get_flavor(self, flavor_id: UUID) -> Flavor | None:
        ...

    async def list_sizes(self, active_only: bool = True) -> list[CakeSize]:
        ...
