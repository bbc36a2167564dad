"""
Orders Application Ports

Interface definitions (ports) for the Orders domain.
Uses Protocol for structural typing.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from bakery.core.shared import Page, PageRequest
from bakery.domains.orders.domain.entities import Order, ShippingFee
from bakery.domains.orders.domain.value_objects import OrderStatus, PaymentMethod


@runtime_checkable
class IOrderRepository(Protocol):
    """
    Interface for order repository.
    """

    async def create(self, order: Order) -> Order:
        """Insert the order and its items, assigning the order number. Commits."""
        ...

    async def get_by_id(self, order_id: UUID) -> Order | None:
        ...

    async def get_by_order_number(self, order_number: str) -> Order | None:
        ...

    async def get_by_customer(self, customer_id: UUID) -> list[Order]:
        """Newest first"""
        ...

    async def list_orders(
        self,
        page: PageRequest,
        status: OrderStatus | None = None,
        payment_method: PaymentMethod | None = None,
    ) -> Page[Order]:
        """Newest first"""
        ...

    async def update_status(self, order: Order, expected_version: int) -> Order:
        """
        Persist status and updated_at only if the stored version still equals
        `expected_version`; bumps the version. Commits.

        Raises:
            ConcurrencyException: the row was changed since it was read
        """
        ...

    async def delete(self, order_id: UUID) -> bool:
        """
        Raises:
            BusinessRuleViolationException: the order is still referenced
        """
        ...


@runtime_checkable
class IShippingFeeRepository(Protocol):
    """
    Interface for shipping fee lookup.
    """

    async def get_by_governorate(self, governorate: str) -> ShippingFee | None:
        ...
