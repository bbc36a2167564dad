"""
Order lookup use cases (admin): by id, by order number, by customer.
"""

from uuid import UUID

from bakery.core.domain import EntityNotFoundException
from bakery.domains.orders.application.ports import IOrderRepository
from bakery.domains.orders.domain import Order


class GetOrderUseCase:
    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_id: UUID) -> Order:
        order = await self.order_repository.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundException("Order", order_id)
        return order


class GetOrderByNumberUseCase:
    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_number: str) -> Order:
        normalized = order_number.strip().upper()
        order = await self.order_repository.get_by_order_number(normalized)
        if order is None:
            raise EntityNotFoundException("Order", normalized, f"Order {normalized} not found")
        return order


class GetCustomerOrdersUseCase:
    """All orders of one customer, newest first. An unknown customer simply has none."""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, customer_id: UUID) -> list[Order]:
        return await self.order_repository.get_by_customer(customer_id)
