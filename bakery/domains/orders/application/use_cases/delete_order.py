"""
Delete Order Use Case

Fails while anything else still references the order. Discount usage taken
by the order is not given back.
"""

import logging
from uuid import UUID

from bakery.core.domain import EntityNotFoundException
from bakery.domains.orders.application.ports import IOrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderUseCase:
    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_id: UUID) -> None:
        deleted = await self.order_repository.delete(order_id)
        if not deleted:
            raise EntityNotFoundException("Order", order_id)
        logger.info(f"Order deleted: {order_id}")
