"""
Custom order lookup, deletion and statistics (admin).
"""

import logging
from datetime import UTC, datetime
from uuid import UUID

from bakery.core.domain import EntityNotFoundException
from bakery.domains.custom_orders.application.ports import CustomOrderStats, ICustomOrderRepository
from bakery.domains.custom_orders.domain import CustomOrder

logger = logging.getLogger(__name__)


class GetCustomOrderUseCase:
    def __init__(self, custom_order_repository: ICustomOrderRepository):
        self.custom_order_repository = custom_order_repository

    async def execute(self, custom_order_id: UUID) -> CustomOrder:
        custom_order = await self.custom_order_repository.get_by_id(custom_order_id)
        if custom_order is None:
            raise EntityNotFoundException("CustomOrder", custom_order_id)
        return custom_order


class DeleteCustomOrderUseCase:
    """Nothing references custom orders, so deletion is unconditional."""

    def __init__(self, custom_order_repository: ICustomOrderRepository):
        self.custom_order_repository = custom_order_repository

    async def execute(self, custom_order_id: UUID) -> None:
        if not await self.custom_order_repository.delete(custom_order_id):
            raise EntityNotFoundException("CustomOrder", custom_order_id)
        logger.info(f"Custom order deleted: {custom_order_id}")


class GetCustomOrderStatsUseCase:
    def __init__(self, custom_order_repository: ICustomOrderRepository):
        self.custom_order_repository = custom_order_repository

    async def execute(self, now: datetime | None = None) -> CustomOrderStats:
        return await self.custom_order_repository.get_stats(now or datetime.now(UTC))
