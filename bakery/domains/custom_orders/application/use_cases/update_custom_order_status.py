"""
Update Custom Order Status Use Case

Status, final price and admin notes in one validated, versioned write.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from bakery.core.domain import ConcurrencyException, DomainEventPublisher, EntityNotFoundException
from bakery.domains.custom_orders.application.ports import ICustomOrderRepository
from bakery.domains.custom_orders.domain import CustomOrder, CustomOrderStatus, CustomOrderStatusMachine

logger = logging.getLogger(__name__)


@dataclass
class UpdateCustomOrderStatusRequest:
    custom_order_id: UUID
    status: str | int | CustomOrderStatus
    final_price: Decimal | None = None
    admin_notes: str | None = None
    expected_version: int | None = None


class UpdateCustomOrderStatusUseCase:
    def __init__(self, custom_order_repository: ICustomOrderRepository, machine: CustomOrderStatusMachine):
        self.custom_order_repository = custom_order_repository
        self.machine = machine

    async def execute(self, request: UpdateCustomOrderStatusRequest) -> CustomOrder:
        # Validate input before loading so a bad request never reaches the database
        update = self.machine.plan(request.status, request.final_price, request.admin_notes)

        custom_order = await self.custom_order_repository.get_by_id(request.custom_order_id)
        if custom_order is None:
            raise EntityNotFoundException("CustomOrder", request.custom_order_id)
        if request.expected_version is not None and request.expected_version != custom_order.version:
            raise ConcurrencyException(
                "CustomOrder", request.custom_order_id, request.expected_version, custom_order.version
            )

        read_version = custom_order.version
        previous = custom_order.status
        custom_order.apply_update(update)
        saved = await self.custom_order_repository.update(custom_order, expected_version=read_version)

        logger.info(
            f"Custom order {saved.order_number}: {previous.value} -> {saved.status.value} "
            f"price={saved.displayed_price}"
        )
        await DomainEventPublisher.publish_all(custom_order.get_domain_events())
        custom_order.clear_domain_events()
        return saved
