"""
Update Order Status Use Case

Advance or cancel an order (admin).
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from bakery.core.domain import (
    ConcurrencyException,
    DomainEventPublisher,
    EntityNotFoundException,
    ValidationException,
)
from bakery.domains.orders.application.ports import IOrderRepository
from bakery.domains.orders.domain import Order, OrderStatus, OrderStatusMachine, OrderStatusTransition

logger = logging.getLogger(__name__)


@dataclass
class UpdateOrderStatusRequest:
    order_id: UUID
    status: str | int | OrderStatus
    expected_version: int | None = None


@dataclass
class OrderStatusChangeResponse:
    order: Order
    transition: OrderStatusTransition
    allowed_targets: list[OrderStatus]


async def load_for_update(
    repository: IOrderRepository,
    order_id: UUID,
    expected_version: int | None,
) -> Order:
    """Load an order and reject stale client versions before any write."""
    order = await repository.get_by_id(order_id)
    if order is None:
        raise EntityNotFoundException("Order", order_id)
    if expected_version is not None and expected_version != order.version:
        raise ConcurrencyException("Order", order_id, expected_version, order.version)
    return order


async def persist_transition(
    repository: IOrderRepository,
    machine: OrderStatusMachine,
    order: Order,
    transition: OrderStatusTransition,
) -> OrderStatusChangeResponse:
    read_version = order.version
    order.apply_transition(transition)
    saved = await repository.update_status(order, expected_version=read_version)

    logger.info(f"Order {saved.order_number}: {transition}")
    await DomainEventPublisher.publish_all(order.get_domain_events())
    order.clear_domain_events()

    return OrderStatusChangeResponse(
        order=saved,
        transition=transition,
        allowed_targets=machine.allowed_targets(saved.status),
    )


class UpdateOrderStatusUseCase:
    """
    Use Case: Update Order Status

    The machine validates before anything is written; the write is
    conditioned on the version that was read.
    """

    def __init__(self, order_repository: IOrderRepository, machine: OrderStatusMachine | None = None):
        self.order_repository = order_repository
        self.machine = machine or OrderStatusMachine()

    async def execute(self, request: UpdateOrderStatusRequest) -> OrderStatusChangeResponse:
        try:
            target = OrderStatus.parse(request.status)
        except ValueError as e:
            raise ValidationException(str(e), field="status") from e

        order = await load_for_update(self.order_repository, request.order_id, request.expected_version)
        transition = self.machine.plan_advance(order, target)
        return await persist_transition(self.order_repository, self.machine, order, transition)
