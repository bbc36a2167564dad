"""
Rollback Order Status Use Case

Undo one status step entered by mistake (admin).
"""

from dataclasses import dataclass
from uuid import UUID

from bakery.domains.orders.application.ports import IOrderRepository
from bakery.domains.orders.domain import OrderStatusMachine

from .update_order_status import OrderStatusChangeResponse, load_for_update, persist_transition


@dataclass
class RollbackOrderStatusRequest:
    order_id: UUID
    expected_version: int | None = None


class RollbackOrderStatusUseCase:
    def __init__(self, order_repository: IOrderRepository, machine: OrderStatusMachine | None = None):
        self.order_repository = order_repository
        self.machine = machine or OrderStatusMachine()

    async def execute(self, request: RollbackOrderStatusRequest) -> OrderStatusChangeResponse:
        order = await load_for_update(self.order_repository, request.order_id, request.expected_version)
        transition = self.machine.plan_rollback(order)
        return await persist_transition(self.order_repository, self.machine, order, transition)
