"""
Order Status Machine for the Orders Domain

Forward transitions are strictly sequential so that confirmation and dispatch
are always recorded. Cancellation may happen at any point before delivery.
Rollback undoes one step of the forward sequence; a cancelled order rolls
back to UnderReview because the status held before cancelling is not kept.
"""

from typing import Tuple

from bakery.core.domain import InvalidTransitionException, NoPreviousStatusException

from ..entities.order import Order
from ..value_objects.order_status import OrderStatus, OrderStatusTransition

FORWARD_SEQUENCE: Tuple[OrderStatus, ...] = (
    OrderStatus.UNDER_REVIEW,
    OrderStatus.CONFIRMED,
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
)

INITIAL_STATUS = OrderStatus.UNDER_REVIEW


class OrderStatusMachine:
    """
    Owns the valid status transitions of merchandise orders.

    Example:
        ```python
        machine = OrderStatusMachine()
        machine.advance(order, OrderStatus.CONFIRMED)   # UnderReview -> Confirmed
        machine.advance(order, OrderStatus.DELIVERED)   # raises InvalidTransitionException
        machine.rollback(order)                         # Confirmed -> UnderReview
        ```
    """

    @staticmethod
    def next_status(status: OrderStatus) -> OrderStatus | None:
        """Immediate successor in the forward sequence, None at the end or off it."""
        if status not in FORWARD_SEQUENCE:
            return None
        index = FORWARD_SEQUENCE.index(status)
        if index + 1 >= len(FORWARD_SEQUENCE):
            return None
        return FORWARD_SEQUENCE[index + 1]

    @staticmethod
    def previous_status(status: OrderStatus) -> OrderStatus | None:
        """Rollback target, None for the initial status or one off the sequence."""
        if status is OrderStatus.CANCELLED:
            return INITIAL_STATUS
        if status not in FORWARD_SEQUENCE:
            return None
        index = FORWARD_SEQUENCE.index(status)
        if index == 0:
            return None
        return FORWARD_SEQUENCE[index - 1]

    def allowed_targets(self, status: OrderStatus) -> list[OrderStatus]:
        """Statuses `advance` accepts from `status`."""
        targets = []
        successor = self.next_status(status)
        if successor is not None:
            targets.append(successor)
        if status.can_be_cancelled():
            targets.append(OrderStatus.CANCELLED)
        return targets

    def can_advance(self, current: OrderStatus, target: OrderStatus) -> bool:
        return target in self.allowed_targets(current)

    def plan_advance(self, order: Order, target: OrderStatus) -> OrderStatusTransition:
        """Validate an advance without touching the order."""
        if not self.can_advance(order.status, target):
            raise InvalidTransitionException(
                order.status.value,
                target.value,
                allowed=[s.value for s in self.allowed_targets(order.status)],
            )
        return OrderStatusTransition(from_status=order.status, to_status=target)

    def plan_rollback(self, order: Order) -> OrderStatusTransition:
        """Validate a rollback without touching the order."""
        previous = self.previous_status(order.status)
        if previous is None:
            raise NoPreviousStatusException(order.status.value)
        return OrderStatusTransition(from_status=order.status, to_status=previous, is_rollback=True)

    def advance(self, order: Order, target: OrderStatus) -> OrderStatusTransition:
        """
        Move the order to `target`.

        Raises:
            InvalidTransitionException: target is neither the immediate successor
                nor an allowed cancellation. The order is left unchanged.
        """
        transition = self.plan_advance(order, target)
        order.apply_transition(transition)
        return transition

    def rollback(self, order: Order) -> OrderStatusTransition:
        """
        Move the order one step back.

        Raises:
            NoPreviousStatusException: the order is already UnderReview.
        """
        transition = self.plan_rollback(order)
        order.apply_transition(transition)
        return transition
