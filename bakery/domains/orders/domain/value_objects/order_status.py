"""
Order Status Value Objects for the Orders Domain

Wire values are the PascalCase names. Legacy clients send the integer code,
which is the declaration position (UnderReview = 0 ... Cancelled = 4).
"""

from dataclasses import dataclass

from bakery.core.domain import StatusEnum


class OrderStatus(StatusEnum):
    """
    Merchandise order lifecycle states.

    Forward sequence: UNDER_REVIEW -> CONFIRMED -> SHIPPED -> DELIVERED.
    CANCELLED is reachable from any status before DELIVERED.
    """

    UNDER_REVIEW = "UnderReview"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    def is_terminal(self) -> bool:
        """Delivered and Cancelled accept no forward transition."""
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    def can_be_cancelled(self) -> bool:
        return not self.is_terminal()


class PaymentMethod(StatusEnum):
    """How an order is paid (Cash = cash on delivery)."""

    CASH = "Cash"
    CARD = "Card"
    ONLINE_PAYMENT = "OnlinePayment"


@dataclass(frozen=True)
class OrderStatusTransition:
    """A status change as recorded on the order and announced to collaborators."""

    from_status: OrderStatus
    to_status: OrderStatus
    is_rollback: bool = False

    def __str__(self) -> str:
        arrow = "<-" if self.is_rollback else "->"
        return f"{self.from_status.value} {arrow} {self.to_status.value}"
