"""
Custom Order Status Value Objects

Wire values are the PascalCase names; legacy integer codes follow
declaration order (Pending = 0 ... Cancelled = 5).
"""

from bakery.core.domain import StatusEnum


class CustomOrderStatus(StatusEnum):
    """
    Custom cake order states.

    Usual flow: PENDING -> CONFIRMED -> IN_PROGRESS -> READY -> COMPLETED.
    Administrators may set any state directly, backwards included.
    """

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    IN_PROGRESS = "InProgress"
    READY = "Ready"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    def is_open(self) -> bool:
        return self not in (CustomOrderStatus.COMPLETED, CustomOrderStatus.CANCELLED)


class CustomOrderPaymentMethod(StatusEnum):
    """Cash at pickup, mobile wallet transfer or bank transfer app."""

    CASH = "Cash"
    VODAFONE_CASH = "VodafoneCash"
    INSTAPAY = "Instapay"
