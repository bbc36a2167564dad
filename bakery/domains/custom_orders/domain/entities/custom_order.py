"""
Custom Order Entity

A bespoke cake order. The estimate is fixed at submission; an administrator
may later set a final price which then replaces it everywhere.
"""

from dataclasses import dataclass, field
from datetime import date, time
from uuid import UUID

from bakery.core.domain import AggregateRoot, Money

from ..events import CustomOrderStatusChanged
from ..value_objects import CustomOrderPaymentMethod, CustomOrderStatus


@dataclass
class CakeSelection:
    """Catalog choices with the names shown at submission time."""

    occasion_id: UUID
    size_id: UUID
    flavor_id: UUID
    occasion_name: str = ""
    size_name: str = ""
    flavor_name: str = ""


@dataclass
class CustomOrderUpdate:
    """An admin update already validated by CustomOrderStatusMachine."""

    status: CustomOrderStatus
    final_price: Money | None = None
    admin_notes: str | None = None
    replace_admin_notes: bool = False


@dataclass
class CustomOrder(AggregateRoot[UUID]):
    order_number: str | None = None
    user_id: UUID | None = None
    customer_name: str = ""
    customer_phone: str = ""

    selection: CakeSelection | None = None
    custom_text: str | None = None
    design_image_url: str | None = None
    pickup_date: date | None = None
    pickup_time: time | None = None
    notes: str | None = None

    payment_method: CustomOrderPaymentMethod = CustomOrderPaymentMethod.CASH
    status: CustomOrderStatus = CustomOrderStatus.PENDING

    estimated_price: Money = field(default_factory=Money.zero)
    final_price: Money | None = None
    admin_notes: str | None = None

    @property
    def displayed_price(self) -> Money:
        """Final price once set, otherwise the estimate."""
        return self.final_price if self.final_price is not None else self.estimated_price

    def apply_update(self, update: CustomOrderUpdate) -> None:
        previous = self.status
        self.status = update.status
        if update.final_price is not None:
            self.final_price = update.final_price
        if update.replace_admin_notes:
            self.admin_notes = update.admin_notes or None
        self.touch()
        self._record_event(
            CustomOrderStatusChanged(
                custom_order_id=self.id,
                order_number=self.order_number or "",
                total=self.displayed_price.amount,
                previous_status=previous.value,
                status=self.status.value,
                final_price=self.final_price.amount if self.final_price else None,
            )
        )
