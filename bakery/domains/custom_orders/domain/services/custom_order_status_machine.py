"""
Custom Order Status Machine

Custom cakes are made by hand and their production is not linear, so an
administrator may set any of the six statuses, backwards included. What is
checked is the input: a known status and a non-negative final price. Both are
validated before the order is touched.
"""

from decimal import Decimal, InvalidOperation

from bakery.core.domain import Money, ValidationException

from ..entities.custom_order import CustomOrder, CustomOrderUpdate
from ..value_objects import CustomOrderStatus


class CustomOrderStatusMachine:
    """
    Example:
        ```python
        machine = CustomOrderStatusMachine()
        machine.update_status(order, "Ready", final_price=275)
        order.status           # CustomOrderStatus.READY
        order.displayed_price  # EGP 275.00
        ```
    """

    def __init__(self, currency: str = "EGP"):
        self.currency = currency

    def allowed_targets(self, status: CustomOrderStatus) -> list[CustomOrderStatus]:
        return list(CustomOrderStatus)

    def plan(
        self,
        target: str | int | CustomOrderStatus,
        final_price: Money | Decimal | int | float | str | None = None,
        admin_notes: str | None = None,
    ) -> CustomOrderUpdate:
        """Validate an update without touching any order."""
        try:
            status = CustomOrderStatus.parse(target)
        except ValueError as e:
            raise ValidationException(str(e), field="status") from e

        return CustomOrderUpdate(
            status=status,
            final_price=self._validate_price(final_price),
            admin_notes=admin_notes,
            replace_admin_notes=admin_notes is not None,
        )

    def update_status(
        self,
        custom_order: CustomOrder,
        target: str | int | CustomOrderStatus,
        final_price: Money | Decimal | int | float | str | None = None,
        admin_notes: str | None = None,
    ) -> CustomOrderUpdate:
        """
        Set status and, optionally, the final price and admin notes.

        `admin_notes` replaces the previous notes (an empty string clears
        them); None keeps them.

        Raises:
            ValidationException: unknown status or invalid price. The order
                is left unchanged.
        """
        update = self.plan(target, final_price, admin_notes)
        custom_order.apply_update(update)
        return update

    def _validate_price(self, final_price) -> Money | None:
        if final_price is None:
            return None
        if isinstance(final_price, Money):
            amount = final_price.amount
        elif isinstance(final_price, bool):
            raise ValidationException("Final price must be a number", field="finalPrice")
        else:
            try:
                amount = Decimal(str(final_price))
            except InvalidOperation as e:
                raise ValidationException("Final price must be a number", field="finalPrice") from e
        if not amount.is_finite():
            raise ValidationException("Final price must be a number", field="finalPrice")
        if amount < 0:
            raise ValidationException("Final price cannot be negative", field="finalPrice")
        return Money.from_float(amount, self.currency)
