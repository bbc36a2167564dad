"""
Discount Code Entity

The usage counter only ever grows. Cancelling or deleting an order that used
a code does not give the usage back.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from bakery.core.domain import Entity, Money, ValidationException

from ..value_objects.discount_kind import DiscountKind, DiscountRejectionReason, DiscountValidationResult


@dataclass
class DiscountCode(Entity[UUID]):
    """
    A redeemable code.

    Example:
        ```python
        code = DiscountCode(code="EID10", kind=DiscountKind.PERCENTAGE, percentage_value=Decimal("10"),
                            max_discount_amount=Money.from_float(50), start_date=start, end_date=end)
        code.evaluate(Money.from_float(800), now).discount_amount  # EGP 50.00 (capped)
        ```
    """

    code: str = ""
    kind: DiscountKind = DiscountKind.PERCENTAGE
    percentage_value: Decimal | None = None
    fixed_value: Money | None = None
    min_order_amount: Money | None = None
    max_discount_amount: Money | None = None
    usage_limit: int | None = None
    usage_count: int = 0
    start_date: datetime = field(default_factory=lambda: datetime.now(UTC))
    end_date: datetime = field(default_factory=lambda: datetime.now(UTC))
    is_active: bool = True

    def __post_init__(self):
        if self.kind is DiscountKind.PERCENTAGE:
            if self.percentage_value is None or not 0 <= self.percentage_value <= 100:
                raise ValidationException("Percentage must be between 0 and 100", field="percentage_value")
        elif self.fixed_value is None:
            raise ValidationException("Fixed discount needs a value", field="fixed_value")
        if self.usage_limit is not None and self.usage_limit < 0:
            raise ValidationException("Usage limit cannot be negative", field="usage_limit")

    @property
    def normalized_code(self) -> str:
        return normalize_code(self.code)

    def has_remaining_uses(self) -> bool:
        return self.usage_limit is None or self.usage_count < self.usage_limit

    def is_within_window(self, now: datetime) -> bool:
        return self.start_date <= now <= self.end_date

    def rejection_reason(self, order_amount: Money, now: datetime) -> DiscountRejectionReason | None:
        """First rule the code breaks for this order, or None."""
        if not self.is_active:
            return DiscountRejectionReason.INACTIVE
        if now < self.start_date:
            return DiscountRejectionReason.NOT_YET_VALID
        if now > self.end_date:
            return DiscountRejectionReason.EXPIRED
        if self.min_order_amount is not None and order_amount.amount < self.min_order_amount.amount:
            return DiscountRejectionReason.BELOW_MINIMUM_ORDER
        if not self.has_remaining_uses():
            return DiscountRejectionReason.USAGE_LIMIT_REACHED
        return None

    def compute_discount(self, order_amount: Money) -> Money:
        """Discount for `order_amount`; never more than the amount itself."""
        if self.kind is DiscountKind.PERCENTAGE:
            discount = order_amount.percentage(self.percentage_value or 0)
            if self.max_discount_amount is not None:
                discount = discount.min(self.max_discount_amount)
            return discount
        fixed = self.fixed_value or Money.zero(order_amount.currency)
        return fixed.min(order_amount)

    def evaluate(self, order_amount: Money, now: datetime) -> DiscountValidationResult:
        reason = self.rejection_reason(order_amount, now)
        if reason is not None:
            return DiscountValidationResult.reject(self.code, reason)
        return DiscountValidationResult.accept(self.code, self.compute_discount(order_amount))


def normalize_code(code: str) -> str:
    """Codes compare case-insensitively."""
    return code.strip().upper()
