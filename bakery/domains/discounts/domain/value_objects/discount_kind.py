"""
Discount Value Objects
"""

from dataclasses import dataclass, field

from bakery.core.domain import Money, StatusEnum


class DiscountKind(StatusEnum):
    PERCENTAGE = "Percentage"
    FIXED = "Fixed"


class DiscountRejectionReason(StatusEnum):
    """
    Why a code cannot be applied. Each reason is shown to the customer as is.

    NOT_YET_VALID and EXPIRED together form "outside the validity window".
    """

    UNKNOWN_CODE = "UnknownCode"
    INACTIVE = "Inactive"
    NOT_YET_VALID = "NotYetValid"
    EXPIRED = "Expired"
    BELOW_MINIMUM_ORDER = "BelowMinimumOrder"
    USAGE_LIMIT_REACHED = "UsageLimitReached"

    @property
    def message(self) -> str:
        return _REASON_MESSAGES[self]


_REASON_MESSAGES = {
    DiscountRejectionReason.UNKNOWN_CODE: "This discount code does not exist",
    DiscountRejectionReason.INACTIVE: "This discount code is no longer active",
    DiscountRejectionReason.NOT_YET_VALID: "This discount code is not valid yet",
    DiscountRejectionReason.EXPIRED: "This discount code has expired",
    DiscountRejectionReason.BELOW_MINIMUM_ORDER: "Your order is below the minimum amount for this code",
    DiscountRejectionReason.USAGE_LIMIT_REACHED: "This discount code has reached its usage limit",
}


@dataclass(frozen=True)
class DiscountValidationResult:
    """Outcome of validating a code against an order amount."""

    code: str
    accepted: bool
    discount_amount: Money = field(default_factory=Money.zero)
    reason: DiscountRejectionReason | None = None

    @classmethod
    def accept(cls, code: str, discount_amount: Money) -> "DiscountValidationResult":
        return cls(code=code, accepted=True, discount_amount=discount_amount)

    @classmethod
    def reject(cls, code: str, reason: DiscountRejectionReason) -> "DiscountValidationResult":
        return cls(code=code, accepted=False, reason=reason)

    @property
    def message(self) -> str | None:
        return self.reason.message if self.reason else None
