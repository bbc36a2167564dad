"""
Discount Ledger

Validates codes and accounts for their use at checkout.
"""

from datetime import UTC, datetime

from bakery.core.domain import DiscountRejectedException, Money
from bakery.core.shared import get_service_logger
from bakery.domains.discounts.application.ports import IDiscountCodeRepository
from bakery.domains.discounts.domain import (
    DiscountCode,
    DiscountRejectionReason,
    DiscountValidationResult,
    normalize_code,
)

logger = get_service_logger("discount_ledger")


class DiscountLedger:
    """
    Example:
        ```python
        ledger = DiscountLedger(discount_repository)
        result = await ledger.redeem("eid10", Money.from_float(400))
        result.discount_amount  # EGP 40.00, one usage taken
        ```
    """

    def __init__(self, repository: IDiscountCodeRepository):
        self._repository = repository

    async def validate(
        self,
        code: str,
        order_amount: Money,
        now: datetime | None = None,
    ) -> DiscountValidationResult:
        """Check `code` against the order amount and time. Nothing is written."""
        result, _ = await self._evaluate(code, order_amount, now or datetime.now(UTC))
        return result

    async def record_usage(self, discount_code: DiscountCode) -> bool:
        """
        Take one usage slot.

        Returns:
            False when the limit was already reached, whatever the in-memory
            counter of `discount_code` says.
        """
        if discount_code.id is None:
            raise ValueError("Discount code must be persisted before recording usage")
        taken = await self._repository.try_increment_usage(discount_code.id)
        if taken:
            discount_code.usage_count += 1
            logger.info("Discount usage recorded", code=discount_code.code, usage_count=discount_code.usage_count)
        else:
            logger.warning("Discount usage limit reached", code=discount_code.code)
        return taken

    async def redeem(
        self,
        code: str,
        order_amount: Money,
        now: datetime | None = None,
    ) -> tuple[DiscountCode, DiscountValidationResult]:
        """
        Validate then record usage, inside the caller's transaction.

        Raises:
            DiscountRejectedException: validation failed or the last slot was
                taken by a concurrent checkout.
        """
        result, discount_code = await self._evaluate(code, order_amount, now or datetime.now(UTC))
        if not result.accepted or discount_code is None:
            reason = result.reason or DiscountRejectionReason.UNKNOWN_CODE
            raise DiscountRejectedException(code, reason.value, reason.message)

        if not await self.record_usage(discount_code):
            reason = DiscountRejectionReason.USAGE_LIMIT_REACHED
            raise DiscountRejectedException(code, reason.value, reason.message)

        return discount_code, result

    async def _evaluate(
        self,
        code: str,
        order_amount: Money,
        now: datetime,
    ) -> tuple[DiscountValidationResult, DiscountCode | None]:
        discount_code = await self._repository.get_by_code(normalize_code(code))
        if discount_code is None:
            result = DiscountValidationResult.reject(code, DiscountRejectionReason.UNKNOWN_CODE)
        else:
            result = discount_code.evaluate(order_amount, now)

        if not result.accepted:
            logger.info("Discount code rejected", code=code, reason=result.reason.value if result.reason else None)
        return result, discount_code
