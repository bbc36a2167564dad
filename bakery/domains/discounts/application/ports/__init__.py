"""
Discounts Application Ports
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from bakery.domains.discounts.domain.entities import DiscountCode


@runtime_checkable
class IDiscountCodeRepository(Protocol):
    """
    Interface for discount code persistence.
    """

    async def get_by_code(self, code: str) -> DiscountCode | None:
        """Case-insensitive lookup"""
        ...

    async def try_increment_usage(self, discount_code_id: UUID) -> bool:
        """
        Take one usage slot if the limit allows it, in a single atomic step.

        Runs inside the caller's transaction and does not commit.
        """
        ...
