"""
Discounts Domain Container.

Single Responsibility: Wire discount repositories and the ledger.
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from bakery.domains.discounts.application.services import DiscountLedger
from bakery.domains.discounts.infrastructure.repositories import SQLAlchemyDiscountCodeRepository

if TYPE_CHECKING:
    from bakery.core.container.base import BaseContainer


class DiscountsContainer:
    def __init__(self, base: "BaseContainer"):
        self._base = base

    def create_discount_code_repository(self, db: AsyncSession) -> SQLAlchemyDiscountCodeRepository:
        return SQLAlchemyDiscountCodeRepository(session=db, currency=self._base.currency)

    def create_discount_ledger(self, db: AsyncSession) -> DiscountLedger:
        return DiscountLedger(self.create_discount_code_repository(db))
