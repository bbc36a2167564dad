"""
Discount Code Repository Implementation

SQLAlchemy implementation of IDiscountCodeRepository.
"""

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bakery.core.domain import Money
from bakery.domains.discounts.application.ports import IDiscountCodeRepository
from bakery.domains.discounts.domain import DiscountCode, DiscountKind, normalize_code
from bakery.models.db.discount_codes import DiscountCode as DiscountCodeModel

logger = logging.getLogger(__name__)


class SQLAlchemyDiscountCodeRepository(IDiscountCodeRepository):
    """
    SQLAlchemy implementation of the discount code repository.
    """

    def __init__(self, session: AsyncSession, currency: str = "EGP"):
        self.session = session
        self.currency = currency

    async def get_by_code(self, code: str) -> DiscountCode | None:
        """Case-insensitive lookup."""
        result = await self.session.execute(
            select(DiscountCodeModel).where(func.upper(DiscountCodeModel.code) == normalize_code(code))
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def try_increment_usage(self, discount_code_id: UUID) -> bool:
        """
        Single conditional UPDATE; the limit check and the increment cannot
        interleave with another checkout. Does not commit.
        """
        result = await self.session.execute(
            update(DiscountCodeModel)
            .where(DiscountCodeModel.id == discount_code_id)
            .where(
                or_(
                    DiscountCodeModel.usage_limit.is_(None),
                    DiscountCodeModel.usage_count < DiscountCodeModel.usage_limit,
                )
            )
            .values(usage_count=DiscountCodeModel.usage_count + 1)
            .execution_options(synchronize_session=False)
        )
        taken = result.rowcount == 1
        if not taken:
            logger.info(f"No usage slot left for discount code {discount_code_id}")
        return taken

    # Mapping methods

    def _money(self, value: Decimal | None) -> Money | None:
        return Money.from_float(value, self.currency) if value is not None else None

    def _to_entity(self, model: DiscountCodeModel) -> DiscountCode:
        return DiscountCode(
            id=model.id,
            code=model.code,
            kind=DiscountKind.parse(model.kind),
            percentage_value=model.percentage_value,
            fixed_value=self._money(model.fixed_value),
            min_order_amount=self._money(model.min_order_amount),
            max_discount_amount=self._money(model.max_discount_amount),
            usage_limit=model.usage_limit,
            usage_count=model.usage_count or 0,
            start_date=model.start_date,
            end_date=model.end_date,
            is_active=bool(model.is_active),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
