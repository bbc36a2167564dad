"""
Shipping Fee Repository Implementation
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bakery.core.domain import Money
from bakery.domains.orders.application.ports import IShippingFeeRepository
from bakery.domains.orders.domain import ShippingFee, ShippingFeeStatus
from bakery.models.db.shipping import ShippingFee as ShippingFeeModel


class SQLAlchemyShippingFeeRepository(IShippingFeeRepository):
    def __init__(self, session: AsyncSession, currency: str = "EGP"):
        self.session = session
        self.currency = currency

    async def get_by_governorate(self, governorate: str) -> ShippingFee | None:
        result = await self.session.execute(
            select(ShippingFeeModel).where(func.lower(ShippingFeeModel.governorate) == governorate.strip().lower())
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return ShippingFee(
            id=model.id,
            governorate=model.governorate,
            fee=Money.from_float(model.fee, self.currency),
            delivery_time=model.delivery_time,
            status=ShippingFeeStatus.parse(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
