"""
Cake Catalog Repository Implementation

Read-only; every call hits the database so catalog edits show up on the
next price request.
"""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bakery.core.domain import Money
from bakery.domains.custom_orders.application.ports import ICakeCatalogRepository
from bakery.domains.custom_orders.domain import CakeSize, Flavor, Occasion, OccasionSizePrice
from bakery.models.db.cake_catalog import CakeSize as CakeSizeModel
from bakery.models.db.cake_catalog import Flavor as FlavorModel
from bakery.models.db.cake_catalog import Occasion as OccasionModel


class SQLAlchemyCakeCatalogRepository(ICakeCatalogRepository):
    def __init__(self, session: AsyncSession, currency: str = "EGP"):
        self.session = session
        self.currency = currency

    async def get_occasion(self, occasion_id: UUID) -> Occasion | None:
        result = await self.session.execute(select(OccasionModel).where(OccasionModel.id == occasion_id))
        model = result.scalar_one_or_none()
        return self._occasion_to_entity(model) if model else None

    async def get_size(self, size_id: UUID) -> CakeSize | None:
        result = await self.session.execute(select(CakeSizeModel).where(CakeSizeModel.id == size_id))
        model = result.scalar_one_or_none()
        return self._size_to_entity(model) if model else None

    async def get_flavor(self, flavor_id: UUID) -> Flavor | None:
        result = await self.session.execute(select(FlavorModel).where(FlavorModel.id == flavor_id))
        model = result.scalar_one_or_none()
        return self._flavor_to_entity(model) if model else None

    async def list_sizes(self, active_only: bool = True) -> list[CakeSize]:
        query = select(CakeSizeModel).order_by(CakeSizeModel.display_order, CakeSizeModel.name)
        if active_only:
            query = query.where(CakeSizeModel.is_active.is_(True))
        result = await self.session.execute(query)
        return [self._size_to_entity(m) for m in result.scalars().all()]

    # Mapping methods

    def _money(self, value: Decimal | None) -> Money:
        return Money.from_float(value, self.currency)

    def _occasion_to_entity(self, model: OccasionModel) -> Occasion:
        return Occasion(
            id=model.id,
            name=model.name,
            name_ar=model.name_ar,
            icon=model.icon,
            display_order=model.display_order or 0,
            is_active=bool(model.is_active),
            size_prices=[
                OccasionSizePrice(
                    id=entry.id,
                    occasion_id=entry.occasion_id,
                    size_id=entry.size_id,
                    price=self._money(entry.price),
                    is_active=bool(entry.is_active),
                )
                for entry in (model.size_prices or [])
            ],
        )

    def _size_to_entity(self, model: CakeSizeModel) -> CakeSize:
        return CakeSize(
            id=model.id,
            name=model.name,
            name_ar=model.name_ar,
            persons_count=model.persons_count,
            default_price=self._money(model.default_price) if model.default_price is not None else None,
            display_order=model.display_order or 0,
            is_active=bool(model.is_active),
        )

    def _flavor_to_entity(self, model: FlavorModel) -> Flavor:
        return Flavor(
            id=model.id,
            name=model.name,
            name_ar=model.name_ar,
            color=model.color,
            additional_price=self._money(model.additional_price),
            display_order=model.display_order or 0,
            is_active=bool(model.is_active),
        )
