"""
Custom Order Repository Implementation

SQLAlchemy implementation of ICustomOrderRepository.
"""

import logging
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import case, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bakery.core.domain import ConcurrencyException, EntityNotFoundException, Money
from bakery.core.shared import Page, PageRequest
from bakery.domains.custom_orders.application.ports import CustomOrderStats, ICustomOrderRepository
from bakery.domains.custom_orders.domain import (
    CakeSelection,
    CustomOrder,
    CustomOrderPaymentMethod,
    CustomOrderStatus,
)
from bakery.models.db.custom_orders import CustomOrder as CustomOrderModel
from bakery.models.db.custom_orders import custom_order_number_seq

logger = logging.getLogger(__name__)

CUSTOM_ORDER_NUMBER_PREFIX = "CK"


def format_custom_order_number(sequence_value: int) -> str:
    return f"{CUSTOM_ORDER_NUMBER_PREFIX}-{sequence_value:06d}"


class SQLAlchemyCustomOrderRepository(ICustomOrderRepository):
    def __init__(self, session: AsyncSession, currency: str = "EGP"):
        self.session = session
        self.currency = currency

    async def create(self, custom_order: CustomOrder) -> CustomOrder:
        try:
            sequence_value = await self.session.scalar(select(custom_order_number_seq.next_value()))
            model = self._to_model(custom_order)
            model.order_number = format_custom_order_number(int(sequence_value))
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
            return self._to_entity(model)
        except Exception as e:
            logger.error(f"Error creating custom order: {e}")
            await self.session.rollback()
            raise

    async def get_by_id(self, custom_order_id: UUID) -> CustomOrder | None:
        result = await self.session.execute(select(CustomOrderModel).where(CustomOrderModel.id == custom_order_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_custom_orders(
        self,
        page: PageRequest,
        status: CustomOrderStatus | None = None,
    ) -> Page[CustomOrder]:
        conditions = [CustomOrderModel.status == status.value] if status is not None else []
        total = await self.session.scalar(select(func.count()).select_from(CustomOrderModel).where(*conditions))
        result = await self.session.execute(
            select(CustomOrderModel)
            .where(*conditions)
            .order_by(CustomOrderModel.created_at.desc())
            .offset(page.offset)
            .limit(page.limit)
        )
        return Page(
            items=[self._to_entity(m) for m in result.scalars().all()],
            total_items=int(total or 0),
            page_number=page.page_number,
            page_size=page.page_size,
        )

    async def update(self, custom_order: CustomOrder, expected_version: int) -> CustomOrder:
        result = await self.session.execute(
            update(CustomOrderModel)
            .where(CustomOrderModel.id == custom_order.id)
            .where(CustomOrderModel.version == expected_version)
            .values(
                status=custom_order.status.value,
                final_price=custom_order.final_price.amount if custom_order.final_price else None,
                admin_notes=custom_order.admin_notes,
                updated_at=custom_order.updated_at,
                version=expected_version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            await self.session.rollback()
            actual = await self.session.scalar(
                select(CustomOrderModel.version).where(CustomOrderModel.id == custom_order.id)
            )
            if actual is None:
                raise EntityNotFoundException("CustomOrder", custom_order.id)
            raise ConcurrencyException("CustomOrder", custom_order.id, expected_version, actual)

        await self.session.commit()
        custom_order.version = expected_version + 1
        return custom_order

    async def delete(self, custom_order_id: UUID) -> bool:
        result = await self.session.execute(select(CustomOrderModel).where(CustomOrderModel.id == custom_order_id))
        model = result.scalar_one_or_none()
        if not model:
            return False
        await self.session.delete(model)
        await self.session.commit()
        return True

    async def get_stats(self, now: datetime) -> CustomOrderStats:
        day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        month_start = day_start.replace(day=1)
        displayed_price = func.coalesce(CustomOrderModel.final_price, CustomOrderModel.estimated_price)
        completed = CustomOrderModel.status == CustomOrderStatus.COMPLETED.value

        status_rows = await self.session.execute(
            select(CustomOrderModel.status, func.count()).group_by(CustomOrderModel.status)
        )
        status_counts = {status: int(count) for status, count in status_rows.all()}

        totals = (
            await self.session.execute(
                select(
                    func.count(case((CustomOrderModel.created_at >= day_start, 1))),
                    func.count(case((CustomOrderModel.created_at >= month_start, 1))),
                    func.coalesce(func.sum(case((completed, displayed_price))), 0),
                    func.coalesce(
                        func.sum(case(((completed) & (CustomOrderModel.created_at >= month_start), displayed_price))),
                        0,
                    ),
                )
            )
        ).one()

        return CustomOrderStats(
            total_orders=sum(status_counts.values()),
            pending_orders=status_counts.get(CustomOrderStatus.PENDING.value, 0),
            in_progress_orders=status_counts.get(CustomOrderStatus.IN_PROGRESS.value, 0),
            completed_orders=status_counts.get(CustomOrderStatus.COMPLETED.value, 0),
            cancelled_orders=status_counts.get(CustomOrderStatus.CANCELLED.value, 0),
            today_orders=int(totals[0] or 0),
            this_month_orders=int(totals[1] or 0),
            total_revenue=Money.from_float(totals[2], self.currency).amount,
            this_month_revenue=Money.from_float(totals[3], self.currency).amount,
            most_popular_occasion=await self._most_popular(CustomOrderModel.occasion_name),
            most_popular_size=await self._most_popular(CustomOrderModel.size_name),
            most_popular_flavor=await self._most_popular(CustomOrderModel.flavor_name),
            status_counts=status_counts,
        )

    async def _most_popular(self, column) -> str | None:
        count = func.count().label("order_count")
        result = await self.session.execute(
            select(column, count).group_by(column).order_by(count.desc(), column).limit(1)
        )
        row = result.first()
        return row[0] if row else None

    # Mapping methods

    def _money(self, value: Decimal | None) -> Money | None:
        return Money.from_float(value, self.currency) if value is not None else None

    def _to_entity(self, model: CustomOrderModel) -> CustomOrder:
        return CustomOrder(
            id=model.id,
            order_number=model.order_number,
            user_id=model.user_id,
            customer_name=model.customer_name,
            customer_phone=model.customer_phone,
            selection=CakeSelection(
                occasion_id=model.occasion_id,
                size_id=model.size_id,
                flavor_id=model.flavor_id,
                occasion_name=model.occasion_name,
                size_name=model.size_name,
                flavor_name=model.flavor_name,
            ),
            custom_text=model.custom_text,
            design_image_url=model.design_image_url,
            pickup_date=model.pickup_date,
            pickup_time=model.pickup_time,
            notes=model.notes,
            payment_method=CustomOrderPaymentMethod.parse(model.payment_method),
            status=CustomOrderStatus.parse(model.status),
            estimated_price=Money.from_float(model.estimated_price, self.currency),
            final_price=self._money(model.final_price),
            admin_notes=model.admin_notes,
            version=model.version or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, custom_order: CustomOrder) -> CustomOrderModel:
        selection = custom_order.selection
        if selection is None:
            raise ValueError("Custom order needs a cake selection")
        model = CustomOrderModel(
            user_id=custom_order.user_id,
            customer_name=custom_order.customer_name,
            customer_phone=custom_order.customer_phone,
            occasion_id=selection.occasion_id,
            size_id=selection.size_id,
            flavor_id=selection.flavor_id,
            occasion_name=selection.occasion_name,
            size_name=selection.size_name,
            flavor_name=selection.flavor_name,
            custom_text=custom_order.custom_text,
            design_image_url=custom_order.design_image_url,
            pickup_date=custom_order.pickup_date,
            pickup_time=custom_order.pickup_time,
            notes=custom_order.notes,
            payment_method=custom_order.payment_method.value,
            status=custom_order.status.value,
            estimated_price=custom_order.estimated_price.amount,
            final_price=custom_order.final_price.amount if custom_order.final_price else None,
            admin_notes=custom_order.admin_notes,
            version=custom_order.version,
        )
        if custom_order.id is not None:
            model.id = custom_order.id
        return model
