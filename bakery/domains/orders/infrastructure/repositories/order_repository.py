"""
Order Repository Implementation

SQLAlchemy implementation of IOrderRepository.
"""

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bakery.core.domain import BusinessRuleViolationException, ConcurrencyException, EntityNotFoundException, Money
from bakery.core.shared import Page, PageRequest
from bakery.domains.orders.application.ports import IOrderRepository
from bakery.domains.orders.domain import CustomerContact, Order, OrderItem, OrderStatus, PaymentMethod
from bakery.models.db.orders import Order as OrderModel
from bakery.models.db.orders import OrderItem as OrderItemModel
from bakery.models.db.orders import order_number_seq

logger = logging.getLogger(__name__)

ORDER_NUMBER_PREFIX = "ORD"


def format_order_number(sequence_value: int) -> str:
    return f"{ORDER_NUMBER_PREFIX}-{sequence_value:06d}"


class SQLAlchemyOrderRepository(IOrderRepository):
    """
    SQLAlchemy implementation of order repository.
    """

    def __init__(self, session: AsyncSession, currency: str = "EGP"):
        """
        Args:
            session: SQLAlchemy async session
            currency: ISO code attached to stored amounts
        """
        self.session = session
        self.currency = currency

    async def create(self, order: Order) -> Order:
        """Insert order and items; anything pending in the session commits with it."""
        try:
            sequence_value = await self.session.scalar(select(order_number_seq.next_value()))
            model = self._to_model(order)
            model.order_number = format_order_number(int(sequence_value))
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model, attribute_names=["items"])
            return self._to_entity(model)
        except Exception as e:
            logger.error(f"Error creating order: {e}")
            await self.session.rollback()
            raise

    async def get_by_id(self, order_id: UUID) -> Order | None:
        result = await self.session.execute(select(OrderModel).where(OrderModel.id == order_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_order_number(self, order_number: str) -> Order | None:
        result = await self.session.execute(select(OrderModel).where(OrderModel.order_number == order_number))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_customer(self, customer_id: UUID) -> list[Order]:
        result = await self.session.execute(
            select(OrderModel).where(OrderModel.customer_id == customer_id).order_by(OrderModel.created_at.desc())
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def list_orders(
        self,
        page: PageRequest,
        status: OrderStatus | None = None,
        payment_method: PaymentMethod | None = None,
    ) -> Page[Order]:
        conditions = []
        if status is not None:
            conditions.append(OrderModel.status == status.value)
        if payment_method is not None:
            conditions.append(OrderModel.payment_method == payment_method.value)

        total = await self.session.scalar(select(func.count()).select_from(OrderModel).where(*conditions))
        result = await self.session.execute(
            select(OrderModel)
            .where(*conditions)
            .order_by(OrderModel.created_at.desc())
            .offset(page.offset)
            .limit(page.limit)
        )
        return Page(
            items=[self._to_entity(m) for m in result.scalars().all()],
            total_items=int(total or 0),
            page_number=page.page_number,
            page_size=page.page_size,
        )

    async def update_status(self, order: Order, expected_version: int) -> Order:
        """Conditional UPDATE on id and version; zero rows means someone else won."""
        result = await self.session.execute(
            update(OrderModel)
            .where(OrderModel.id == order.id)
            .where(OrderModel.version == expected_version)
            .values(
                status=order.status.value,
                updated_at=order.updated_at,
                version=expected_version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            await self.session.rollback()
            actual = await self.session.scalar(select(OrderModel.version).where(OrderModel.id == order.id))
            if actual is None:
                raise EntityNotFoundException("Order", order.id)
            raise ConcurrencyException("Order", order.id, expected_version, actual)

        await self.session.commit()
        order.version = expected_version + 1
        return order

    async def delete(self, order_id: UUID) -> bool:
        result = await self.session.execute(select(OrderModel).where(OrderModel.id == order_id))
        model = result.scalar_one_or_none()
        if not model:
            return False
        try:
            await self.session.delete(model)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Order {order_id} is still referenced: {e.orig}")
            raise BusinessRuleViolationException(
                "order_referenced",
                f"Order {model.order_number} is referenced by other records and cannot be deleted",
                {"order_id": str(order_id)},
            ) from e
        return True

    # Mapping methods

    def _money(self, value: Decimal | None) -> Money:
        return Money.from_float(value, self.currency)

    def _to_entity(self, model: OrderModel) -> Order:
        items = [
            OrderItem(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity,
                unit_price=self._money(item.unit_price),
                product_code=item.product_code,
                size=item.size,
                color=item.color,
            )
            for item in (model.items or [])
        ]
        return Order(
            id=model.id,
            order_number=model.order_number,
            customer_id=model.customer_id,
            customer=CustomerContact(
                full_name=model.customer_full_name,
                phone=model.customer_phone,
                address=model.customer_address,
                governorate=model.governorate,
            ),
            items=items,
            status=OrderStatus.parse(model.status),
            payment_method=PaymentMethod.parse(model.payment_method),
            payment_transaction_id=model.payment_transaction_id,
            products_subtotal=self._money(model.products_subtotal),
            discount_code_id=model.discount_code_id,
            discount_code=model.discount_code,
            discount_amount=self._money(model.discount_amount),
            shipping_fee=self._money(model.shipping_fee),
            total=self._money(model.total),
            notes=model.notes,
            version=model.version or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, order: Order) -> OrderModel:
        customer = order.customer or CustomerContact(full_name="", phone="", address="", governorate="")
        model = OrderModel(
            customer_id=order.customer_id,
            customer_full_name=customer.full_name,
            customer_phone=customer.phone,
            customer_address=customer.address,
            governorate=customer.governorate,
            status=order.status.value,
            products_subtotal=order.products_subtotal.amount,
            discount_amount=order.discount_amount.amount,
            shipping_fee=order.shipping_fee.amount,
            total=order.total.amount,
            discount_code_id=order.discount_code_id,
            discount_code=order.discount_code,
            payment_method=order.payment_method.value,
            payment_transaction_id=order.payment_transaction_id,
            notes=order.notes,
            version=order.version,
        )
        if order.id is not None:
            model.id = order.id
        model.items = [
            OrderItemModel(
                position=position,
                product_id=item.product_id,
                product_name=item.product_name,
                product_code=item.product_code,
                quantity=item.quantity,
                unit_price=item.unit_price.amount,
                size=item.size,
                color=item.color,
            )
            for position, item in enumerate(order.items)
        ]
        return model
