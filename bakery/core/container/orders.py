"""
Orders Domain Container.

Single Responsibility: Wire order repositories and use cases.
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from bakery.domains.orders.application.use_cases import (
    DeleteOrderUseCase,
    GetCustomerOrdersUseCase,
    GetOrderByNumberUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
    PlaceOrderUseCase,
    RollbackOrderStatusUseCase,
    UpdateOrderStatusUseCase,
)
from bakery.domains.orders.infrastructure.repositories import (
    SQLAlchemyOrderRepository,
    SQLAlchemyShippingFeeRepository,
)

if TYPE_CHECKING:
    from bakery.core.container.base import BaseContainer
    from bakery.core.container.discounts import DiscountsContainer


class OrdersContainer:
    def __init__(self, base: "BaseContainer", discounts: "DiscountsContainer"):
        self._base = base
        self._discounts = discounts

    # ==================== REPOSITORIES ====================

    def create_order_repository(self, db: AsyncSession) -> SQLAlchemyOrderRepository:
        return SQLAlchemyOrderRepository(session=db, currency=self._base.currency)

    def create_shipping_fee_repository(self, db: AsyncSession) -> SQLAlchemyShippingFeeRepository:
        return SQLAlchemyShippingFeeRepository(session=db, currency=self._base.currency)

    # ==================== USE CASES ====================

    def create_place_order_use_case(self, db: AsyncSession) -> PlaceOrderUseCase:
        return PlaceOrderUseCase(
            order_repository=self.create_order_repository(db),
            shipping_fee_repository=self.create_shipping_fee_repository(db),
            discount_ledger=self._discounts.create_discount_ledger(db),
            currency=self._base.currency,
        )

    def create_update_order_status_use_case(self, db: AsyncSession) -> UpdateOrderStatusUseCase:
        return UpdateOrderStatusUseCase(self.create_order_repository(db), self._base.get_order_status_machine())

    def create_rollback_order_status_use_case(self, db: AsyncSession) -> RollbackOrderStatusUseCase:
        return RollbackOrderStatusUseCase(self.create_order_repository(db), self._base.get_order_status_machine())

    def create_list_orders_use_case(self, db: AsyncSession) -> ListOrdersUseCase:
        return ListOrdersUseCase(self.create_order_repository(db))

    def create_get_order_use_case(self, db: AsyncSession) -> GetOrderUseCase:
        return GetOrderUseCase(self.create_order_repository(db))

    def create_get_order_by_number_use_case(self, db: AsyncSession) -> GetOrderByNumberUseCase:
        return GetOrderByNumberUseCase(self.create_order_repository(db))

    def create_get_customer_orders_use_case(self, db: AsyncSession) -> GetCustomerOrdersUseCase:
        return GetCustomerOrdersUseCase(self.create_order_repository(db))

    def create_delete_order_use_case(self, db: AsyncSession) -> DeleteOrderUseCase:
        return DeleteOrderUseCase(self.create_order_repository(db))
