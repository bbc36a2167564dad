"""
Custom Orders Domain Container.

Single Responsibility: Wire custom order and cake catalog repositories and use cases.
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from bakery.domains.custom_orders.application.use_cases import (
    DeleteCustomOrderUseCase,
    GetCustomOrderStatsUseCase,
    GetCustomOrderUseCase,
    GetOccasionPriceTableUseCase,
    ListCustomOrdersUseCase,
    ResolveCakePriceUseCase,
    SubmitCustomOrderUseCase,
    UpdateCustomOrderStatusUseCase,
)
from bakery.domains.custom_orders.infrastructure.repositories import (
    SQLAlchemyCakeCatalogRepository,
    SQLAlchemyCustomOrderRepository,
)

if TYPE_CHECKING:
    from bakery.core.container.base import BaseContainer


class CustomOrdersContainer:
    def __init__(self, base: "BaseContainer"):
        self._base = base

    # ==================== REPOSITORIES ====================

    def create_custom_order_repository(self, db: AsyncSession) -> SQLAlchemyCustomOrderRepository:
        return SQLAlchemyCustomOrderRepository(session=db, currency=self._base.currency)

    def create_cake_catalog_repository(self, db: AsyncSession) -> SQLAlchemyCakeCatalogRepository:
        return SQLAlchemyCakeCatalogRepository(session=db, currency=self._base.currency)

    # ==================== USE CASES ====================

    def create_submit_custom_order_use_case(self, db: AsyncSession) -> SubmitCustomOrderUseCase:
        return SubmitCustomOrderUseCase(
            custom_order_repository=self.create_custom_order_repository(db),
            catalog_repository=self.create_cake_catalog_repository(db),
            resolver=self._base.get_pricing_resolver(),
            min_lead_days=self._base.min_lead_days,
        )

    def create_update_custom_order_status_use_case(self, db: AsyncSession) -> UpdateCustomOrderStatusUseCase:
        return UpdateCustomOrderStatusUseCase(
            self.create_custom_order_repository(db),
            self._base.get_custom_order_status_machine(),
        )

    def create_resolve_cake_price_use_case(self, db: AsyncSession) -> ResolveCakePriceUseCase:
        return ResolveCakePriceUseCase(self.create_cake_catalog_repository(db), self._base.get_pricing_resolver())

    def create_get_occasion_price_table_use_case(self, db: AsyncSession) -> GetOccasionPriceTableUseCase:
        return GetOccasionPriceTableUseCase(
            self.create_cake_catalog_repository(db),
            self._base.get_pricing_resolver(),
        )

    def create_list_custom_orders_use_case(self, db: AsyncSession) -> ListCustomOrdersUseCase:
        return ListCustomOrdersUseCase(self.create_custom_order_repository(db))

    def create_get_custom_order_use_case(self, db: AsyncSession) -> GetCustomOrderUseCase:
        return GetCustomOrderUseCase(self.create_custom_order_repository(db))

    def create_delete_custom_order_use_case(self, db: AsyncSession) -> DeleteCustomOrderUseCase:
        return DeleteCustomOrderUseCase(self.create_custom_order_repository(db))

    def create_get_custom_order_stats_use_case(self, db: AsyncSession) -> GetCustomOrderStatsUseCase:
        return GetCustomOrderStatsUseCase(self.create_custom_order_repository(db))
