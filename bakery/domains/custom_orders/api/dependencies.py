"""
Custom Orders API Dependencies
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bakery.api.dependencies import get_di_container
from bakery.core.container import DependencyContainer
from bakery.database import get_async_db
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
from bakery.domains.custom_orders.domain import CustomOrderStatusMachine


def get_custom_order_status_machine(
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> CustomOrderStatusMachine:
    return container.base.get_custom_order_status_machine()


def get_submit_custom_order_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> SubmitCustomOrderUseCase:
    return container.custom_orders.create_submit_custom_order_use_case(db)


def get_list_custom_orders_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> ListCustomOrdersUseCase:
    return container.custom_orders.create_list_custom_orders_use_case(db)


def get_custom_order_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> GetCustomOrderUseCase:
    return container.custom_orders.create_get_custom_order_use_case(db)


def get_custom_order_stats_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> GetCustomOrderStatsUseCase:
    return container.custom_orders.create_get_custom_order_stats_use_case(db)


def get_update_custom_order_status_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> UpdateCustomOrderStatusUseCase:
    return container.custom_orders.create_update_custom_order_status_use_case(db)


def get_delete_custom_order_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> DeleteCustomOrderUseCase:
    return container.custom_orders.create_delete_custom_order_use_case(db)


def get_resolve_cake_price_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> ResolveCakePriceUseCase:
    return container.custom_orders.create_resolve_cake_price_use_case(db)


def get_occasion_price_table_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> GetOccasionPriceTableUseCase:
    return container.custom_orders.create_get_occasion_price_table_use_case(db)
