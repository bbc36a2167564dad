"""
Orders API Dependencies

FastAPI dependencies for the orders domain. Use cases are built per request
around the request's database session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bakery.api.dependencies import get_di_container
from bakery.core.container import DependencyContainer
from bakery.database import get_async_db
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
from bakery.domains.orders.domain import OrderStatusMachine


def get_order_status_machine(
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> OrderStatusMachine:
    return container.base.get_order_status_machine()


def get_place_order_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> PlaceOrderUseCase:
    return container.orders.create_place_order_use_case(db)


def get_list_orders_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> ListOrdersUseCase:
    return container.orders.create_list_orders_use_case(db)


def get_order_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> GetOrderUseCase:
    return container.orders.create_get_order_use_case(db)


def get_order_by_number_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> GetOrderByNumberUseCase:
    return container.orders.create_get_order_by_number_use_case(db)


def get_customer_orders_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> GetCustomerOrdersUseCase:
    return container.orders.create_get_customer_orders_use_case(db)


def get_update_order_status_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> UpdateOrderStatusUseCase:
    return container.orders.create_update_order_status_use_case(db)


def get_rollback_order_status_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> RollbackOrderStatusUseCase:
    return container.orders.create_rollback_order_status_use_case(db)


def get_delete_order_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> DeleteOrderUseCase:
    return container.orders.create_delete_order_use_case(db)


__all__ = [
    "get_order_status_machine",
    "get_place_order_use_case",
    "get_list_orders_use_case",
    "get_order_use_case",
    "get_order_by_number_use_case",
    "get_customer_orders_use_case",
    "get_update_order_status_use_case",
    "get_rollback_order_status_use_case",
    "get_delete_order_use_case",
]
