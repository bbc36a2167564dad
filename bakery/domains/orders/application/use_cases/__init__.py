"""
Orders Use Cases

Each use case represents a single business operation.
"""

from .delete_order import DeleteOrderUseCase
from .get_order import GetCustomerOrdersUseCase, GetOrderByNumberUseCase, GetOrderUseCase
from .list_orders import ListOrdersRequest, ListOrdersUseCase
from .place_order import OrderItemInput, PlaceOrderRequest, PlaceOrderUseCase
from .rollback_order_status import RollbackOrderStatusRequest, RollbackOrderStatusUseCase
from .update_order_status import OrderStatusChangeResponse, UpdateOrderStatusRequest, UpdateOrderStatusUseCase

__all__ = [
    "PlaceOrderUseCase",
    "PlaceOrderRequest",
    "OrderItemInput",
    "UpdateOrderStatusUseCase",
    "UpdateOrderStatusRequest",
    "OrderStatusChangeResponse",
    "RollbackOrderStatusUseCase",
    "RollbackOrderStatusRequest",
    "ListOrdersUseCase",
    "ListOrdersRequest",
    "GetOrderUseCase",
    "GetOrderByNumberUseCase",
    "GetCustomerOrdersUseCase",
    "DeleteOrderUseCase",
]
