"""
Custom Orders Use Cases
"""

from .get_custom_order import DeleteCustomOrderUseCase, GetCustomOrderStatsUseCase, GetCustomOrderUseCase
from .get_occasion_price_table import GetOccasionPriceTableUseCase, OccasionPriceTable
from .list_custom_orders import ListCustomOrdersRequest, ListCustomOrdersUseCase
from .resolve_cake_price import ResolveCakePriceRequest, ResolveCakePriceResponse, ResolveCakePriceUseCase
from .submit_custom_order import SubmitCustomOrderRequest, SubmitCustomOrderUseCase
from .update_custom_order_status import UpdateCustomOrderStatusRequest, UpdateCustomOrderStatusUseCase

__all__ = [
    "SubmitCustomOrderUseCase",
    "SubmitCustomOrderRequest",
    "UpdateCustomOrderStatusUseCase",
    "UpdateCustomOrderStatusRequest",
    "ResolveCakePriceUseCase",
    "ResolveCakePriceRequest",
    "ResolveCakePriceResponse",
    "GetOccasionPriceTableUseCase",
    "OccasionPriceTable",
    "ListCustomOrdersUseCase",
    "ListCustomOrdersRequest",
    "GetCustomOrderUseCase",
    "DeleteCustomOrderUseCase",
    "GetCustomOrderStatsUseCase",
]
