"""
Database models
"""

from .base import Base, TimestampMixin, VersionMixin
from .cake_catalog import CakeSize, Flavor, Occasion, OccasionSizePrice
from .custom_orders import CustomOrder, custom_order_number_seq
from .discount_codes import DiscountCode
from .orders import Order, OrderItem, order_number_seq
from .shipping import ShippingFee

__all__ = [
    "Base",
    "TimestampMixin",
    "VersionMixin",
    "Occasion",
    "CakeSize",
    "Flavor",
    "OccasionSizePrice",
    "CustomOrder",
    "custom_order_number_seq",
    "DiscountCode",
    "Order",
    "OrderItem",
    "order_number_seq",
    "ShippingFee",
]
