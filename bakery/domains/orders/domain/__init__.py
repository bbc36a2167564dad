"""
Orders Domain Layer

Merchandise orders placed at checkout and their status lifecycle.

- Entities: Order, OrderItem, CustomerContact
- Value Objects: OrderStatus, PaymentMethod, OrderStatusTransition
- Domain Services: OrderStatusMachine
- Events: OrderPlaced, OrderStatusChanged
"""

from bakery.domains.orders.domain.entities import CustomerContact, Order, OrderItem, ShippingFee, ShippingFeeStatus
from bakery.domains.orders.domain.events import OrderPlaced, OrderStatusChanged
from bakery.domains.orders.domain.services import OrderStatusMachine
from bakery.domains.orders.domain.value_objects import OrderStatus, OrderStatusTransition, PaymentMethod

__all__ = [
    "Order",
    "OrderItem",
    "CustomerContact",
    "ShippingFee",
    "ShippingFeeStatus",
    "OrderStatus",
    "OrderStatusTransition",
    "PaymentMethod",
    "OrderStatusMachine",
    "OrderPlaced",
    "OrderStatusChanged",
]
