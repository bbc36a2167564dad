"""
Custom Orders Domain Layer

- Entities: CustomOrder, Occasion, CakeSize, Flavor, OccasionSizePrice
- Value Objects: CustomOrderStatus, CustomOrderPaymentMethod
- Domain Services: CustomOrderStatusMachine, PricingResolver
- Events: CustomOrderSubmitted, CustomOrderStatusChanged
"""

from bakery.domains.custom_orders.domain.entities import (
    CakeSelection,
    CakeSize,
    CustomOrder,
    CustomOrderUpdate,
    Flavor,
    Occasion,
    OccasionSizePrice,
)
from bakery.domains.custom_orders.domain.events import CustomOrderStatusChanged, CustomOrderSubmitted
from bakery.domains.custom_orders.domain.services import (
    CustomOrderStatusMachine,
    PriceQuote,
    PricingResolver,
    SizePrice,
)
from bakery.domains.custom_orders.domain.value_objects import CustomOrderPaymentMethod, CustomOrderStatus

__all__ = [
    "CakeSelection",
    "CakeSize",
    "CustomOrder",
    "CustomOrderUpdate",
    "Flavor",
    "Occasion",
    "OccasionSizePrice",
    "CustomOrderStatus",
    "CustomOrderPaymentMethod",
    "CustomOrderStatusMachine",
    "PricingResolver",
    "PriceQuote",
    "SizePrice",
    "CustomOrderSubmitted",
    "CustomOrderStatusChanged",
]
