from bakery.domains.custom_orders.domain.entities.cake_catalog import (
    CakeSize,
    Flavor,
    Occasion,
    OccasionSizePrice,
)
from bakery.domains.custom_orders.domain.entities.custom_order import (
    CakeSelection,
    CustomOrder,
    CustomOrderUpdate,
)

__all__ = [
    "CakeSelection",
    "CakeSize",
    "CustomOrder",
    "CustomOrderUpdate",
    "Flavor",
    "Occasion",
    "OccasionSizePrice",
]
