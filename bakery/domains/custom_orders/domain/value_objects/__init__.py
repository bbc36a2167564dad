from bakery.domains.custom_orders.domain.value_objects.custom_order_status import (
    CustomOrderPaymentMethod,
    CustomOrderStatus,
)

__all__ = ["CustomOrderStatus", "CustomOrderPaymentMethod"]
