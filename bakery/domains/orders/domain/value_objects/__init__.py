from bakery.domains.orders.domain.value_objects.order_status import (
    OrderStatus,
    OrderStatusTransition,
    PaymentMethod,
)

__all__ = ["OrderStatus", "OrderStatusTransition", "PaymentMethod"]
