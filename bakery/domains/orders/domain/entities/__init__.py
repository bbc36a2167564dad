from bakery.domains.orders.domain.entities.order import CustomerContact, Order, OrderItem
from bakery.domains.orders.domain.entities.shipping_fee import ShippingFee, ShippingFeeStatus

__all__ = ["CustomerContact", "Order", "OrderItem", "ShippingFee", "ShippingFeeStatus"]
