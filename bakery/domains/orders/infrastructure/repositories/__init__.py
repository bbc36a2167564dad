from bakery.domains.orders.infrastructure.repositories.order_repository import (
    SQLAlchemyOrderRepository,
    format_order_number,
)
from bakery.domains.orders.infrastructure.repositories.shipping_fee_repository import (
    SQLAlchemyShippingFeeRepository,
)

__all__ = ["SQLAlchemyOrderRepository", "SQLAlchemyShippingFeeRepository", "format_order_number"]
