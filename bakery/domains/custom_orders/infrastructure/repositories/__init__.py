from bakery.domains.custom_orders.infrastructure.repositories.cake_catalog_repository import (
    SQLAlchemyCakeCatalogRepository,
)
from bakery.domains.custom_orders.infrastructure.repositories.custom_order_repository import (
    SQLAlchemyCustomOrderRepository,
    format_custom_order_number,
)

__all__ = [
    "SQLAlchemyCakeCatalogRepository",
    "SQLAlchemyCustomOrderRepository",
    "format_custom_order_number",
]
