"""
Orders domain events, consumed by the admin notification adapter.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from bakery.core.domain import DomainEvent


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    order_id: UUID | None = None
    order_number: str = ""
    total: Decimal = Decimal("0")
    amount_due: Decimal = Decimal("0")
    status: str = ""
    discount_code: str | None = None


@dataclass(frozen=True)
class OrderStatusChanged(DomainEvent):
    order_id: UUID | None = None
    order_number: str = ""
    total: Decimal = Decimal("0")
    previous_status: str = ""
    status: str = ""
    is_rollback: bool = False
