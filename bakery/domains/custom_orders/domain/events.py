"""
Custom orders domain events.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from bakery.core.domain import DomainEvent


@dataclass(frozen=True)
class CustomOrderSubmitted(DomainEvent):
    custom_order_id: UUID | None = None
    order_number: str = ""
    total: Decimal = Decimal("0")
    status: str = ""
    pickup_date: str = ""


@dataclass(frozen=True)
class CustomOrderStatusChanged(DomainEvent):
    custom_order_id: UUID | None = None
    order_number: str = ""
    total: Decimal = Decimal("0")
    previous_status: str = ""
    status: str = ""
    final_price: Decimal | None = None
