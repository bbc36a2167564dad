"""
Shipping Fee Entity

Per-governorate delivery fee. Only consulted at checkout.
"""

from dataclasses import dataclass, field
from uuid import UUID

from bakery.core.domain import Entity, Money, StatusEnum


class ShippingFeeStatus(StatusEnum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


@dataclass
class ShippingFee(Entity[UUID]):
    governorate: str = ""
    fee: Money = field(default_factory=Money.zero)
    delivery_time: str | None = None
    status: ShippingFeeStatus = ShippingFeeStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status is ShippingFeeStatus.ACTIVE
