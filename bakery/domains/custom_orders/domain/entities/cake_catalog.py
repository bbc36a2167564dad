"""
Cake configuration catalog entities.

The catalog is maintained elsewhere; this service only reads it to price
custom cakes.
"""

from dataclasses import dataclass, field
from uuid import UUID

from bakery.core.domain import Entity, Money


@dataclass
class OccasionSizePrice(Entity[UUID]):
    """Price of one size for one occasion, overriding the size default."""

    occasion_id: UUID | None = None
    size_id: UUID | None = None
    price: Money = field(default_factory=Money.zero)
    is_active: bool = True


@dataclass
class Occasion(Entity[UUID]):
    """
    A cake category such as Birthday. No size prices means every size uses
    its default price.
    """

    name: str = ""
    name_ar: str | None = None
    icon: str | None = None
    display_order: int = 0
    is_active: bool = True
    size_prices: list[OccasionSizePrice] = field(default_factory=list)

    def price_override_for(self, size_id: UUID | None) -> OccasionSizePrice | None:
        for entry in self.size_prices:
            if entry.size_id == size_id and entry.is_active:
                return entry
        return None


@dataclass
class CakeSize(Entity[UUID]):
    """Master size tier."""

    name: str = ""
    name_ar: str | None = None
    persons_count: str | None = None
    default_price: Money | None = None
    display_order: int = 0
    is_active: bool = True


@dataclass
class Flavor(Entity[UUID]):
    name: str = ""
    name_ar: str | None = None
    color: str | None = None
    additional_price: Money = field(default_factory=Money.zero)
    display_order: int = 0
    is_active: bool = True
