"""
Pricing Resolver

One price rule for custom cakes, used by the price endpoint, the wizard's
size step and the estimate stored at submission:

    base  = occasion's active price for the size, else the size default (0 if unset)
    price = base + flavor additional price
"""

from dataclasses import dataclass

from bakery.core.domain import Money

from ..entities.cake_catalog import CakeSize, Flavor, Occasion


@dataclass(frozen=True)
class SizePrice:
    """Row of an occasion's price table."""

    size: CakeSize
    price: Money
    is_override: bool


@dataclass(frozen=True)
class PriceQuote:
    base_price: Money
    flavor_price: Money
    price: Money
    is_override: bool


class PricingResolver:
    """
    Pure: reads the given catalog objects, writes nothing.

    Example:
        ```python
        resolver = PricingResolver()
        resolver.resolve(birthday, large, chocolate)     # EGP 270.00 (override 250 + 20)
        resolver.resolve(graduation, small, vanilla)     # EGP 150.00 (default 150 + 0)
        ```
    """

    def __init__(self, currency: str = "EGP"):
        self.currency = currency

    def base_price(self, occasion: Occasion, size: CakeSize) -> tuple[Money, bool]:
        """Size price for the occasion and whether it came from an override."""
        override = occasion.price_override_for(size.id)
        if override is not None:
            return override.price, True
        if size.default_price is None:
            return Money.zero(self.currency), False
        return size.default_price, False

    def quote(self, occasion: Occasion, size: CakeSize, flavor: Flavor) -> PriceQuote:
        base, is_override = self.base_price(occasion, size)
        return PriceQuote(
            base_price=base,
            flavor_price=flavor.additional_price,
            price=base.add(flavor.additional_price),
            is_override=is_override,
        )

    def resolve(self, occasion: Occasion, size: CakeSize, flavor: Flavor) -> Money:
        return self.quote(occasion, size, flavor).price

    def price_table(self, occasion: Occasion, sizes: list[CakeSize]) -> list[SizePrice]:
        """Base price of every active size for the occasion, in display order."""
        rows = []
        for size in sorted(sizes, key=lambda s: (s.display_order, s.name)):
            if not size.is_active:
                continue
            price, is_override = self.base_price(occasion, size)
            rows.append(SizePrice(size=size, price=price, is_override=is_override))
        return rows
