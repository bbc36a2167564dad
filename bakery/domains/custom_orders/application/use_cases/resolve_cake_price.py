"""
Resolve Cake Price Use Case

Price of an (occasion, size, flavor) choice, re-read from the catalog on every
call so that the wizard never shows a stale price.
"""

from dataclasses import dataclass
from uuid import UUID

from bakery.domains.custom_orders.application.ports import ICakeCatalogRepository
from bakery.domains.custom_orders.domain import CakeSize, Flavor, Occasion, PriceQuote, PricingResolver

from .catalog_lookup import load_selection


@dataclass
class ResolveCakePriceRequest:
    occasion_id: UUID
    size_id: UUID
    flavor_id: UUID


@dataclass
class ResolveCakePriceResponse:
    occasion: Occasion
    size: CakeSize
    flavor: Flavor
    quote: PriceQuote


class ResolveCakePriceUseCase:
    def __init__(self, catalog_repository: ICakeCatalogRepository, resolver: PricingResolver):
        self.catalog_repository = catalog_repository
        self.resolver = resolver

    async def execute(self, request: ResolveCakePriceRequest) -> ResolveCakePriceResponse:
        occasion, size, flavor = await load_selection(
            self.catalog_repository, request.occasion_id, request.size_id, request.flavor_id
        )
        return ResolveCakePriceResponse(
            occasion=occasion,
            size=size,
            flavor=flavor,
            quote=self.resolver.quote(occasion, size, flavor),
        )
