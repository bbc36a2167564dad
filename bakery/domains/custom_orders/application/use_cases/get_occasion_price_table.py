"""
Get Occasion Price Table Use Case

Sizes offered for an occasion with their price, for the wizard's size step.
"""

from dataclasses import dataclass, field
from uuid import UUID

from bakery.core.domain import EntityNotFoundException
from bakery.domains.custom_orders.application.ports import ICakeCatalogRepository
from bakery.domains.custom_orders.domain import Occasion, PricingResolver, SizePrice


@dataclass
class OccasionPriceTable:
    occasion: Occasion
    sizes: list[SizePrice] = field(default_factory=list)


class GetOccasionPriceTableUseCase:
    def __init__(self, catalog_repository: ICakeCatalogRepository, resolver: PricingResolver):
        self.catalog_repository = catalog_repository
        self.resolver = resolver

    async def execute(self, occasion_id: UUID) -> OccasionPriceTable:
        occasion = await self.catalog_repository.get_occasion(occasion_id)
        if occasion is None:
            raise EntityNotFoundException("Occasion", occasion_id)
        sizes = await self.catalog_repository.list_sizes(active_only=True)
        return OccasionPriceTable(occasion=occasion, sizes=self.resolver.price_table(occasion, sizes))
