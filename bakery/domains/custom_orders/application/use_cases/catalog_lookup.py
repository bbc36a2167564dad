"""
Catalog lookups shared by the pricing and submission use cases.
"""

from uuid import UUID

from bakery.core.domain import EntityNotFoundException
from bakery.domains.custom_orders.application.ports import ICakeCatalogRepository
from bakery.domains.custom_orders.domain import CakeSize, Flavor, Occasion


async def load_selection(
    catalog: ICakeCatalogRepository,
    occasion_id: UUID,
    size_id: UUID,
    flavor_id: UUID,
) -> tuple[Occasion, CakeSize, Flavor]:
    """Fetch the three catalog records fresh, 404 on any unknown id."""
    occasion = await catalog.get_occasion(occasion_id)
    if occasion is None:
        raise EntityNotFoundException("Occasion", occasion_id)
    size = await catalog.get_size(size_id)
    if size is None:
        raise EntityNotFoundException("Size", size_id)
    flavor = await catalog.get_flavor(flavor_id)
    if flavor is None:
        raise EntityNotFoundException("Flavor", flavor_id)
    return occasion, size, flavor
