"""
Unit tests for Custom Orders Use Cases.

Tests:
- SubmitCustomOrderUseCase (lead time, pricing, catalog checks)
- UpdateCustomOrderStatusUseCase (validation before load, versioning)
- ResolveCakePriceUseCase / GetOccasionPriceTableUseCase
- Stats, lookup and deletion
"""

from datetime import date, timedelta
from uuid import uuid4

import pytest

from bakery.core.domain import ConcurrencyException, EntityNotFoundException, Money, ValidationException
from bakery.domains.custom_orders.application.use_cases import (
    DeleteCustomOrderUseCase,
    GetCustomOrderStatsUseCase,
    GetOccasionPriceTableUseCase,
    ListCustomOrdersRequest,
    ListCustomOrdersUseCase,
    ResolveCakePriceRequest,
    ResolveCakePriceUseCase,
    SubmitCustomOrderRequest,
    SubmitCustomOrderUseCase,
    UpdateCustomOrderStatusRequest,
    UpdateCustomOrderStatusUseCase,
)
from bakery.domains.custom_orders.domain import (
    CustomOrderPaymentMethod,
    CustomOrderStatus,
    CustomOrderStatusMachine,
    CustomOrderSubmitted,
    PricingResolver,
)
from tests.utils import make_custom_order, make_flavor, make_occasion, make_size

# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def catalog(catalog_repository):
    large = catalog_repository.add_size(make_size("Large", default_price=220, display_order=2))
    small = catalog_repository.add_size(make_size("Small", default_price=150, display_order=1))
    birthday = catalog_repository.add_occasion(make_occasion("Birthday", overrides={large.id: 250}))
    chocolate = catalog_repository.add_flavor(make_flavor("Chocolate", additional_price=20))
    return {"large": large, "small": small, "birthday": birthday, "chocolate": chocolate}


@pytest.fixture
def submit(custom_order_repository, catalog_repository):
    return SubmitCustomOrderUseCase(custom_order_repository, catalog_repository, PricingResolver(), min_lead_days=2)


@pytest.fixture
def update_status(custom_order_repository):
    return UpdateCustomOrderStatusUseCase(custom_order_repository, CustomOrderStatusMachine())


def submission(catalog, now, **overrides) -> SubmitCustomOrderRequest:
    data = {
        "customer_name": "Sara Hany",
        "customer_phone": "01112223334",
        "occasion_id": catalog["birthday"].id,
        "size_id": catalog["large"].id,
        "flavor_id": catalog["chocolate"].id,
        "pickup_date": now.date() + timedelta(days=3),
        "payment_method": CustomOrderPaymentMethod.INSTAPAY,
        "custom_text": "Happy birthday Omar",
        "now": now,
    }
    data.update(overrides)
    return SubmitCustomOrderRequest(**data)


# ============================================================================
# SubmitCustomOrderUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_submit_prices_and_stores_pending_order(submit, catalog, custom_order_repository, now, published_events):
    events = published_events(CustomOrderSubmitted)

    custom_order = await submit.execute(submission(catalog, now))

    assert custom_order.order_number == "CK-000001"
    assert custom_order.status is CustomOrderStatus.PENDING
    assert custom_order.estimated_price == Money.from_float(270)
    assert custom_order.final_price is None
    assert custom_order.selection.occasion_name == "Birthday"
    assert custom_order.selection.size_name == "Large"
    assert custom_order.id in custom_order_repository.custom_orders
    assert [e.order_number for e in events] == ["CK-000001"]


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_submit_accepts_pickup_exactly_at_lead_time(submit, catalog, now):
    custom_order = await submit.execute(submission(catalog, now, pickup_date=now.date() + timedelta(days=2)))

    assert custom_order.pickup_date == date(2026, 5, 12)


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_submit_rejects_pickup_inside_lead_time(submit, catalog, custom_order_repository, now):
    with pytest.raises(ValidationException) as exc_info:
        await submit.execute(submission(catalog, now, pickup_date=now.date() + timedelta(days=1)))

    assert exc_info.value.field == "pickupDate"
    assert exc_info.value.details["earliest_pickup_date"] == "2026-05-12"
    assert custom_order_repository.custom_orders == {}


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_submit_requires_customer_name(submit, catalog, now):
    with pytest.raises(ValidationException) as exc_info:
        await submit.execute(submission(catalog, now, customer_name="  "))

    assert exc_info.value.field == "customerName"


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_submit_unknown_flavor_is_not_found(submit, catalog, now):
    with pytest.raises(EntityNotFoundException) as exc_info:
        await submit.execute(submission(catalog, now, flavor_id=uuid4()))

    assert exc_info.value.entity_type == "Flavor"


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_submit_rejects_inactive_size(submit, catalog, now):
    catalog["large"].is_active = False

    with pytest.raises(ValidationException) as exc_info:
        await submit.execute(submission(catalog, now))

    assert exc_info.value.field == "sizeId"


# ============================================================================
# UpdateCustomOrderStatusUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_sets_status_price_and_version(update_status, custom_order_repository):
    stored = await custom_order_repository.create(make_custom_order())

    updated = await update_status.execute(
        UpdateCustomOrderStatusRequest(custom_order_id=stored.id, status="Ready", final_price=275)
    )

    assert updated.status is CustomOrderStatus.READY
    assert updated.displayed_price == Money.from_float(275)
    assert updated.version == 1
    assert custom_order_repository.custom_orders[stored.id].final_price == Money.from_float(275)


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_negative_price_is_rejected_before_loading(custom_order_repository):
    repository = custom_order_repository
    use_case = UpdateCustomOrderStatusUseCase(repository, CustomOrderStatusMachine())

    with pytest.raises(ValidationException):
        await use_case.execute(UpdateCustomOrderStatusRequest(custom_order_id=uuid4(), status="Ready", final_price=-5))


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_stale_version_is_rejected(update_status, custom_order_repository):
    stored = await custom_order_repository.create(make_custom_order())
    await update_status.execute(UpdateCustomOrderStatusRequest(custom_order_id=stored.id, status="Confirmed"))

    with pytest.raises(ConcurrencyException):
        await update_status.execute(
            UpdateCustomOrderStatusRequest(custom_order_id=stored.id, status="Cancelled", expected_version=0)
        )

    assert custom_order_repository.custom_orders[stored.id].status is CustomOrderStatus.CONFIRMED


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_missing_custom_order(update_status):
    with pytest.raises(EntityNotFoundException):
        await update_status.execute(UpdateCustomOrderStatusRequest(custom_order_id=uuid4(), status="Ready"))


# ============================================================================
# Pricing queries
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_resolve_price_reads_catalog_fresh(catalog_repository, catalog):
    use_case = ResolveCakePriceUseCase(catalog_repository, PricingResolver())
    request = ResolveCakePriceRequest(
        occasion_id=catalog["birthday"].id, size_id=catalog["large"].id, flavor_id=catalog["chocolate"].id
    )

    first = await use_case.execute(request)
    catalog["chocolate"].additional_price = Money.from_float(30)
    second = await use_case.execute(request)

    assert first.quote.price == Money.from_float(270)
    assert second.quote.price == Money.from_float(280)


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_resolve_price_unknown_occasion(catalog_repository, catalog):
    use_case = ResolveCakePriceUseCase(catalog_repository, PricingResolver())

    with pytest.raises(EntityNotFoundException) as exc_info:
        await use_case.execute(
            ResolveCakePriceRequest(occasion_id=uuid4(), size_id=catalog["large"].id, flavor_id=catalog["chocolate"].id)
        )

    assert exc_info.value.entity_type == "Occasion"


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_occasion_price_table(catalog_repository, catalog):
    table = await GetOccasionPriceTableUseCase(catalog_repository, PricingResolver()).execute(catalog["birthday"].id)

    assert [(row.size.name, row.price) for row in table.sizes] == [
        ("Small", Money.from_float(150)),
        ("Large", Money.from_float(250)),
    ]


# ============================================================================
# Listing, stats and deletion
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_list_custom_orders_by_status(custom_order_repository):
    await custom_order_repository.create(make_custom_order())
    await custom_order_repository.create(make_custom_order(status=CustomOrderStatus.READY))

    page = await ListCustomOrdersUseCase(custom_order_repository).execute(ListCustomOrdersRequest(status="ready"))

    assert page.total_items == 1
    assert page.items[0].status is CustomOrderStatus.READY


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_stats_count_completed_revenue_at_displayed_price(custom_order_repository, now):
    completed = make_custom_order(status=CustomOrderStatus.COMPLETED, estimated_price=270)
    completed.final_price = Money.from_float(300)
    await custom_order_repository.create(completed)
    await custom_order_repository.create(make_custom_order(status=CustomOrderStatus.COMPLETED, estimated_price=150))
    await custom_order_repository.create(make_custom_order(status=CustomOrderStatus.PENDING, estimated_price=999))

    stats = await GetCustomOrderStatsUseCase(custom_order_repository).execute(now)

    assert stats.total_orders == 3
    assert stats.completed_orders == 2
    assert stats.pending_orders == 1
    assert stats.total_revenue == Money.from_float(450).amount
    assert stats.most_popular_occasion == "Birthday"


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_delete_custom_order(custom_order_repository):
    stored = await custom_order_repository.create(make_custom_order())
    use_case = DeleteCustomOrderUseCase(custom_order_repository)

    await use_case.execute(stored.id)

    with pytest.raises(EntityNotFoundException):
        await use_case.execute(stored.id)
