"""
Unit tests for Orders Domain Use Cases.

Tests:
- PlaceOrderUseCase (shipping fee, discount redemption, event)
- UpdateOrderStatusUseCase / RollbackOrderStatusUseCase (versioning)
- ListOrdersUseCase, lookups and DeleteOrderUseCase
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from bakery.core.domain import (
    BusinessRuleViolationException,
    ConcurrencyException,
    DiscountRejectedException,
    EntityNotFoundException,
    InvalidTransitionException,
    Money,
    ValidationException,
)
from bakery.domains.discounts.application.services import DiscountLedger
from bakery.domains.orders.application.use_cases import (
    DeleteOrderUseCase,
    GetOrderByNumberUseCase,
    ListOrdersRequest,
    ListOrdersUseCase,
    OrderItemInput,
    PlaceOrderRequest,
    PlaceOrderUseCase,
    RollbackOrderStatusRequest,
    RollbackOrderStatusUseCase,
    UpdateOrderStatusRequest,
    UpdateOrderStatusUseCase,
)
from bakery.domains.orders.domain import (
    OrderPlaced,
    OrderStatus,
    OrderStatusChanged,
    PaymentMethod,
    ShippingFee,
    ShippingFeeStatus,
)
from tests.utils import DiscountCodeBuilder, OrderBuilder

# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def place_order(order_repository, shipping_fee_repository, discount_repository):
    shipping_fee_repository.add(ShippingFee(id=uuid4(), governorate="Cairo", fee=Money.from_float(50)))
    shipping_fee_repository.add(
        ShippingFee(id=uuid4(), governorate="Aswan", fee=Money.from_float(90), status=ShippingFeeStatus.INACTIVE)
    )
    return PlaceOrderUseCase(order_repository, shipping_fee_repository, DiscountLedger(discount_repository))


def checkout_request(now, **overrides) -> PlaceOrderRequest:
    data = {
        "full_name": "Mona Adel",
        "phone": "01001234567",
        "address": "12 Nile St",
        "governorate": "cairo",
        "items": [
            OrderItemInput(product_id=uuid4(), product_name="Rose box", quantity=2, unit_price=Decimal("150")),
        ],
        "payment_method": PaymentMethod.CASH,
        "now": now,
    }
    data.update(overrides)
    return PlaceOrderRequest(**data)


# ============================================================================
# PlaceOrderUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_place_order_with_discount(place_order, discount_repository, order_repository, now, published_events):
    """Subtotal 300, 10% off, 50 shipping."""
    events = published_events(OrderPlaced)
    code = discount_repository.add(DiscountCodeBuilder().with_code("EID10").percentage(10).build())

    order = await place_order.execute(checkout_request(now, discount_code=" eid10 "))

    assert order.order_number == "ORD-000001"
    assert order.status is OrderStatus.UNDER_REVIEW
    assert order.products_subtotal == Money.from_float(300)
    assert order.discount_amount == Money.from_float(30)
    assert order.total == Money.from_float(270)
    assert order.shipping_fee == Money.from_float(50)
    assert order.amount_due == Money.from_float(320)
    assert order.discount_code_id == code.id
    assert discount_repository.codes[code.id].usage_count == 1
    assert len(order_repository.orders) == 1
    assert [e.order_number for e in events] == ["ORD-000001"]


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_place_order_without_discount(place_order, now):
    order = await place_order.execute(checkout_request(now))

    assert order.discount_amount == Money.zero()
    assert order.total == Money.from_float(300)
    assert order.discount_code is None


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_place_order_rejected_discount_stores_nothing(place_order, discount_repository, order_repository, now):
    discount_repository.add(DiscountCodeBuilder().with_code("BIG").percentage(10).with_min_order(500).build())

    with pytest.raises(DiscountRejectedException) as exc_info:
        await place_order.execute(checkout_request(now, discount_code="BIG"))

    assert exc_info.value.details["reason"] == "BelowMinimumOrder"
    assert order_repository.orders == {}


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
@pytest.mark.parametrize("governorate", ["Aswan", "Atlantis"])
async def test_place_order_requires_active_shipping_fee(place_order, order_repository, now, governorate):
    with pytest.raises(ValidationException) as exc_info:
        await place_order.execute(checkout_request(now, governorate=governorate))

    assert exc_info.value.field == "governorate"
    assert order_repository.orders == {}


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_place_order_requires_items(place_order, now):
    with pytest.raises(ValidationException):
        await place_order.execute(checkout_request(now, items=[]))


# ============================================================================
# Status change Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_status_persists_and_bumps_version(order_repository, published_events):
    events = published_events(OrderStatusChanged)
    stored = await order_repository.create(OrderBuilder().build())
    use_case = UpdateOrderStatusUseCase(order_repository)

    result = await use_case.execute(UpdateOrderStatusRequest(order_id=stored.id, status="confirmed"))

    assert result.order.status is OrderStatus.CONFIRMED
    assert result.order.version == 1
    assert result.allowed_targets == [OrderStatus.SHIPPED, OrderStatus.CANCELLED]
    assert order_repository.orders[stored.id].status is OrderStatus.CONFIRMED
    assert [(e.previous_status, e.status) for e in events] == [("UnderReview", "Confirmed")]


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_status_accepts_legacy_code(order_repository):
    stored = await order_repository.create(OrderBuilder().build())

    result = await UpdateOrderStatusUseCase(order_repository).execute(
        UpdateOrderStatusRequest(order_id=stored.id, status=4)
    )

    assert result.order.status is OrderStatus.CANCELLED


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_invalid_transition_leaves_stored_order_untouched(order_repository):
    stored = await order_repository.create(OrderBuilder().build())

    with pytest.raises(InvalidTransitionException):
        await UpdateOrderStatusUseCase(order_repository).execute(
            UpdateOrderStatusRequest(order_id=stored.id, status="Delivered")
        )

    assert order_repository.orders[stored.id].status is OrderStatus.UNDER_REVIEW
    assert order_repository.orders[stored.id].version == 0


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_unknown_status_is_a_validation_error(order_repository):
    stored = await order_repository.create(OrderBuilder().build())

    with pytest.raises(ValidationException):
        await UpdateOrderStatusUseCase(order_repository).execute(
            UpdateOrderStatusRequest(order_id=stored.id, status="Paid")
        )


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_stale_expected_version_is_rejected(order_repository):
    stored = await order_repository.create(OrderBuilder().build())
    use_case = UpdateOrderStatusUseCase(order_repository)
    await use_case.execute(UpdateOrderStatusRequest(order_id=stored.id, status="Confirmed", expected_version=0))

    with pytest.raises(ConcurrencyException) as exc_info:
        await use_case.execute(UpdateOrderStatusRequest(order_id=stored.id, status="Cancelled", expected_version=0))

    assert exc_info.value.actual_version == 1
    assert order_repository.orders[stored.id].status is OrderStatus.CONFIRMED


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_status_of_missing_order(order_repository):
    with pytest.raises(EntityNotFoundException):
        await UpdateOrderStatusUseCase(order_repository).execute(
            UpdateOrderStatusRequest(order_id=uuid4(), status="Confirmed")
        )


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_rollback_cancelled_order_returns_to_review(order_repository, published_events):
    events = published_events(OrderStatusChanged)
    stored = await order_repository.create(OrderBuilder().with_status(OrderStatus.CANCELLED).build())

    result = await RollbackOrderStatusUseCase(order_repository).execute(RollbackOrderStatusRequest(order_id=stored.id))

    assert result.order.status is OrderStatus.UNDER_REVIEW
    assert result.transition.is_rollback
    assert events[0].is_rollback


# ============================================================================
# Queries and deletion
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_list_orders_filters_and_pages(order_repository):
    for _ in range(3):
        await order_repository.create(OrderBuilder().build())
    await order_repository.create(OrderBuilder().with_status(OrderStatus.SHIPPED).build())

    page = await ListOrdersUseCase(order_repository).execute(
        ListOrdersRequest(page_number=1, page_size=2, status="UnderReview")
    )

    assert page.total_items == 3
    assert page.total_pages == 2
    assert len(page.items) == 2


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_list_orders_rejects_unknown_payment_method(order_repository):
    with pytest.raises(ValidationException) as exc_info:
        await ListOrdersUseCase(order_repository).execute(ListOrdersRequest(payment_method="Barter"))

    assert exc_info.value.field == "paymentMethod"


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_by_number_is_case_insensitive(order_repository):
    await order_repository.create(OrderBuilder().build())

    order = await GetOrderByNumberUseCase(order_repository).execute(" ord-000001 ")

    assert order.order_number == "ORD-000001"


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_delete_order(order_repository):
    stored = await order_repository.create(OrderBuilder().build())
    use_case = DeleteOrderUseCase(order_repository)

    await use_case.execute(stored.id)

    assert order_repository.orders == {}
    with pytest.raises(EntityNotFoundException):
        await use_case.execute(stored.id)


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_delete_referenced_order_fails(order_repository):
    stored = await order_repository.create(OrderBuilder().build())
    order_repository.referenced.add(stored.id)

    with pytest.raises(BusinessRuleViolationException):
        await DeleteOrderUseCase(order_repository).execute(stored.id)

    assert stored.id in order_repository.orders
