"""
Unit tests for OrderStatusMachine.

Covers every (current, target) pair of advance and every rollback.
"""

import pytest

from bakery.core.domain import InvalidTransitionException, NoPreviousStatusException
from bakery.domains.orders.domain import OrderStatus, OrderStatusChanged, OrderStatusMachine
from bakery.domains.orders.domain.services import order_status_machine
from tests.utils import OrderBuilder

VALID_ADVANCES = {
    (OrderStatus.UNDER_REVIEW, OrderStatus.CONFIRMED),
    (OrderStatus.CONFIRMED, OrderStatus.SHIPPED),
    (OrderStatus.SHIPPED, OrderStatus.DELIVERED),
    (OrderStatus.UNDER_REVIEW, OrderStatus.CANCELLED),
    (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
}

ALL_PAIRS = [(current, target) for current in OrderStatus for target in OrderStatus]


@pytest.fixture
def machine():
    return OrderStatusMachine()


@pytest.mark.unit
@pytest.mark.parametrize("current,target", sorted(VALID_ADVANCES, key=lambda p: (p[0].code, p[1].code)))
def test_valid_advance_sets_status(machine, current, target):
    order = OrderBuilder().with_status(current).build()

    transition = machine.advance(order, target)

    assert order.status is target
    assert transition.from_status is current
    assert transition.to_status is target
    assert not transition.is_rollback


@pytest.mark.unit
@pytest.mark.parametrize(
    "current,target",
    [pair for pair in ALL_PAIRS if pair not in VALID_ADVANCES],
)
def test_invalid_advance_is_rejected_and_order_untouched(machine, current, target):
    order = OrderBuilder().with_status(current).build()
    updated_at = order.updated_at

    with pytest.raises(InvalidTransitionException) as exc_info:
        machine.advance(order, target)

    assert order.status is current
    assert order.updated_at == updated_at
    assert order.get_domain_events() == []
    assert exc_info.value.details["current_status"] == current.value
    assert exc_info.value.details["requested_status"] == target.value


@pytest.mark.unit
def test_skipping_confirmation_is_rejected(machine):
    order = OrderBuilder().build()

    with pytest.raises(InvalidTransitionException) as exc_info:
        machine.advance(order, OrderStatus.SHIPPED)

    assert exc_info.value.details["allowed_statuses"] == ["Confirmed", "Cancelled"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "current,previous",
    [
        (OrderStatus.CONFIRMED, OrderStatus.UNDER_REVIEW),
        (OrderStatus.SHIPPED, OrderStatus.CONFIRMED),
        (OrderStatus.DELIVERED, OrderStatus.SHIPPED),
        (OrderStatus.CANCELLED, OrderStatus.UNDER_REVIEW),
    ],
)
def test_rollback_moves_one_step_back(machine, current, previous):
    order = OrderBuilder().with_status(current).build()

    transition = machine.rollback(order)

    assert order.status is previous
    assert transition.is_rollback


@pytest.mark.unit
def test_rollback_from_initial_status_fails(machine):
    order = OrderBuilder().build()

    with pytest.raises(NoPreviousStatusException):
        machine.rollback(order)

    assert order.status is OrderStatus.UNDER_REVIEW


@pytest.mark.unit
def test_rollback_from_status_outside_forward_sequence_fails(machine, monkeypatch):
    monkeypatch.setattr(
        order_status_machine,
        "FORWARD_SEQUENCE",
        (OrderStatus.UNDER_REVIEW, OrderStatus.CONFIRMED, OrderStatus.SHIPPED),
    )
    order = OrderBuilder().with_status(OrderStatus.DELIVERED).build()

    assert machine.previous_status(OrderStatus.DELIVERED) is None
    with pytest.raises(NoPreviousStatusException):
        machine.rollback(order)

    assert order.status is OrderStatus.DELIVERED


@pytest.mark.unit
@pytest.mark.parametrize(
    "status,cancellable",
    [
        (OrderStatus.UNDER_REVIEW, True),
        (OrderStatus.CONFIRMED, True),
        (OrderStatus.SHIPPED, True),
        (OrderStatus.DELIVERED, False),
        (OrderStatus.CANCELLED, False),
    ],
)
def test_cancellation_follows_status(machine, status, cancellable):
    assert status.can_be_cancelled() is cancellable
    assert (OrderStatus.CANCELLED in machine.allowed_targets(status)) is cancellable


@pytest.mark.unit
def test_transition_records_status_changed_event(machine):
    order = OrderBuilder().with_status(OrderStatus.CONFIRMED).build()

    machine.advance(order, OrderStatus.SHIPPED)

    (event,) = order.get_domain_events()
    assert isinstance(event, OrderStatusChanged)
    assert event.previous_status == "Confirmed"
    assert event.status == "Shipped"
    assert event.order_number == order.order_number


@pytest.mark.unit
def test_allowed_targets(machine):
    assert machine.allowed_targets(OrderStatus.UNDER_REVIEW) == [OrderStatus.CONFIRMED, OrderStatus.CANCELLED]
    assert machine.allowed_targets(OrderStatus.SHIPPED) == [OrderStatus.DELIVERED, OrderStatus.CANCELLED]
    assert machine.allowed_targets(OrderStatus.DELIVERED) == []
    assert machine.allowed_targets(OrderStatus.CANCELLED) == []


@pytest.mark.unit
def test_full_lifecycle_with_rollback(machine):
    order = OrderBuilder().build()

    machine.advance(order, OrderStatus.CONFIRMED)
    machine.advance(order, OrderStatus.SHIPPED)
    machine.rollback(order)
    machine.advance(order, OrderStatus.SHIPPED)
    machine.advance(order, OrderStatus.DELIVERED)

    assert order.status is OrderStatus.DELIVERED
    assert len(order.get_domain_events()) == 5
