"""
Unit tests for CustomOrderStatusMachine.
"""

from decimal import Decimal

import pytest

from bakery.core.domain import Money, ValidationException
from bakery.domains.custom_orders.domain import CustomOrderStatus, CustomOrderStatusChanged, CustomOrderStatusMachine
from tests.utils import make_custom_order


@pytest.fixture
def machine():
    return CustomOrderStatusMachine()


@pytest.mark.unit
def test_set_ready_with_final_price(machine):
    custom_order = make_custom_order(estimated_price=270)

    machine.update_status(custom_order, "Ready", final_price=275)

    assert custom_order.status is CustomOrderStatus.READY
    assert custom_order.final_price == Money.from_float(275)
    assert custom_order.displayed_price == Money.from_float(275)
    assert custom_order.estimated_price == Money.from_float(270)


@pytest.mark.unit
@pytest.mark.parametrize("current", list(CustomOrderStatus))
@pytest.mark.parametrize("target", list(CustomOrderStatus))
def test_any_status_can_be_set_from_any_status(machine, current, target):
    custom_order = make_custom_order(status=current)

    machine.update_status(custom_order, target)

    assert custom_order.status is target


@pytest.mark.unit
@pytest.mark.parametrize("bad_price", [-1, "-0.01", "abc", float("nan"), float("inf"), True])
def test_invalid_final_price_is_rejected_and_order_untouched(machine, bad_price):
    custom_order = make_custom_order(status=CustomOrderStatus.CONFIRMED)

    with pytest.raises(ValidationException) as exc_info:
        machine.update_status(custom_order, "Ready", final_price=bad_price)

    assert exc_info.value.field == "finalPrice"
    assert custom_order.status is CustomOrderStatus.CONFIRMED
    assert custom_order.final_price is None
    assert custom_order.get_domain_events() == []


@pytest.mark.unit
def test_unknown_status_is_rejected(machine):
    custom_order = make_custom_order()

    with pytest.raises(ValidationException):
        machine.update_status(custom_order, "Baking")

    assert custom_order.status is CustomOrderStatus.PENDING


@pytest.mark.unit
def test_zero_final_price_is_allowed(machine):
    custom_order = make_custom_order()

    machine.update_status(custom_order, "Completed", final_price=Decimal("0"))

    assert custom_order.displayed_price == Money.zero()


@pytest.mark.unit
def test_final_price_kept_when_not_given(machine):
    custom_order = make_custom_order()
    machine.update_status(custom_order, "Confirmed", final_price=300)

    machine.update_status(custom_order, "InProgress")

    assert custom_order.final_price == Money.from_float(300)


@pytest.mark.unit
def test_admin_notes_semantics(machine):
    custom_order = make_custom_order()

    machine.update_status(custom_order, "Confirmed", admin_notes="Call before baking")
    assert custom_order.admin_notes == "Call before baking"

    machine.update_status(custom_order, "InProgress")
    assert custom_order.admin_notes == "Call before baking"

    machine.update_status(custom_order, "Ready", admin_notes="")
    assert custom_order.admin_notes is None


@pytest.mark.unit
def test_legacy_status_code(machine):
    custom_order = make_custom_order()

    machine.update_status(custom_order, 2)

    assert custom_order.status is CustomOrderStatus.IN_PROGRESS


@pytest.mark.unit
def test_update_records_event(machine):
    custom_order = make_custom_order()

    machine.update_status(custom_order, "Ready", final_price=275)

    (event,) = custom_order.get_domain_events()
    assert isinstance(event, CustomOrderStatusChanged)
    assert event.previous_status == "Pending"
    assert event.status == "Ready"
    assert event.total == Decimal("275.00")
