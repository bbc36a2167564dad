"""
Unit tests for DiscountCode validity rules and discount computation.
"""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from bakery.core.domain import Money, ValidationException
from bakery.domains.discounts.domain import DiscountCode, DiscountKind, DiscountRejectionReason, normalize_code
from tests.utils import DiscountCodeBuilder


@pytest.mark.unit
class TestRejectionReasons:
    """Rules are checked in a fixed order; the first broken one is reported."""

    def test_valid_code_is_accepted(self, now):
        result = DiscountCodeBuilder().build().evaluate(Money.from_float(300), now)

        assert result.accepted is True
        assert result.reason is None
        assert result.discount_amount == Money.from_float(30)

    def test_inactive(self, now):
        code = DiscountCodeBuilder().inactive().with_usage(5, 5).build()

        assert code.rejection_reason(Money.from_float(300), now) is DiscountRejectionReason.INACTIVE

    def test_not_yet_valid(self, now):
        code = (
            DiscountCodeBuilder()
            .valid_between(datetime(2026, 6, 1, tzinfo=UTC), datetime(2026, 6, 30, tzinfo=UTC))
            .build()
        )

        assert code.rejection_reason(Money.from_float(300), now) is DiscountRejectionReason.NOT_YET_VALID

    def test_expired(self, now):
        code = (
            DiscountCodeBuilder()
            .valid_between(datetime(2026, 4, 1, tzinfo=UTC), datetime(2026, 4, 30, tzinfo=UTC))
            .build()
        )

        assert code.rejection_reason(Money.from_float(300), now) is DiscountRejectionReason.EXPIRED

    def test_window_bounds_are_inclusive(self):
        code = DiscountCodeBuilder().build()

        assert code.rejection_reason(Money.from_float(300), code.start_date) is None
        assert code.rejection_reason(Money.from_float(300), code.end_date) is None

    def test_below_minimum_order(self, now):
        code = DiscountCodeBuilder().with_min_order(500).with_usage(5, 5).build()

        assert code.rejection_reason(Money.from_float(499.99), now) is DiscountRejectionReason.BELOW_MINIMUM_ORDER
        assert code.rejection_reason(Money.from_float(500), now) is DiscountRejectionReason.USAGE_LIMIT_REACHED

    def test_usage_limit_reached(self, now):
        code = DiscountCodeBuilder().with_usage(3, 3).build()

        result = code.evaluate(Money.from_float(300), now)

        assert result.accepted is False
        assert result.reason is DiscountRejectionReason.USAGE_LIMIT_REACHED
        assert result.discount_amount.is_zero()
        assert result.message == "This discount code has reached its usage limit"

    def test_no_limit_means_unlimited(self, now):
        code = DiscountCodeBuilder().with_usage(10_000, None).build()

        assert code.has_remaining_uses() is True


@pytest.mark.unit
class TestComputeDiscount:
    def test_percentage_is_rounded_to_cents(self):
        code = DiscountCodeBuilder().percentage("12.5").build()

        assert code.compute_discount(Money.from_float("99.99")) == Money.from_float("12.50")

    def test_percentage_capped_by_max_discount(self):
        code = DiscountCodeBuilder().percentage(10, max_discount=50).build()

        assert code.compute_discount(Money.from_float(800)) == Money.from_float(50)
        assert code.compute_discount(Money.from_float(300)) == Money.from_float(30)

    def test_fixed_discount(self):
        code = DiscountCodeBuilder().fixed(40).build()

        assert code.compute_discount(Money.from_float(300)) == Money.from_float(40)

    def test_fixed_discount_never_exceeds_order_amount(self):
        code = DiscountCodeBuilder().fixed(100).build()

        assert code.compute_discount(Money.from_float(60)) == Money.from_float(60)

    def test_hundred_percent_discount(self):
        code = DiscountCodeBuilder().percentage(100).build()

        assert code.compute_discount(Money.from_float(300)) == Money.from_float(300)


@pytest.mark.unit
class TestDiscountCodeValidation:
    @pytest.mark.parametrize("value", ["-1", "100.01"])
    def test_percentage_out_of_range(self, value):
        with pytest.raises(ValidationException):
            DiscountCodeBuilder().percentage(value).build()

    def test_percentage_kind_needs_value(self):
        with pytest.raises(ValidationException):
            DiscountCode(code="X", kind=DiscountKind.PERCENTAGE, percentage_value=None)

    def test_fixed_kind_needs_value(self):
        with pytest.raises(ValidationException):
            DiscountCode(code="X", kind=DiscountKind.FIXED)

    def test_negative_usage_limit(self):
        with pytest.raises(ValidationException):
            DiscountCodeBuilder().with_usage(0, -1).build()

    def test_codes_are_compared_case_insensitively(self):
        code = DiscountCode(code=" eid10 ", percentage_value=Decimal("10"))

        assert code.normalized_code == "EID10"
        assert normalize_code("Eid10") == normalize_code("EID10")
