from bakery.domains.discounts.domain.value_objects.discount_kind import (
    DiscountKind,
    DiscountRejectionReason,
    DiscountValidationResult,
)

__all__ = ["DiscountKind", "DiscountRejectionReason", "DiscountValidationResult"]
