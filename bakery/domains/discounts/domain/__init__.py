"""
Discounts Domain Layer

Discount codes, their validity rules and the discount they grant.
"""

from bakery.domains.discounts.domain.entities import DiscountCode, normalize_code
from bakery.domains.discounts.domain.value_objects import (
    DiscountKind,
    DiscountRejectionReason,
    DiscountValidationResult,
)

__all__ = [
    "DiscountCode",
    "DiscountKind",
    "DiscountRejectionReason",
    "DiscountValidationResult",
    "normalize_code",
]
