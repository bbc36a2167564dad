from bakery.domains.discounts.domain.entities.discount_code import DiscountCode, normalize_code

__all__ = ["DiscountCode", "normalize_code"]
