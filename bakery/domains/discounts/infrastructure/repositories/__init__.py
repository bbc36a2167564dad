from bakery.domains.discounts.infrastructure.repositories.discount_code_repository import (
    SQLAlchemyDiscountCodeRepository,
)

__all__ = ["SQLAlchemyDiscountCodeRepository"]
