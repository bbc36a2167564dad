from bakery.domains.discounts.application.services.discount_ledger import DiscountLedger

__all__ = ["DiscountLedger"]
