"""
Custom Orders Domain Services
"""

from bakery.domains.custom_orders.domain.services.custom_order_status_machine import CustomOrderStatusMachine
from bakery.domains.custom_orders.domain.services.pricing_resolver import PriceQuote, PricingResolver, SizePrice

__all__ = ["CustomOrderStatusMachine", "PricingResolver", "PriceQuote", "SizePrice"]
