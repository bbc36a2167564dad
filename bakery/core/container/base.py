"""
Base Container - Shared Singletons.

Single Responsibility: hold settings and the stateless domain services every
domain container reuses.
"""

import logging

from bakery.config.settings import get_settings
from bakery.domains.custom_orders.domain import CustomOrderStatusMachine, PricingResolver
from bakery.domains.orders.domain import OrderStatusMachine

logger = logging.getLogger(__name__)


class BaseContainer:
    def __init__(self, config: dict | None = None):
        """
        Args:
            config: Optional overrides (currency, min_lead_days, max_page_size)
        """
        self.settings = get_settings()
        self.config = config or {}

        self._order_status_machine: OrderStatusMachine | None = None
        self._custom_order_status_machine: CustomOrderStatusMachine | None = None
        self._pricing_resolver: PricingResolver | None = None

        logger.info("BaseContainer initialized")

    @property
    def currency(self) -> str:
        return self.config.get("currency") or self.settings.CURRENCY

    @property
    def min_lead_days(self) -> int:
        return self.config.get("min_lead_days", self.settings.CUSTOM_ORDER_MIN_LEAD_DAYS)

    @property
    def max_page_size(self) -> int:
        return self.config.get("max_page_size", self.settings.MAX_PAGE_SIZE)

    def get_order_status_machine(self) -> OrderStatusMachine:
        if self._order_status_machine is None:
            self._order_status_machine = OrderStatusMachine()
        return self._order_status_machine

    def get_custom_order_status_machine(self) -> CustomOrderStatusMachine:
        if self._custom_order_status_machine is None:
            self._custom_order_status_machine = CustomOrderStatusMachine(currency=self.currency)
        return self._custom_order_status_machine

    def get_pricing_resolver(self) -> PricingResolver:
        if self._pricing_resolver is None:
            self._pricing_resolver = PricingResolver(currency=self.currency)
        return self._pricing_resolver
