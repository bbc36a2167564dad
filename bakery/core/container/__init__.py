"""
Dependency Injection Container.

Facade composing the domain containers. Repositories are created per request
from the request's session; domain services are shared singletons.
"""

import logging

from .base import BaseContainer
from .custom_orders import CustomOrdersContainer
from .discounts import DiscountsContainer
from .orders import OrdersContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    def __init__(self, config: dict | None = None):
        self._base = BaseContainer(config)
        self._discounts = DiscountsContainer(self._base)
        self._orders = OrdersContainer(self._base, self._discounts)
        self._custom_orders = CustomOrdersContainer(self._base)
        logger.info("DependencyContainer initialized with all domain containers")

    @property
    def settings(self):
        return self._base.settings

    @property
    def base(self) -> BaseContainer:
        return self._base

    @property
    def orders(self) -> OrdersContainer:
        return self._orders

    @property
    def custom_orders(self) -> CustomOrdersContainer:
        return self._custom_orders

    @property
    def discounts(self) -> DiscountsContainer:
        return self._discounts


_container: DependencyContainer | None = None


def get_container(config: dict | None = None) -> DependencyContainer:
    """
    Get global container instance (singleton).

    Args:
        config: Optional configuration (only used on first call)
    """
    global _container

    if _container is None:
        logger.info("Initializing global DependencyContainer")
        _container = DependencyContainer(config)
    elif config is not None:
        logger.warning("Container already initialized, ignoring new config. Call reset_container() first.")

    return _container


def reset_container() -> None:
    """Drop the global container (tests)."""
    global _container
    _container = None


__all__ = ["DependencyContainer", "get_container", "reset_container"]
