from bakery.core.shared.logger import (
    ContextLogger,
    configure_logging,
    get_logger,
    get_service_logger,
)
from bakery.core.shared.pagination import Page, PageRequest

__all__ = [
    "ContextLogger",
    "configure_logging",
    "get_logger",
    "get_service_logger",
    "Page",
    "PageRequest",
]
