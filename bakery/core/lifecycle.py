"""
Application lifecycle management using the FastAPI lifespan pattern.

Handles only startup/shutdown: logging, event subscriptions and the
database engine.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from bakery.config.settings import get_settings
from bakery.core.domain import DomainEventPublisher
from bakery.core.shared.logger import configure_logging
from bakery.database.async_db import dispose_engine
from bakery.integrations.notifications import OrderNotificationHandlers, register_notification_handlers

logger = logging.getLogger(__name__)
settings = get_settings()


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup initialization and graceful shutdown.
    """

    def __init__(self) -> None:
        self._initialized = False
        self._notifications: OrderNotificationHandlers | None = None

    async def startup(self) -> None:
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
        logger.info("Starting application lifecycle...")

        self._verify_configurations()
        self._notifications = register_notification_handlers()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        DomainEventPublisher.clear_handlers()
        if self._notifications is not None:
            await self._notifications.drain()
            self._notifications = None
        await dispose_engine()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    def _verify_configurations(self) -> None:
        """Warn about settings that silently disable features."""
        if not settings.NOTIFICATION_WEBHOOK_URL:
            logger.warning("NOTIFICATION_WEBHOOK_URL not configured - notifications will only be logged")
        if not settings.SENTRY_DSN:
            logger.info("SENTRY_DSN not configured - error tracking disabled")


_lifecycle_manager: LifecycleManager | None = None


def get_lifecycle_manager() -> LifecycleManager:
    """Get or create the global lifecycle manager instance."""
    global _lifecycle_manager
    if _lifecycle_manager is None:
        _lifecycle_manager = LifecycleManager()
    return _lifecycle_manager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    lifecycle = get_lifecycle_manager()

    await lifecycle.startup()

    yield

    await lifecycle.shutdown()
