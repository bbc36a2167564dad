"""
Application entry point.

All configuration, middleware and lifecycle management is delegated to
specialized modules.
"""

import logging

import sentry_sdk

from bakery.config.settings import get_settings
from bakery.core.app_factory import create_app

logger = logging.getLogger(__name__)
settings = get_settings()

if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        send_default_pii=False,
        environment=settings.ENVIRONMENT,
    )

app = create_app()

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "bakery.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.DEBUG,
    )
