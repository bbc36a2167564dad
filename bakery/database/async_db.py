import logging
from typing import AsyncGenerator
from urllib.parse import quote_plus

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from bakery.config.settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def get_async_database_url() -> str:
    """Build the asyncpg database URL from settings."""
    if not settings.DB_NAME:
        raise ValueError("Database name is required (DB_NAME)")

    encoded_user = quote_plus(settings.DB_USER)
    host = f"{settings.DB_HOST}:{settings.DB_PORT}"
    if settings.DB_PASSWORD:
        encoded_password = quote_plus(settings.DB_PASSWORD)
        return f"postgresql+asyncpg://{encoded_user}:{encoded_password}@{host}/{settings.DB_NAME}"
    return f"postgresql+asyncpg://{encoded_user}@{host}/{settings.DB_NAME}"


def create_async_database_engine() -> AsyncEngine:
    """Create the async engine (no pooling in debug, a sized pool otherwise)."""
    base_config = {
        "echo": settings.DB_ECHO,
        "pool_pre_ping": True,
    }

    if settings.DEBUG:
        logger.info("Creating async database engine for DEVELOPMENT (NullPool)")
        engine_config = {**base_config, "poolclass": NullPool}
    else:
        logger.info("Creating async database engine for PRODUCTION (pooled)")
        engine_config = {
            **base_config,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
        }

    try:
        return create_async_engine(get_async_database_url(), **engine_config)
    except Exception as e:
        logger.error(f"Failed to create async database engine: {e}")
        raise


async_engine = create_async_database_engine()

AsyncSessionLocal = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one session per request.

    Repositories commit their own unit of work; anything left pending when the
    request finishes is committed here, and any error rolls the session back.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            logger.error(f"Async database error: {e}")
            await session.rollback()
            raise


async def dispose_engine() -> None:
    """Close all pooled connections (application shutdown)."""
    await async_engine.dispose()
    logger.info("Database engine disposed")
