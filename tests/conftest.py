"""
Shared pytest fixtures for all tests.

Settings are read from the environment on first use, so the test
environment is set before anything from bakery is imported.
"""

import os
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-bakery-tests")
os.environ.setdefault("DEBUG", "false")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from bakery.core.domain import DomainEventPublisher  # noqa: E402
from bakery.services.token_service import TokenService  # noqa: E402
from tests.utils.fakes import (  # noqa: E402
    InMemoryCakeCatalogRepository,
    InMemoryCustomOrderRepository,
    InMemoryDiscountCodeRepository,
    InMemoryOrderRepository,
    InMemoryShippingFeeRepository,
)

# ============================================================================
# GENERAL FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def clear_event_handlers():
    """Event subscriptions are class-level; never leak them between tests."""
    DomainEventPublisher.clear_handlers()
    yield
    DomainEventPublisher.clear_handlers()


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 5, 10, 12, 0, tzinfo=UTC)


@pytest.fixture
def published_events():
    """Collects every published event of the given types."""
    events = []

    def subscribe(*event_types):
        async def collect(event):
            events.append(event)

        for event_type in event_types:
            DomainEventPublisher.subscribe(event_type, collect)
        return events

    return subscribe


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def mock_async_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.scalar = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.add = MagicMock()
    session.delete = AsyncMock()
    return session


# ============================================================================
# IN-MEMORY REPOSITORIES
# ============================================================================


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def shipping_fee_repository() -> InMemoryShippingFeeRepository:
    return InMemoryShippingFeeRepository()


@pytest.fixture
def discount_repository() -> InMemoryDiscountCodeRepository:
    return InMemoryDiscountCodeRepository()


@pytest.fixture
def custom_order_repository() -> InMemoryCustomOrderRepository:
    return InMemoryCustomOrderRepository()


@pytest.fixture
def catalog_repository() -> InMemoryCakeCatalogRepository:
    return InMemoryCakeCatalogRepository()


# ============================================================================
# API FIXTURES
# ============================================================================


@pytest.fixture
def token_service() -> TokenService:
    return TokenService()


@pytest.fixture
def admin_headers(token_service) -> dict[str, str]:
    token = token_service.create_access_token({"sub": "admin-1", "role": "admin"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def customer_headers(token_service) -> dict[str, str]:
    token = token_service.create_access_token(
        {"sub": "customer-1", "role": "customer", "customer_id": "6f1c2f9e-3d4b-4a8e-9c61-1f2e3d4c5b6a"}
    )
    return {"Authorization": f"Bearer {token}"}
