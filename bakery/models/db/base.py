"""
Base models and mixins for the database
"""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TimestampMixin:
    """Timezone-aware created/updated timestamps."""

    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


class VersionMixin:
    """Row version compared on every conditional UPDATE (optimistic locking)."""

    version = Column(Integer, nullable=False, default=0, server_default="0")
