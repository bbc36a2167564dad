"""
Cake configuration catalog: occasions, master sizes, flavors and
per-occasion size prices.
"""

import uuid
from typing import List

from sqlalchemy import Boolean, Column, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin


class Occasion(Base, TimestampMixin):
    __tablename__ = "occasions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    name_ar = Column(String(100), nullable=True)
    icon = Column(String(100), nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    size_prices: Mapped[List["OccasionSizePrice"]] = relationship(
        "OccasionSizePrice",
        back_populates="occasion",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self):
        return f"<Occasion(name='{self.name}')>"


class CakeSize(Base, TimestampMixin):
    """Master size tier with its default price"""

    __tablename__ = "cake_sizes"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    name_ar = Column(String(100), nullable=True)
    persons_count = Column(String(50), nullable=True)  # "serves 8-10"
    default_price = Column(Numeric(12, 2), nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<CakeSize(name='{self.name}', default_price={self.default_price})>"


class Flavor(Base, TimestampMixin):
    __tablename__ = "flavors"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    name_ar = Column(String(100), nullable=True)
    color = Column(String(20), nullable=True)
    additional_price = Column(Numeric(12, 2), nullable=False, default=0)
    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<Flavor(name='{self.name}', additional_price={self.additional_price})>"


class OccasionSizePrice(Base, TimestampMixin):
    """Occasion-specific override of a master size price"""

    __tablename__ = "occasion_size_prices"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    occasion_id = Column(UUID(as_uuid=True), ForeignKey("occasions.id", ondelete="CASCADE"), nullable=False)
    size_id = Column(UUID(as_uuid=True), ForeignKey("cake_sizes.id", ondelete="CASCADE"), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    occasion: Mapped["Occasion"] = relationship("Occasion", back_populates="size_prices")

    __table_args__ = (UniqueConstraint("occasion_id", "size_id", name="uq_occasion_size_price"),)
