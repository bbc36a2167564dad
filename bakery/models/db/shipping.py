"""
Per-governorate shipping fees
"""

import uuid

from sqlalchemy import Column, Numeric, String
from sqlalchemy.dialects.postgresql import UUID

from .base import Base, TimestampMixin


class ShippingFee(Base, TimestampMixin):
    __tablename__ = "shipping_fees"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    governorate = Column(String(100), unique=True, nullable=False)
    fee = Column(Numeric(12, 2), nullable=False)
    delivery_time = Column(String(100), nullable=True)
    status = Column(String(20), nullable=False, default="Active")  # Active, Inactive

    def __repr__(self):
        return f"<ShippingFee(governorate='{self.governorate}', fee={self.fee})>"
