"""
Discount code model
"""

import uuid

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Index, Integer, Numeric, String, func
from sqlalchemy.dialects.postgresql import UUID

from .base import Base, TimestampMixin


class DiscountCode(Base, TimestampMixin):
    __tablename__ = "discount_codes"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    code = Column(String(50), nullable=False)
    kind = Column(String(20), nullable=False)  # Percentage, Fixed
    percentage_value = Column(Numeric(5, 2), nullable=True)
    fixed_value = Column(Numeric(12, 2), nullable=True)
    min_order_amount = Column(Numeric(12, 2), nullable=True)
    max_discount_amount = Column(Numeric(12, 2), nullable=True)
    usage_limit = Column(Integer, nullable=True)
    usage_count = Column(Integer, nullable=False, default=0, server_default="0")
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("uq_discount_codes_code_upper", func.upper(code), unique=True),
        CheckConstraint(
            "usage_limit IS NULL OR usage_count <= usage_limit",
            name="ck_discount_codes_usage_within_limit",
        ),
    )

    def __repr__(self):
        return f"<DiscountCode(code='{self.code}', used={self.usage_count}/{self.usage_limit})>"
