"""
Custom cake order model
"""

import uuid

from sqlalchemy import Column, Date, ForeignKey, Index, Numeric, Sequence, String, Text, Time
from sqlalchemy.dialects.postgresql import UUID

from .base import Base, TimestampMixin, VersionMixin

# Source of CK-000001 style numbers
custom_order_number_seq = Sequence("custom_order_number_seq", start=1)


class CustomOrder(Base, TimestampMixin, VersionMixin):
    """Bespoke cake order built in the configuration wizard"""

    __tablename__ = "custom_orders"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_number = Column(String(20), unique=True, nullable=False)

    user_id = Column(UUID(as_uuid=True), nullable=True)
    customer_name = Column(String(200), nullable=False)
    customer_phone = Column(String(30), nullable=False)

    occasion_id = Column(UUID(as_uuid=True), ForeignKey("occasions.id"), nullable=False)
    size_id = Column(UUID(as_uuid=True), ForeignKey("cake_sizes.id"), nullable=False)
    flavor_id = Column(UUID(as_uuid=True), ForeignKey("flavors.id"), nullable=False)
    occasion_name = Column(String(100), nullable=False)
    size_name = Column(String(100), nullable=False)
    flavor_name = Column(String(100), nullable=False)

    custom_text = Column(String(200), nullable=True)
    design_image_url = Column(String(500), nullable=True)
    pickup_date = Column(Date, nullable=False)
    pickup_time = Column(Time, nullable=True)
    notes = Column(Text, nullable=True)

    payment_method = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, default="Pending")

    estimated_price = Column(Numeric(12, 2), nullable=False)
    final_price = Column(Numeric(12, 2), nullable=True)
    admin_notes = Column(Text, nullable=True)

    __table_args__ = (
        Index("idx_custom_orders_status", status),
        Index("idx_custom_orders_created_at", "created_at"),
        Index("idx_custom_orders_user", user_id),
    )

    def __repr__(self):
        return f"<CustomOrder(number='{self.order_number}', status='{self.status}')>"
