"""
Merchandise order models
"""

import uuid
from typing import List

from sqlalchemy import Column, ForeignKey, Index, Integer, Numeric, Sequence, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin, VersionMixin

# Source of ORD-000001 style numbers; values are never reused
order_number_seq = Sequence("order_number_seq", start=1)


class Order(Base, TimestampMixin, VersionMixin):
    """Placed merchandise order"""

    __tablename__ = "orders"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_number = Column(String(20), unique=True, nullable=False)

    # Customers live in the auth service; guests have no id
    customer_id = Column(UUID(as_uuid=True), nullable=True)
    customer_full_name = Column(String(200), nullable=False)
    customer_phone = Column(String(30), nullable=False)
    customer_address = Column(Text, nullable=False)
    governorate = Column(String(100), nullable=False)

    status = Column(String(20), nullable=False, default="UnderReview")

    # Amounts are fixed at checkout
    products_subtotal = Column(Numeric(12, 2), nullable=False)
    discount_amount = Column(Numeric(12, 2), nullable=False, default=0)
    shipping_fee = Column(Numeric(12, 2), nullable=False, default=0)
    total = Column(Numeric(12, 2), nullable=False)

    discount_code_id = Column(UUID(as_uuid=True), ForeignKey("discount_codes.id"), nullable=True)
    discount_code = Column(String(50), nullable=True)

    payment_method = Column(String(20), nullable=False)
    payment_transaction_id = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)

    items: Mapped[List["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.position",
        lazy="selectin",
    )

    __table_args__ = (
        Index("idx_orders_customer", customer_id),
        Index("idx_orders_status", status),
        Index("idx_orders_payment_method", payment_method),
        Index("idx_orders_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<Order(number='{self.order_number}', status='{self.status}', total={self.total})>"


class OrderItem(Base):
    """Line item with the product data captured at purchase time"""

    __tablename__ = "order_items"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_id = Column(UUID(as_uuid=True), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    # Products are owned by the catalog service
    product_id = Column(UUID(as_uuid=True), nullable=False)
    product_name = Column(String(255), nullable=False)
    product_code = Column(String(50), nullable=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(12, 2), nullable=False)
    size = Column(String(50), nullable=True)
    color = Column(String(50), nullable=True)

    order: Mapped["Order"] = relationship("Order", back_populates="items")

    __table_args__ = (Index("idx_order_items_order", order_id),)

    def __repr__(self):
        return f"<OrderItem(product='{self.product_name}', quantity={self.quantity}, price={self.unit_price})>"
