"""Initial schema: catalog, discount codes, shipping fees, orders, custom orders.

Revision ID: 001_initial_schema
Revises: None
Create Date: 2026-10-17
"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_initial_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def _money(name: str, nullable: bool = False, **kwargs) -> sa.Column:
    return sa.Column(name, sa.Numeric(12, 2), nullable=nullable, **kwargs)


def upgrade() -> None:
    op.execute(sa.schema.CreateSequence(sa.Sequence("order_number_seq", start=1)))
    op.execute(sa.schema.CreateSequence(sa.Sequence("custom_order_number_seq", start=1)))

    # Cake catalog
    op.create_table(
        "occasions",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("name_ar", sa.String(100), nullable=True),
        sa.Column("icon", sa.String(100), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_table(
        "cake_sizes",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("name_ar", sa.String(100), nullable=True),
        sa.Column("persons_count", sa.String(50), nullable=True),
        _money("default_price", nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_table(
        "flavors",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("name_ar", sa.String(100), nullable=True),
        sa.Column("color", sa.String(20), nullable=True),
        _money("additional_price", server_default="0"),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_table(
        "occasion_size_prices",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "occasion_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("occasions.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "size_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("cake_sizes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _money("price"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.UniqueConstraint("occasion_id", "size_id", name="uq_occasion_size_price"),
    )

    # Discount codes
    op.create_table(
        "discount_codes",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("kind", sa.String(20), nullable=False),
        sa.Column("percentage_value", sa.Numeric(5, 2), nullable=True),
        _money("fixed_value", nullable=True),
        _money("min_order_amount", nullable=True),
        _money("max_discount_amount", nullable=True),
        sa.Column("usage_limit", sa.Integer(), nullable=True),
        sa.Column("usage_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.CheckConstraint(
            "usage_limit IS NULL OR usage_count <= usage_limit",
            name="ck_discount_codes_usage_within_limit",
        ),
    )
    op.create_index("uq_discount_codes_code_upper", "discount_codes", [sa.text("upper(code)")], unique=True)

    op.create_table(
        "shipping_fees",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("governorate", sa.String(100), nullable=False, unique=True),
        _money("fee"),
        sa.Column("delivery_time", sa.String(100), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="Active"),
        *_timestamps(),
    )

    # Merchandise orders
    op.create_table(
        "orders",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("order_number", sa.String(20), nullable=False, unique=True),
        sa.Column("customer_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("customer_full_name", sa.String(200), nullable=False),
        sa.Column("customer_phone", sa.String(30), nullable=False),
        sa.Column("customer_address", sa.Text(), nullable=False),
        sa.Column("governorate", sa.String(100), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="UnderReview"),
        _money("products_subtotal"),
        _money("discount_amount", server_default="0"),
        _money("shipping_fee", server_default="0"),
        _money("total"),
        sa.Column(
            "discount_code_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("discount_codes.id"),
            nullable=True,
        ),
        sa.Column("discount_code", sa.String(50), nullable=True),
        sa.Column("payment_method", sa.String(20), nullable=False),
        sa.Column("payment_transaction_id", sa.String(100), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("idx_orders_customer", "orders", ["customer_id"])
    op.create_index("idx_orders_status", "orders", ["status"])
    op.create_index("idx_orders_payment_method", "orders", ["payment_method"])
    op.create_index("idx_orders_created_at", "orders", ["created_at"])

    op.create_table(
        "order_items",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "order_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("orders.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("product_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("product_name", sa.String(255), nullable=False),
        sa.Column("product_code", sa.String(50), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False),
        _money("unit_price"),
        sa.Column("size", sa.String(50), nullable=True),
        sa.Column("color", sa.String(50), nullable=True),
    )
    op.create_index("idx_order_items_order", "order_items", ["order_id"])

    # Custom cake orders
    op.create_table(
        "custom_orders",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("order_number", sa.String(20), nullable=False, unique=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("customer_name", sa.String(200), nullable=False),
        sa.Column("customer_phone", sa.String(30), nullable=False),
        sa.Column("occasion_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("occasions.id"), nullable=False),
        sa.Column("size_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("cake_sizes.id"), nullable=False),
        sa.Column("flavor_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("flavors.id"), nullable=False),
        sa.Column("occasion_name", sa.String(100), nullable=False),
        sa.Column("size_name", sa.String(100), nullable=False),
        sa.Column("flavor_name", sa.String(100), nullable=False),
        sa.Column("custom_text", sa.String(200), nullable=True),
        sa.Column("design_image_url", sa.String(500), nullable=True),
        sa.Column("pickup_date", sa.Date(), nullable=False),
        sa.Column("pickup_time", sa.Time(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("payment_method", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="Pending"),
        _money("estimated_price"),
        _money("final_price", nullable=True),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("idx_custom_orders_status", "custom_orders", ["status"])
    op.create_index("idx_custom_orders_created_at", "custom_orders", ["created_at"])
    op.create_index("idx_custom_orders_user", "custom_orders", ["user_id"])


def downgrade() -> None:
    op.drop_table("custom_orders")
    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("shipping_fees")
    op.drop_index("uq_discount_codes_code_upper", table_name="discount_codes")
    op.drop_table("discount_codes")
    op.drop_table("occasion_size_prices")
    op.drop_table("flavors")
    op.drop_table("cake_sizes")
    op.drop_table("occasions")
    op.execute(sa.schema.DropSequence(sa.Sequence("custom_order_number_seq")))
    op.execute(sa.schema.DropSequence(sa.Sequence("order_number_seq")))
