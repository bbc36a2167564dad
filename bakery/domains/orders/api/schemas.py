"""
Orders API Schemas

Pydantic schemas for API request/response validation.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import Field, StrictInt, StrictStr

from bakery.api.schemas import CamelModel
from bakery.domains.orders.domain import Order, OrderItem, OrderStatus


class OrderItemRequest(CamelModel):
    product_id: UUID
    product_name: str = Field(..., min_length=1, max_length=200)
    quantity: int = Field(..., ge=1)
    unit_price: Decimal = Field(..., ge=0)
    product_code: str | None = None
    size: str | None = None
    color: str | None = None


class CreateOrderRequest(CamelModel):
    """Checkout body."""

    full_name: str = Field(..., min_length=1, max_length=200)
    phone: str = Field(..., min_length=1, max_length=30)
    address: str = Field(..., min_length=1, max_length=500)
    governorate: str = Field(..., min_length=1, max_length=100)
    items: list[OrderItemRequest] = Field(..., min_length=1)
    payment_method: StrictStr | StrictInt = "Cash"
    discount_code: str | None = None
    payment_transaction_id: str | None = None
    notes: str | None = None


class OrderStatusUpdateRequest(CamelModel):
    status: StrictStr | StrictInt
    expected_version: int | None = None


class OrderStatusRollbackRequest(CamelModel):
    expected_version: int | None = None


class OrderItemResponse(CamelModel):
    product_id: UUID
    product_name: str
    product_code: str | None = None
    quantity: int
    unit_price: float
    line_total: float
    size: str | None = None
    color: str | None = None

    @classmethod
    def from_entity(cls, item: OrderItem) -> "OrderItemResponse":
        return cls(
            product_id=item.product_id,
            product_name=item.product_name,
            product_code=item.product_code,
            quantity=item.quantity,
            unit_price=float(item.unit_price.amount),
            line_total=float(item.line_total.amount),
            size=item.size,
            color=item.color,
        )


class OrderResponse(CamelModel):
    """Order as returned to clients. `total` excludes shipping; `amountDue` includes it."""

    id: UUID
    order_number: str
    customer_id: UUID | None = None
    full_name: str
    phone: str
    address: str
    governorate: str
    status: str
    payment_method: str
    payment_transaction_id: str | None = None
    products_subtotal: float
    discount_code: str | None = None
    discount_amount: float
    shipping_fee: float
    total: float
    amount_due: float
    item_count: int
    items: list[OrderItemResponse]
    notes: str | None = None
    allowed_transitions: list[str] = Field(default_factory=list)
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order, allowed: list[OrderStatus] | None = None) -> "OrderResponse":
        customer = order.customer
        return cls(
            id=order.id,
            order_number=order.order_number or "",
            customer_id=order.customer_id,
            full_name=customer.full_name if customer else "",
            phone=customer.phone if customer else "",
            address=customer.address if customer else "",
            governorate=customer.governorate if customer else "",
            status=order.status.value,
            payment_method=order.payment_method.value,
            payment_transaction_id=order.payment_transaction_id,
            products_subtotal=float(order.products_subtotal.amount),
            discount_code=order.discount_code,
            discount_amount=float(order.discount_amount.amount),
            shipping_fee=float(order.shipping_fee.amount),
            total=float(order.total.amount),
            amount_due=float(order.amount_due.amount),
            item_count=order.item_count,
            items=[OrderItemResponse.from_entity(item) for item in order.items],
            notes=order.notes,
            allowed_transitions=[status.value for status in allowed or []],
            version=order.version,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
