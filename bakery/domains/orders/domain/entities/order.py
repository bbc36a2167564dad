"""
Order Entity for the Orders Domain

A placed merchandise order. Amounts are fixed once, at checkout; afterwards
the order only changes through status transitions.
"""

from dataclasses import dataclass, field
from uuid import UUID

from bakery.core.domain import AggregateRoot, Money, ValidationException

from ..events import OrderStatusChanged
from ..value_objects.order_status import OrderStatus, OrderStatusTransition, PaymentMethod


@dataclass
class OrderItem:
    """
    Line item with the product data captured at purchase time.
    """

    product_id: UUID
    product_name: str
    quantity: int
    unit_price: Money
    product_code: str | None = None
    size: str | None = None
    color: str | None = None

    def __post_init__(self):
        if self.quantity < 1:
            raise ValidationException("Quantity must be at least 1", field="quantity")

    @property
    def line_total(self) -> Money:
        return self.unit_price.multiply(self.quantity)


@dataclass
class CustomerContact:
    """Contact snapshot taken at checkout."""

    full_name: str
    phone: str
    address: str
    governorate: str


@dataclass
class Order(AggregateRoot[UUID]):
    """
    Order aggregate root.

    Use `Order.create` for new orders: it computes the subtotal and total
    exactly once. Status changes go through OrderStatusMachine.

    Example:
        ```python
        order = Order.create(
            customer=contact,
            items=[OrderItem(product_id=pid, product_name="Rose box", quantity=2, unit_price=Money.from_float(150))],
            payment_method=PaymentMethod.CASH,
            discount_amount=Money.from_float(30),
            shipping_fee=Money.from_float(50),
        )
        order.total       # EGP 270.00
        order.amount_due  # EGP 320.00
        ```
    """

    order_number: str | None = None
    customer_id: UUID | None = None
    customer: CustomerContact | None = None
    items: list[OrderItem] = field(default_factory=list)

    status: OrderStatus = OrderStatus.UNDER_REVIEW
    payment_method: PaymentMethod = PaymentMethod.CASH
    payment_transaction_id: str | None = None

    products_subtotal: Money = field(default_factory=Money.zero)
    discount_code_id: UUID | None = None
    discount_code: str | None = None
    discount_amount: Money = field(default_factory=Money.zero)
    shipping_fee: Money = field(default_factory=Money.zero)
    total: Money = field(default_factory=Money.zero)

    notes: str | None = None

    @classmethod
    def create(
        cls,
        customer: CustomerContact,
        items: list[OrderItem],
        payment_method: PaymentMethod,
        customer_id: UUID | None = None,
        discount_amount: Money | None = None,
        discount_code: str | None = None,
        discount_code_id: UUID | None = None,
        shipping_fee: Money | None = None,
        payment_transaction_id: str | None = None,
        notes: str | None = None,
    ) -> "Order":
        """Build a new order and fix its amounts."""
        if not items:
            raise ValidationException("An order needs at least one item", field="items")

        subtotal = Money.zero(items[0].unit_price.currency)
        for item in items:
            subtotal = subtotal.add(item.line_total)

        discount = discount_amount or Money.zero(subtotal.currency)
        if discount.amount > subtotal.amount:
            raise ValidationException("Discount cannot exceed the products subtotal", field="discount_amount")

        return cls(
            customer_id=customer_id,
            customer=customer,
            items=list(items),
            payment_method=payment_method,
            payment_transaction_id=payment_transaction_id,
            products_subtotal=subtotal,
            discount_code_id=discount_code_id,
            discount_code=discount_code,
            discount_amount=discount,
            shipping_fee=shipping_fee or Money.zero(subtotal.currency),
            total=subtotal.subtract(discount),
            notes=notes,
        )

    @property
    def amount_due(self) -> Money:
        """What the customer pays: total plus shipping."""
        return self.total.add(self.shipping_fee)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def apply_transition(self, transition: OrderStatusTransition) -> None:
        """
        Apply a transition already validated by OrderStatusMachine.
        """
        if transition.from_status != self.status:
            raise ValidationException(
                f"Transition starts at {transition.from_status.value} but order is {self.status.value}",
                field="status",
            )
        self.status = transition.to_status
        self.touch()
        self._record_event(
            OrderStatusChanged(
                order_id=self.id,
                order_number=self.order_number or "",
                total=self.total.amount,
                previous_status=transition.from_status.value,
                status=transition.to_status.value,
                is_rollback=transition.is_rollback,
            )
        )
