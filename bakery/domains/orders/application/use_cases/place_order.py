"""
Place Order Use Case

Checkout: captures line items, applies a discount code, adds the
governorate's shipping fee and stores the order.
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from bakery.core.domain import DomainEventPublisher, Money, ValidationException
from bakery.domains.discounts.application.services import DiscountLedger
from bakery.domains.orders.application.ports import IOrderRepository, IShippingFeeRepository
from bakery.domains.orders.domain import CustomerContact, Order, OrderItem, OrderPlaced, PaymentMethod

logger = logging.getLogger(__name__)


@dataclass
class OrderItemInput:
    """Line item as sent by the storefront, price already captured from the catalog."""

    product_id: UUID
    product_name: str
    quantity: int
    unit_price: Decimal
    product_code: str | None = None
    size: str | None = None
    color: str | None = None


@dataclass
class PlaceOrderRequest:
    full_name: str
    phone: str
    address: str
    governorate: str
    items: list[OrderItemInput] = field(default_factory=list)
    payment_method: PaymentMethod = PaymentMethod.CASH
    customer_id: UUID | None = None
    discount_code: str | None = None
    payment_transaction_id: str | None = None
    notes: str | None = None
    now: datetime | None = None


class PlaceOrderUseCase:
    """
    Use Case: Place Order

    Responsibilities:
    - Build the line items and products subtotal
    - Look up the active shipping fee of the governorate
    - Redeem the discount code (validate then take a usage slot)
    - Persist the order; the usage slot is committed with it or not at all
    - Announce the new order
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        shipping_fee_repository: IShippingFeeRepository,
        discount_ledger: DiscountLedger,
        currency: str = "EGP",
    ):
        self.order_repository = order_repository
        self.shipping_fee_repository = shipping_fee_repository
        self.discount_ledger = discount_ledger
        self.currency = currency

    async def execute(self, request: PlaceOrderRequest) -> Order:
        items = self._build_items(request.items)
        subtotal = Money.zero(self.currency)
        for item in items:
            subtotal = subtotal.add(item.line_total)

        shipping_fee = await self._shipping_fee_for(request.governorate)

        discount_amount = Money.zero(self.currency)
        discount_code_id = None
        discount_code = None
        if request.discount_code and request.discount_code.strip():
            code, result = await self.discount_ledger.redeem(
                request.discount_code,
                subtotal,
                request.now or datetime.now(UTC),
            )
            discount_amount = result.discount_amount
            discount_code_id = code.id
            discount_code = code.code

        order = Order.create(
            customer=CustomerContact(
                full_name=request.full_name.strip(),
                phone=request.phone.strip(),
                address=request.address.strip(),
                governorate=request.governorate.strip(),
            ),
            items=items,
            payment_method=request.payment_method,
            customer_id=request.customer_id,
            discount_amount=discount_amount,
            discount_code=discount_code,
            discount_code_id=discount_code_id,
            shipping_fee=shipping_fee,
            payment_transaction_id=request.payment_transaction_id,
            notes=request.notes,
        )

        created = await self.order_repository.create(order)
        logger.info(
            f"Order placed: {created.order_number} total={created.total} "
            f"discount={created.discount_amount} shipping={created.shipping_fee}"
        )

        await DomainEventPublisher.publish(
            OrderPlaced(
                order_id=created.id,
                order_number=created.order_number or "",
                total=created.total.amount,
                amount_due=created.amount_due.amount,
                status=created.status.value,
                discount_code=created.discount_code,
            )
        )
        return created

    def _build_items(self, inputs: list[OrderItemInput]) -> list[OrderItem]:
        if not inputs:
            raise ValidationException("An order needs at least one item", field="items")
        items = []
        for line in inputs:
            if line.unit_price is None or Decimal(line.unit_price) < 0:
                raise ValidationException("Unit price cannot be negative", field="unitPrice")
            items.append(
                OrderItem(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=Money.from_float(line.unit_price, self.currency),
                    product_code=line.product_code,
                    size=line.size,
                    color=line.color,
                )
            )
        return items

    async def _shipping_fee_for(self, governorate: str) -> Money:
        fee = await self.shipping_fee_repository.get_by_governorate(governorate.strip())
        if fee is None or not fee.is_active:
            raise ValidationException(f"No delivery available to {governorate}", field="governorate")
        return fee.fee
