"""
List Orders Use Case

Paginated admin listing with optional status and payment method filters.
"""

from dataclasses import dataclass

from bakery.core.domain import ValidationException
from bakery.core.shared import Page, PageRequest
from bakery.domains.orders.application.ports import IOrderRepository
from bakery.domains.orders.domain import Order, OrderStatus, PaymentMethod


@dataclass
class ListOrdersRequest:
    page_number: int = 1
    page_size: int = 10
    status: str | int | None = None
    payment_method: str | int | None = None
    max_page_size: int = 100


class ListOrdersUseCase:
    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, request: ListOrdersRequest) -> Page[Order]:
        try:
            status = OrderStatus.parse(request.status) if request.status not in (None, "") else None
        except ValueError as e:
            raise ValidationException(str(e), field="status") from e
        try:
            payment_method = (
                PaymentMethod.parse(request.payment_method) if request.payment_method not in (None, "") else None
            )
        except ValueError as e:
            raise ValidationException(str(e), field="paymentMethod") from e

        page = PageRequest(request.page_number, request.page_size, request.max_page_size)
        return await self.order_repository.list_orders(page, status=status, payment_method=payment_method)
