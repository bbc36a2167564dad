"""
List Custom Orders Use Case
"""

from dataclasses import dataclass

from bakery.core.domain import ValidationException
from bakery.core.shared import Page, PageRequest
from bakery.domains.custom_orders.application.ports import ICustomOrderRepository
from bakery.domains.custom_orders.domain import CustomOrder, CustomOrderStatus


@dataclass
class ListCustomOrdersRequest:
    page_number: int = 1
    page_size: int = 10
    status: str | int | None = None
    max_page_size: int = 100


class ListCustomOrdersUseCase:
    def __init__(self, custom_order_repository: ICustomOrderRepository):
        self.custom_order_repository = custom_order_repository

    async def execute(self, request: ListCustomOrdersRequest) -> Page[CustomOrder]:
        try:
            status = CustomOrderStatus.parse(request.status) if request.status not in (None, "") else None
        except ValueError as e:
            raise ValidationException(str(e), field="status") from e
        page = PageRequest(request.page_number, request.page_size, request.max_page_size)
        return await self.custom_order_repository.list_custom_orders(page, status=status)
