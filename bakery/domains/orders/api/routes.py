"""
Orders API Routes

Checkout is open to guests and signed-in customers; everything else is admin.
"""

from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status
from pydantic import StrictInt, StrictStr

from bakery.api.dependencies import get_optional_principal, require_admin
from bakery.api.schemas import PageResponse
from bakery.config.settings import get_settings
from bakery.core.domain import ValidationException
from bakery.domains.orders.api.dependencies import (
    get_customer_orders_use_case,
    get_delete_order_use_case,
    get_list_orders_use_case,
    get_order_by_number_use_case,
    get_order_status_machine,
    get_order_use_case,
    get_place_order_use_case,
    get_rollback_order_status_use_case,
    get_update_order_status_use_case,
)
from bakery.domains.orders.api.schemas import (
    CreateOrderRequest,
    OrderResponse,
    OrderStatusRollbackRequest,
    OrderStatusUpdateRequest,
)
from bakery.domains.orders.application.use_cases import (
    DeleteOrderUseCase,
    GetCustomerOrdersUseCase,
    GetOrderByNumberUseCase,
    GetOrderUseCase,
    ListOrdersRequest,
    ListOrdersUseCase,
    OrderItemInput,
    OrderStatusChangeResponse,
    PlaceOrderRequest,
    PlaceOrderUseCase,
    RollbackOrderStatusRequest,
    RollbackOrderStatusUseCase,
    UpdateOrderStatusRequest,
    UpdateOrderStatusUseCase,
)
from bakery.domains.orders.domain import OrderStatusMachine, PaymentMethod
from bakery.services.token_service import Principal

settings = get_settings()

router = APIRouter(prefix="/orders", tags=["Orders"])


def _updated_order_response(result: OrderStatusChangeResponse) -> OrderResponse:
    return OrderResponse.from_entity(result.order, result.allowed_targets)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def place_order(
    request: CreateOrderRequest,
    principal: Principal | None = Depends(get_optional_principal),  # noqa: B008
    use_case: PlaceOrderUseCase = Depends(get_place_order_use_case),  # noqa: B008
    machine: OrderStatusMachine = Depends(get_order_status_machine),  # noqa: B008
):
    """Checkout: store the order with its discount and shipping fee."""
    try:
        payment_method = PaymentMethod.parse(request.payment_method)
    except ValueError as e:
        raise ValidationException(str(e), field="paymentMethod") from e

    order = await use_case.execute(
        PlaceOrderRequest(
            full_name=request.full_name,
            phone=request.phone,
            address=request.address,
            governorate=request.governorate,
            items=[
                OrderItemInput(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    product_code=item.product_code,
                    size=item.size,
                    color=item.color,
                )
                for item in request.items
            ],
            payment_method=payment_method,
            customer_id=principal.customer_id if principal else None,
            discount_code=request.discount_code,
            payment_transaction_id=request.payment_transaction_id,
            notes=request.notes,
        )
    )
    return OrderResponse.from_entity(order, machine.allowed_targets(order.status))


@router.get("", response_model=PageResponse[OrderResponse])
async def list_orders(
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize"),
    status_filter: str | None = Query(None, alias="status"),
    payment_method: str | None = Query(None, alias="paymentMethod"),
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case),  # noqa: B008
    machine: OrderStatusMachine = Depends(get_order_status_machine),  # noqa: B008
):
    """Newest first."""
    page = await use_case.execute(
        ListOrdersRequest(
            page_number=page_number,
            page_size=page_size,
            status=status_filter,
            payment_method=payment_method,
            max_page_size=settings.MAX_PAGE_SIZE,
        )
    )
    return PageResponse[OrderResponse].from_page(
        page, lambda order: OrderResponse.from_entity(order, machine.allowed_targets(order.status))
    )


@router.get("/number/{order_number}", response_model=OrderResponse)
async def get_order_by_number(
    order_number: str,
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: GetOrderByNumberUseCase = Depends(get_order_by_number_use_case),  # noqa: B008
    machine: OrderStatusMachine = Depends(get_order_status_machine),  # noqa: B008
):
    order = await use_case.execute(order_number)
    return OrderResponse.from_entity(order, machine.allowed_targets(order.status))


@router.get("/customer/{customer_id}", response_model=list[OrderResponse])
async def get_customer_orders(
    customer_id: UUID,
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: GetCustomerOrdersUseCase = Depends(get_customer_orders_use_case),  # noqa: B008
    machine: OrderStatusMachine = Depends(get_order_status_machine),  # noqa: B008
):
    orders = await use_case.execute(customer_id)
    return [OrderResponse.from_entity(order, machine.allowed_targets(order.status)) for order in orders]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: UUID,
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: GetOrderUseCase = Depends(get_order_use_case),  # noqa: B008
    machine: OrderStatusMachine = Depends(get_order_status_machine),  # noqa: B008
):
    order = await use_case.execute(order_id)
    return OrderResponse.from_entity(order, machine.allowed_targets(order.status))


@router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: UUID,
    body: OrderStatusUpdateRequest | StrictInt | StrictStr = Body(...),  # noqa: B008
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),  # noqa: B008
):
    """
    Advance one step or cancel.

    The body is either the target status (name or legacy code) or
    `{"status": ..., "expectedVersion": ...}`. Booleans are rejected.
    Returns the updated order.
    """
    if isinstance(body, OrderStatusUpdateRequest):
        target, expected_version = body.status, body.expected_version
    else:
        target, expected_version = body, None

    result = await use_case.execute(
        UpdateOrderStatusRequest(order_id=order_id, status=target, expected_version=expected_version)
    )
    return _updated_order_response(result)


@router.post("/{order_id}/status/rollback", response_model=OrderResponse)
async def rollback_order_status(
    order_id: UUID,
    body: OrderStatusRollbackRequest | None = Body(None),  # noqa: B008
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: RollbackOrderStatusUseCase = Depends(get_rollback_order_status_use_case),  # noqa: B008
):
    """Step back one status (Cancelled returns to UnderReview)."""
    result = await use_case.execute(
        RollbackOrderStatusRequest(order_id=order_id, expected_version=body.expected_version if body else None)
    )
    return _updated_order_response(result)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: UUID,
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: DeleteOrderUseCase = Depends(get_delete_order_use_case),  # noqa: B008
):
    await use_case.execute(order_id)
