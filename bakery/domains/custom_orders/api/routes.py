"""
Custom Orders API Routes

`/custom-orders` is the order book (submission is open, the rest is admin);
`/cake-configuration` is the public pricing surface of the cake wizard.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from bakery.api.dependencies import get_optional_principal, require_admin
from bakery.api.schemas import PageResponse
from bakery.config.settings import get_settings
from bakery.core.domain import ValidationException
from bakery.domains.custom_orders.api.dependencies import (
    get_custom_order_stats_use_case,
    get_custom_order_status_machine,
    get_custom_order_use_case,
    get_delete_custom_order_use_case,
    get_list_custom_orders_use_case,
    get_occasion_price_table_use_case,
    get_resolve_cake_price_use_case,
    get_submit_custom_order_use_case,
    get_update_custom_order_status_use_case,
)
from bakery.domains.custom_orders.api.schemas import (
    CakePriceResponse,
    CustomOrderResponse,
    CustomOrderStatsResponse,
    OccasionSizesResponse,
    SubmitCustomOrderBody,
    UpdateCustomOrderStatusBody,
)
from bakery.domains.custom_orders.application.use_cases import (
    DeleteCustomOrderUseCase,
    GetCustomOrderStatsUseCase,
    GetCustomOrderUseCase,
    GetOccasionPriceTableUseCase,
    ListCustomOrdersRequest,
    ListCustomOrdersUseCase,
    ResolveCakePriceRequest,
    ResolveCakePriceUseCase,
    SubmitCustomOrderRequest,
    SubmitCustomOrderUseCase,
    UpdateCustomOrderStatusRequest,
    UpdateCustomOrderStatusUseCase,
)
from bakery.domains.custom_orders.domain import CustomOrderPaymentMethod, CustomOrderStatusMachine
from bakery.services.token_service import Principal

settings = get_settings()

router = APIRouter(prefix="/custom-orders", tags=["Custom Orders"])
cake_configuration_router = APIRouter(prefix="/cake-configuration", tags=["Cake Configuration"])


@router.post("", response_model=CustomOrderResponse, status_code=status.HTTP_201_CREATED)
async def submit_custom_order(
    body: SubmitCustomOrderBody,
    principal: Principal | None = Depends(get_optional_principal),  # noqa: B008
    use_case: SubmitCustomOrderUseCase = Depends(get_submit_custom_order_use_case),  # noqa: B008
    machine: CustomOrderStatusMachine = Depends(get_custom_order_status_machine),  # noqa: B008
):
    try:
        payment_method = CustomOrderPaymentMethod.parse(body.payment_method)
    except ValueError as e:
        raise ValidationException(str(e), field="paymentMethod") from e

    custom_order = await use_case.execute(
        SubmitCustomOrderRequest(
            customer_name=body.customer_name,
            customer_phone=body.customer_phone,
            occasion_id=body.occasion_id,
            size_id=body.size_id,
            flavor_id=body.flavor_id,
            pickup_date=body.pickup_date,
            pickup_time=body.pickup_time,
            payment_method=payment_method,
            custom_text=body.custom_text,
            design_image_url=body.design_image_url,
            notes=body.notes,
            user_id=principal.customer_id if principal else None,
        )
    )
    return CustomOrderResponse.from_entity(custom_order, machine.allowed_targets(custom_order.status))


@router.get("", response_model=PageResponse[CustomOrderResponse])
async def list_custom_orders(
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize"),
    status_filter: str | None = Query(None, alias="status"),
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: ListCustomOrdersUseCase = Depends(get_list_custom_orders_use_case),  # noqa: B008
    machine: CustomOrderStatusMachine = Depends(get_custom_order_status_machine),  # noqa: B008
):
    page = await use_case.execute(
        ListCustomOrdersRequest(
            page_number=page_number,
            page_size=page_size,
            status=status_filter,
            max_page_size=settings.MAX_PAGE_SIZE,
        )
    )
    return PageResponse[CustomOrderResponse].from_page(
        page, lambda order: CustomOrderResponse.from_entity(order, machine.allowed_targets(order.status))
    )


@router.get("/stats", response_model=CustomOrderStatsResponse)
async def get_custom_order_stats(
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: GetCustomOrderStatsUseCase = Depends(get_custom_order_stats_use_case),  # noqa: B008
):
    return CustomOrderStatsResponse.from_stats(await use_case.execute())


@router.get("/{custom_order_id}", response_model=CustomOrderResponse)
async def get_custom_order(
    custom_order_id: UUID,
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: GetCustomOrderUseCase = Depends(get_custom_order_use_case),  # noqa: B008
    machine: CustomOrderStatusMachine = Depends(get_custom_order_status_machine),  # noqa: B008
):
    custom_order = await use_case.execute(custom_order_id)
    return CustomOrderResponse.from_entity(custom_order, machine.allowed_targets(custom_order.status))


@router.put("/{custom_order_id}/status", response_model=CustomOrderResponse)
async def update_custom_order_status(
    custom_order_id: UUID,
    body: UpdateCustomOrderStatusBody,
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: UpdateCustomOrderStatusUseCase = Depends(get_update_custom_order_status_use_case),  # noqa: B008
    machine: CustomOrderStatusMachine = Depends(get_custom_order_status_machine),  # noqa: B008
):
    """Set any status, optionally with a final price and admin notes ("" clears the notes)."""
    custom_order = await use_case.execute(
        UpdateCustomOrderStatusRequest(
            custom_order_id=custom_order_id,
            status=body.status,
            final_price=body.final_price,
            admin_notes=body.admin_notes,
            expected_version=body.expected_version,
        )
    )
    return CustomOrderResponse.from_entity(custom_order, machine.allowed_targets(custom_order.status))


@router.delete("/{custom_order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_custom_order(
    custom_order_id: UUID,
    _admin: Principal = Depends(require_admin),  # noqa: B008
    use_case: DeleteCustomOrderUseCase = Depends(get_delete_custom_order_use_case),  # noqa: B008
):
    await use_case.execute(custom_order_id)


@cake_configuration_router.get("/price", response_model=CakePriceResponse)
async def resolve_cake_price(
    occasion_id: UUID = Query(..., alias="occasionId"),
    size_id: UUID = Query(..., alias="sizeId"),
    flavor_id: UUID = Query(..., alias="flavorId"),
    use_case: ResolveCakePriceUseCase = Depends(get_resolve_cake_price_use_case),  # noqa: B008
):
    """Price of a cake as the wizard shows it; always read fresh from the catalog."""
    result = await use_case.execute(
        ResolveCakePriceRequest(occasion_id=occasion_id, size_id=size_id, flavor_id=flavor_id)
    )
    return CakePriceResponse.from_result(result)


@cake_configuration_router.get("/occasions/{occasion_id}/sizes", response_model=OccasionSizesResponse)
async def get_occasion_sizes(
    occasion_id: UUID,
    use_case: GetOccasionPriceTableUseCase = Depends(get_occasion_price_table_use_case),  # noqa: B008
):
    return OccasionSizesResponse.from_table(await use_case.execute(occasion_id))
