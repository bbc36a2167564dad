"""
Submit Custom Order Use Case

Last step of the cake wizard: checks the pickup lead time, prices the cake
with PricingResolver and stores the order as Pending.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from uuid import UUID

from bakery.core.domain import DomainEventPublisher, ValidationException
from bakery.domains.custom_orders.application.ports import ICakeCatalogRepository, ICustomOrderRepository
from bakery.domains.custom_orders.domain import (
    CakeSelection,
    CustomOrder,
    CustomOrderPaymentMethod,
    CustomOrderSubmitted,
    PricingResolver,
)

from .catalog_lookup import load_selection

logger = logging.getLogger(__name__)


@dataclass
class SubmitCustomOrderRequest:
    customer_name: str
    customer_phone: str
    occasion_id: UUID
    size_id: UUID
    flavor_id: UUID
    pickup_date: date
    pickup_time: time | None = None
    payment_method: CustomOrderPaymentMethod = CustomOrderPaymentMethod.CASH
    custom_text: str | None = None
    design_image_url: str | None = None
    notes: str | None = None
    user_id: UUID | None = None
    now: datetime | None = None


class SubmitCustomOrderUseCase:
    """
    Use Case: Submit Custom Order

    The lead time is only checked here; later updates never re-validate it.
    """

    def __init__(
        self,
        custom_order_repository: ICustomOrderRepository,
        catalog_repository: ICakeCatalogRepository,
        resolver: PricingResolver,
        min_lead_days: int = 2,
    ):
        self.custom_order_repository = custom_order_repository
        self.catalog_repository = catalog_repository
        self.resolver = resolver
        self.min_lead_days = min_lead_days

    def earliest_pickup_date(self, now: datetime) -> date:
        return now.date() + timedelta(days=self.min_lead_days)

    async def execute(self, request: SubmitCustomOrderRequest) -> CustomOrder:
        now = request.now or datetime.now(UTC)
        self._validate(request, now)

        occasion, size, flavor = await load_selection(
            self.catalog_repository, request.occasion_id, request.size_id, request.flavor_id
        )
        for kind, item in (("Occasion", occasion), ("Size", size), ("Flavor", flavor)):
            if not item.is_active:
                raise ValidationException(f"{kind} '{item.name}' is not available", field=kind.lower() + "Id")

        custom_order = CustomOrder(
            user_id=request.user_id,
            customer_name=request.customer_name.strip(),
            customer_phone=request.customer_phone.strip(),
            selection=CakeSelection(
                occasion_id=occasion.id,
                size_id=size.id,
                flavor_id=flavor.id,
                occasion_name=occasion.name,
                size_name=size.name,
                flavor_name=flavor.name,
            ),
            custom_text=request.custom_text,
            design_image_url=request.design_image_url,
            pickup_date=request.pickup_date,
            pickup_time=request.pickup_time,
            notes=request.notes,
            payment_method=request.payment_method,
            estimated_price=self.resolver.resolve(occasion, size, flavor),
        )

        created = await self.custom_order_repository.create(custom_order)
        logger.info(f"Custom order submitted: {created.order_number} estimate={created.estimated_price}")

        await DomainEventPublisher.publish(
            CustomOrderSubmitted(
                custom_order_id=created.id,
                order_number=created.order_number or "",
                total=created.estimated_price.amount,
                status=created.status.value,
                pickup_date=created.pickup_date.isoformat() if created.pickup_date else "",
            )
        )
        return created

    def _validate(self, request: SubmitCustomOrderRequest, now: datetime) -> None:
        if not request.customer_name or not request.customer_name.strip():
            raise ValidationException("Customer name is required", field="customerName")
        if not request.customer_phone or not request.customer_phone.strip():
            raise ValidationException("Customer phone is required", field="customerPhone")
        earliest = self.earliest_pickup_date(now)
        if request.pickup_date < earliest:
            raise ValidationException(
                f"Pickup date must be on or after {earliest.isoformat()}",
                field="pickupDate",
                details={"earliest_pickup_date": earliest.isoformat()},
            )
