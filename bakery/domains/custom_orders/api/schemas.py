"""
Custom Orders API Schemas
"""

from datetime import date, datetime, time
from typing import Any
from uuid import UUID

from pydantic import Field, StrictInt, StrictStr

from bakery.api.schemas import CamelModel
from bakery.domains.custom_orders.application.ports import CustomOrderStats
from bakery.domains.custom_orders.application.use_cases import OccasionPriceTable, ResolveCakePriceResponse
from bakery.domains.custom_orders.domain import CustomOrder, CustomOrderStatus


class SubmitCustomOrderBody(CamelModel):
    customer_name: str = Field(..., max_length=200)
    customer_phone: str = Field(..., max_length=30)
    occasion_id: UUID
    size_id: UUID
    flavor_id: UUID
    pickup_date: date
    pickup_time: time | None = None
    payment_method: StrictStr | StrictInt = "Cash"
    custom_text: str | None = Field(None, max_length=500)
    design_image_url: str | None = None
    notes: str | None = None


class UpdateCustomOrderStatusBody(CamelModel):
    """
    `finalPrice` is checked by the status machine so that a bad price is a
    400 like any other rejected update.
    """

    status: StrictStr | StrictInt
    final_price: Any = None
    admin_notes: str | None = None
    expected_version: int | None = None


class CustomOrderResponse(CamelModel):
    id: UUID
    order_number: str
    user_id: UUID | None = None
    customer_name: str
    customer_phone: str
    occasion_id: UUID | None = None
    occasion_name: str | None = None
    size_id: UUID | None = None
    size_name: str | None = None
    flavor_id: UUID | None = None
    flavor_name: str | None = None
    custom_text: str | None = None
    design_image_url: str | None = None
    pickup_date: date | None = None
    pickup_time: time | None = None
    notes: str | None = None
    payment_method: str
    status: str
    estimated_price: float
    final_price: float | None = None
    price: float
    admin_notes: str | None = None
    allowed_statuses: list[str] = Field(default_factory=list)
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls, custom_order: CustomOrder, allowed: list[CustomOrderStatus] | None = None
    ) -> "CustomOrderResponse":
        selection = custom_order.selection
        return cls(
            id=custom_order.id,
            order_number=custom_order.order_number or "",
            user_id=custom_order.user_id,
            customer_name=custom_order.customer_name,
            customer_phone=custom_order.customer_phone,
            occasion_id=selection.occasion_id if selection else None,
            occasion_name=selection.occasion_name if selection else None,
            size_id=selection.size_id if selection else None,
            size_name=selection.size_name if selection else None,
            flavor_id=selection.flavor_id if selection else None,
            flavor_name=selection.flavor_name if selection else None,
            custom_text=custom_order.custom_text,
            design_image_url=custom_order.design_image_url,
            pickup_date=custom_order.pickup_date,
            pickup_time=custom_order.pickup_time,
            notes=custom_order.notes,
            payment_method=custom_order.payment_method.value,
            status=custom_order.status.value,
            estimated_price=float(custom_order.estimated_price.amount),
            final_price=float(custom_order.final_price.amount) if custom_order.final_price else None,
            price=float(custom_order.displayed_price.amount),
            admin_notes=custom_order.admin_notes,
            allowed_statuses=[s.value for s in allowed or []],
            version=custom_order.version,
            created_at=custom_order.created_at,
            updated_at=custom_order.updated_at,
        )


class CustomOrderStatsResponse(CamelModel):
    total_orders: int
    pending_orders: int
    in_progress_orders: int
    completed_orders: int
    cancelled_orders: int
    today_orders: int
    this_month_orders: int
    total_revenue: float
    this_month_revenue: float
    most_popular_occasion: str | None = None
    most_popular_size: str | None = None
    most_popular_flavor: str | None = None
    status_counts: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_stats(cls, stats: CustomOrderStats) -> "CustomOrderStatsResponse":
        return cls(
            total_orders=stats.total_orders,
            pending_orders=stats.pending_orders,
            in_progress_orders=stats.in_progress_orders,
            completed_orders=stats.completed_orders,
            cancelled_orders=stats.cancelled_orders,
            today_orders=stats.today_orders,
            this_month_orders=stats.this_month_orders,
            total_revenue=float(stats.total_revenue),
            this_month_revenue=float(stats.this_month_revenue),
            most_popular_occasion=stats.most_popular_occasion,
            most_popular_size=stats.most_popular_size,
            most_popular_flavor=stats.most_popular_flavor,
            status_counts=dict(stats.status_counts),
        )


class CakePriceResponse(CamelModel):
    occasion_id: UUID
    occasion_name: str
    size_id: UUID
    size_name: str
    flavor_id: UUID
    flavor_name: str
    base_price: float
    flavor_price: float
    price: float
    is_override: bool
    currency: str

    @classmethod
    def from_result(cls, result: ResolveCakePriceResponse) -> "CakePriceResponse":
        quote = result.quote
        return cls(
            occasion_id=result.occasion.id,
            occasion_name=result.occasion.name,
            size_id=result.size.id,
            size_name=result.size.name,
            flavor_id=result.flavor.id,
            flavor_name=result.flavor.name,
            base_price=float(quote.base_price.amount),
            flavor_price=float(quote.flavor_price.amount),
            price=float(quote.price.amount),
            is_override=quote.is_override,
            currency=quote.price.currency,
        )


class SizePriceResponse(CamelModel):
    size_id: UUID
    name: str
    name_ar: str | None = None
    persons_count: str | None = None
    display_order: int
    price: float
    is_override: bool


class OccasionSizesResponse(CamelModel):
    occasion_id: UUID
    occasion_name: str
    occasion_name_ar: str | None = None
    sizes: list[SizePriceResponse]

    @classmethod
    def from_table(cls, table: OccasionPriceTable) -> "OccasionSizesResponse":
        return cls(
            occasion_id=table.occasion.id,
            occasion_name=table.occasion.name,
            occasion_name_ar=table.occasion.name_ar,
            sizes=[
                SizePriceResponse(
                    size_id=row.size.id,
                    name=row.size.name,
                    name_ar=row.size.name_ar,
                    persons_count=row.size.persons_count,
                    display_order=row.size.display_order,
                    price=float(row.price.amount),
                    is_override=row.is_override,
                )
                for row in table.sizes
            ],
        )
