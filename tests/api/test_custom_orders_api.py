"""
API tests for the custom order book and the cake configuration pricing endpoints.
"""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from bakery.core.app_factory import create_app
from bakery.core.domain import Money
from bakery.domains.custom_orders.api import dependencies as custom_order_dependencies
from bakery.domains.custom_orders.application.use_cases import (
    DeleteCustomOrderUseCase,
    GetCustomOrderStatsUseCase,
    GetCustomOrderUseCase,
    GetOccasionPriceTableUseCase,
    ListCustomOrdersUseCase,
    ResolveCakePriceUseCase,
    SubmitCustomOrderUseCase,
    UpdateCustomOrderStatusUseCase,
)
from bakery.domains.custom_orders.domain import CustomOrderStatus, CustomOrderStatusMachine, PricingResolver
from tests.utils import make_custom_order, make_flavor, make_occasion, make_size

CUSTOM_ORDERS_URL = "/api/custom-orders"
CAKE_CONFIGURATION_URL = "/api/cake-configuration"


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def catalog(catalog_repository):
    large = catalog_repository.add_size(make_size("Large", default_price=220, display_order=2))
    small = catalog_repository.add_size(make_size("Small", default_price=150, display_order=1))
    birthday = catalog_repository.add_occasion(make_occasion("Birthday", overrides={large.id: 250}))
    chocolate = catalog_repository.add_flavor(make_flavor("Chocolate", additional_price=20))
    return {"large": large, "small": small, "birthday": birthday, "chocolate": chocolate}


@pytest.fixture
def client(custom_order_repository, catalog_repository) -> TestClient:
    machine = CustomOrderStatusMachine()
    resolver = PricingResolver()

    app = create_app()
    app.dependency_overrides.update(
        {
            custom_order_dependencies.get_custom_order_status_machine: lambda: machine,
            custom_order_dependencies.get_submit_custom_order_use_case: lambda: SubmitCustomOrderUseCase(
                custom_order_repository, catalog_repository, resolver, min_lead_days=2
            ),
            custom_order_dependencies.get_list_custom_orders_use_case: lambda: ListCustomOrdersUseCase(
                custom_order_repository
            ),
            custom_order_dependencies.get_custom_order_use_case: lambda: GetCustomOrderUseCase(
                custom_order_repository
            ),
            custom_order_dependencies.get_custom_order_stats_use_case: lambda: GetCustomOrderStatsUseCase(
                custom_order_repository
            ),
            custom_order_dependencies.get_update_custom_order_status_use_case: lambda: UpdateCustomOrderStatusUseCase(
                custom_order_repository, machine
            ),
            custom_order_dependencies.get_delete_custom_order_use_case: lambda: DeleteCustomOrderUseCase(
                custom_order_repository
            ),
            custom_order_dependencies.get_resolve_cake_price_use_case: lambda: ResolveCakePriceUseCase(
                catalog_repository, resolver
            ),
            custom_order_dependencies.get_occasion_price_table_use_case: lambda: GetOccasionPriceTableUseCase(
                catalog_repository, resolver
            ),
        }
    )
    return TestClient(app)


@pytest.fixture
def stored_custom_order(custom_order_repository):
    custom_order = make_custom_order()
    custom_order_repository.custom_orders[custom_order.id] = custom_order
    return custom_order


def submission_body(catalog, days_ahead: int = 5, **overrides) -> dict:
    body = {
        "customerName": "Sara Hany",
        "customerPhone": "01112223334",
        "occasionId": str(catalog["birthday"].id),
        "sizeId": str(catalog["large"].id),
        "flavorId": str(catalog["chocolate"].id),
        "pickupDate": (datetime.now(UTC).date() + timedelta(days=days_ahead)).isoformat(),
        "paymentMethod": "Instapay",
        "customText": "Happy birthday Omar",
    }
    body.update(overrides)
    return body


# ============================================================================
# Cake configuration (public)
# ============================================================================


@pytest.mark.api
def test_price_uses_occasion_override(client, catalog):
    response = client.get(
        f"{CAKE_CONFIGURATION_URL}/price",
        params={
            "occasionId": str(catalog["birthday"].id),
            "sizeId": str(catalog["large"].id),
            "flavorId": str(catalog["chocolate"].id),
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["basePrice"] == 250.0
    assert data["flavorPrice"] == 20.0
    assert data["price"] == 270.0
    assert data["isOverride"] is True
    assert data["currency"] == "EGP"


@pytest.mark.api
def test_price_falls_back_to_size_default(client, catalog):
    response = client.get(
        f"{CAKE_CONFIGURATION_URL}/price",
        params={
            "occasionId": str(catalog["birthday"].id),
            "sizeId": str(catalog["small"].id),
            "flavorId": str(catalog["chocolate"].id),
        },
    )

    assert response.json()["price"] == 170.0
    assert response.json()["isOverride"] is False


@pytest.mark.api
def test_price_for_unknown_size(client, catalog):
    response = client.get(
        f"{CAKE_CONFIGURATION_URL}/price",
        params={
            "occasionId": str(catalog["birthday"].id),
            "sizeId": str(uuid4()),
            "flavorId": str(catalog["chocolate"].id),
        },
    )

    assert response.status_code == 404


@pytest.mark.api
def test_occasion_sizes(client, catalog):
    response = client.get(f"{CAKE_CONFIGURATION_URL}/occasions/{catalog['birthday'].id}/sizes")

    assert response.status_code == 200
    sizes = response.json()["sizes"]
    assert [(s["name"], s["price"], s["isOverride"]) for s in sizes] == [
        ("Small", 150.0, False),
        ("Large", 250.0, True),
    ]


# ============================================================================
# Submission
# ============================================================================


@pytest.mark.api
def test_submit_custom_order(client, catalog, customer_headers):
    response = client.post(CUSTOM_ORDERS_URL, json=submission_body(catalog), headers=customer_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["orderNumber"] == "CK-000001"
    assert data["status"] == "Pending"
    assert data["estimatedPrice"] == 270.0
    assert data["finalPrice"] is None
    assert data["price"] == 270.0
    assert data["paymentMethod"] == "Instapay"
    assert data["userId"] == "6f1c2f9e-3d4b-4a8e-9c61-1f2e3d4c5b6a"
    assert len(data["allowedStatuses"]) == 6


@pytest.mark.api
def test_submit_inside_lead_time(client, catalog):
    response = client.post(CUSTOM_ORDERS_URL, json=submission_body(catalog, days_ahead=1))

    assert response.status_code == 400
    assert response.json()["details"]["field"] == "pickupDate"


@pytest.mark.api
def test_submit_with_malformed_date(client, catalog):
    response = client.post(CUSTOM_ORDERS_URL, json=submission_body(catalog, pickupDate="next friday"))

    assert response.status_code == 422


# ============================================================================
# Admin order book
# ============================================================================


@pytest.mark.api
def test_order_book_requires_admin(client, customer_headers):
    assert client.get(CUSTOM_ORDERS_URL).status_code == 401
    assert client.get(CUSTOM_ORDERS_URL, headers=customer_headers).status_code == 403


@pytest.mark.api
def test_list_custom_orders(client, admin_headers, stored_custom_order):
    response = client.get(CUSTOM_ORDERS_URL, params={"status": "Pending"}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["totalItems"] == 1
    assert response.json()["items"][0]["orderNumber"] == "CK-000001"


@pytest.mark.api
def test_set_status_with_final_price(client, admin_headers, stored_custom_order):
    response = client.put(
        f"{CUSTOM_ORDERS_URL}/{stored_custom_order.id}/status",
        json={"status": "Ready", "finalPrice": 275, "adminNotes": "Extra roses", "expectedVersion": 0},
        headers=admin_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "Ready"
    assert data["finalPrice"] == 275.0
    assert data["price"] == 275.0
    assert data["estimatedPrice"] == 270.0
    assert data["adminNotes"] == "Extra roses"
    assert data["version"] == 1


@pytest.mark.api
def test_status_can_move_backwards(client, admin_headers, custom_order_repository):
    custom_order = make_custom_order(status=CustomOrderStatus.READY)
    custom_order_repository.custom_orders[custom_order.id] = custom_order

    response = client.put(
        f"{CUSTOM_ORDERS_URL}/{custom_order.id}/status", json={"status": "Confirmed"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["status"] == "Confirmed"


@pytest.mark.api
def test_negative_final_price_is_rejected(client, admin_headers, stored_custom_order, custom_order_repository):
    response = client.put(
        f"{CUSTOM_ORDERS_URL}/{stored_custom_order.id}/status",
        json={"status": "Ready", "finalPrice": -1},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["details"]["field"] == "finalPrice"
    assert custom_order_repository.custom_orders[stored_custom_order.id].status is CustomOrderStatus.PENDING


@pytest.mark.api
def test_unknown_status_is_rejected(client, admin_headers, stored_custom_order):
    response = client.put(
        f"{CUSTOM_ORDERS_URL}/{stored_custom_order.id}/status", json={"status": "Baking"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["details"]["field"] == "status"


@pytest.mark.api
def test_boolean_status_is_rejected(client, admin_headers, stored_custom_order, custom_order_repository):
    response = client.put(
        f"{CUSTOM_ORDERS_URL}/{stored_custom_order.id}/status", json={"status": True}, headers=admin_headers
    )

    assert response.status_code == 422
    assert custom_order_repository.custom_orders[stored_custom_order.id].status is CustomOrderStatus.PENDING


@pytest.mark.api
def test_stats(client, admin_headers, custom_order_repository):
    completed = make_custom_order(status=CustomOrderStatus.COMPLETED)
    completed.final_price = Money.from_float(300)
    custom_order_repository.custom_orders[completed.id] = completed

    response = client.get(f"{CUSTOM_ORDERS_URL}/stats", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["totalOrders"] == 1
    assert data["completedOrders"] == 1
    assert data["totalRevenue"] == 300.0
    assert data["mostPopularOccasion"] == "Birthday"


@pytest.mark.api
def test_delete_custom_order(client, admin_headers, stored_custom_order):
    url = f"{CUSTOM_ORDERS_URL}/{stored_custom_order.id}"

    assert client.delete(url, headers=admin_headers).status_code == 204
    assert client.get(url, headers=admin_headers).status_code == 404
