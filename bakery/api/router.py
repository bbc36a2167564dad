"""
Main API router: every domain router under the API prefix.
"""

from fastapi import APIRouter

from bakery.domains.custom_orders.api import cake_configuration_router
from bakery.domains.custom_orders.api import router as custom_orders_router
from bakery.domains.orders.api import router as orders_router

api_router = APIRouter()

api_router.include_router(orders_router)
api_router.include_router(custom_orders_router)
api_router.include_router(cake_configuration_router)
