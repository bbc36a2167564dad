"""
Orders Domain Services
"""

from bakery.domains.orders.domain.services.order_status_machine import FORWARD_SEQUENCE, OrderStatusMachine

__all__ = ["OrderStatusMachine", "FORWARD_SEQUENCE"]
