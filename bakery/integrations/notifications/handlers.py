"""
Domain event handlers forwarding order activity to the admin webhook.

Delivery runs in background tasks so that a slow or unreachable webhook
never holds the request that produced the event.
"""

import asyncio
import logging

from bakery.config.settings import Settings, get_settings
from bakery.core.domain import DomainEvent, DomainEventPublisher
from bakery.domains.custom_orders.domain import CustomOrderStatusChanged, CustomOrderSubmitted
from bakery.domains.orders.domain import OrderPlaced, OrderStatusChanged

from .webhook_notifier import WebhookNotifier

logger = logging.getLogger(__name__)


def build_payload(event: DomainEvent) -> dict:
    """Webhook body: the fields admins read first, plus the full event."""
    data = event.to_dict()
    return {
        "event": event.event_type,
        "orderNumber": data.get("order_number", ""),
        "total": data.get("total", 0.0),
        "status": data.get("status", ""),
        "data": data,
    }


class OrderNotificationHandlers:
    """
    Example:
        ```python
        handlers = register_notification_handlers(notifier)
        await DomainEventPublisher.publish(event)  # returns before delivery
        await handlers.drain()                     # waits for pending deliveries
        ```
    """

    def __init__(self, notifier: WebhookNotifier):
        self.notifier = notifier
        self._pending: set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def on_order_event(self, event: DomainEvent) -> None:
        self.enqueue(build_payload(event))

    def enqueue(self, payload: dict) -> asyncio.Task:
        """Schedule delivery of `payload` and return immediately."""
        task = asyncio.create_task(self.notifier.send(payload))
        self._pending.add(task)
        task.add_done_callback(self._on_delivery_done)
        return task

    def _on_delivery_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            logger.warning("Notification delivery cancelled")
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Notification delivery crashed: {error}", exc_info=error)

    async def drain(self) -> None:
        """Wait for every scheduled delivery (used at shutdown)."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)


def create_notifier(settings: Settings | None = None) -> WebhookNotifier:
    settings = settings or get_settings()
    return WebhookNotifier(
        url=settings.NOTIFICATION_WEBHOOK_URL,
        retry_count=settings.NOTIFICATION_RETRY_COUNT,
        retry_delay=settings.NOTIFICATION_RETRY_DELAY,
        timeout=settings.NOTIFICATION_TIMEOUT,
    )


def register_notification_handlers(notifier: WebhookNotifier | None = None) -> OrderNotificationHandlers:
    """Subscribe the notification handlers to every order event."""
    handlers = OrderNotificationHandlers(notifier or create_notifier())
    for event_type in (OrderPlaced, OrderStatusChanged, CustomOrderSubmitted, CustomOrderStatusChanged):
        DomainEventPublisher.subscribe(event_type, handlers.on_order_event)

    target = handlers.notifier.url or "log only"
    logger.info(f"Notification handlers registered ({target})")
    return handlers
