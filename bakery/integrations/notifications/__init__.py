from .handlers import OrderNotificationHandlers, build_payload, create_notifier, register_notification_handlers
from .webhook_notifier import WebhookNotifier

__all__ = [
    "WebhookNotifier",
    "OrderNotificationHandlers",
    "build_payload",
    "create_notifier",
    "register_notification_handlers",
]
