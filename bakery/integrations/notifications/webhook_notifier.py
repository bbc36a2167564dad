"""
Admin notification webhook.

Single Responsibility: deliver one notification payload over HTTP, retrying
transient failures a fixed number of times.
"""

import logging

import httpx
from tenacity import AsyncRetrying, RetryError, retry_if_exception_type, stop_after_attempt, wait_fixed

logger = logging.getLogger(__name__)


class WebhookNotifier:
    """
    POSTs JSON payloads to the admin notification endpoint.

    Delivery never raises: the order it describes is already committed, so a
    failed delivery is logged and reported as False.
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        url: str | None,
        retry_count: int = 3,
        retry_delay: float = 1.0,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            url: Webhook endpoint; None disables delivery (payloads are only logged)
            retry_count: Total delivery attempts
            retry_delay: Seconds between attempts
            timeout: Per-request timeout in seconds
            client: Optional shared client (tests inject a MockTransport client)
        """
        self.url = url
        self.retry_count = max(1, retry_count)
        self.retry_delay = retry_delay
        self.timeout = timeout
        self._client = client

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    async def send(self, payload: dict) -> bool:
        if not self.enabled:
            logger.info(f"Notification (no webhook configured): {payload}")
            return False

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(httpx.HTTPError),
                stop=stop_after_attempt(self.retry_count),
                wait=wait_fixed(self.retry_delay),
                reraise=False,
            ):
                with attempt:
                    await self._post(payload)
        except RetryError as e:
            last_exception = e.last_attempt.exception()
            logger.error(
                f"Notification for {payload.get('orderNumber')} failed after {self.retry_count} attempts: "
                f"{last_exception}"
            )
            return False

        logger.debug(f"Notification delivered: {payload.get('event')} {payload.get('orderNumber')}")
        return True

    async def _post(self, payload: dict) -> None:
        if self._client is not None:
            response = await self._client.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            return

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(self.url, json=payload)
            response.raise_for_status()
