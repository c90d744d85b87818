"""Structured notifications for indexers and dashboards.

Payloads are built from an operation's inputs and resulting state only.
Delivery (webhooks) happens off the request path in
app.workers.notification_worker.
"""
from __future__ import annotations
import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Iterable, Optional, Union

import httpx

logger = logging.getLogger(__name__)

ASSET_REGISTERED = "AssetRegistered"
ASSET_STATUS_UPDATED = "AssetStatusUpdated"
TRANSFER_RECORDED = "TransferRecorded"
HOLDER_COUNT_UPDATED = "HolderCountUpdated"
SNAPSHOT_CREATED = "SnapshotCreated"
PRIVILEGE_TRANSFERRED = "PrivilegeTransferred"


@dataclass(frozen=True)
class LedgerNotification:
    event: str
    key: Union[str, int]
    timestamp: datetime
    fields: dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> dict:
        return {
            "event": self.event,
            "key": self.key,
            "fields": dict(self.fields),
            "timestamp": self.timestamp.isoformat(),
        }


Subscriber = Callable[[LedgerNotification], None]


class Notifier:
    """Fan committed notifications out to in-process subscribers and webhooks."""

    def __init__(self, webhook_urls: Iterable[str] = ()):
        self.webhook_urls = list(webhook_urls)
        self._subscribers: list[Subscriber] = []
        self.queue: Optional[asyncio.Queue[LedgerNotification]] = (
            asyncio.Queue() if self.webhook_urls else None
        )

    def subscribe(self, callback: Subscriber) -> None:
        self._subscribers.append(callback)

    def publish(self, notifications: Iterable[LedgerNotification]) -> None:
        for notification in notifications:
            logger.debug(f"notify {notification.event} key={notification.key}")
            for callback in self._subscribers:
                try:
                    callback(notification)
                except Exception:
                    # State is already committed; a broken subscriber must not
                    # turn a successful operation into an error for the caller.
                    logger.exception(f"Notification subscriber failed for {notification.event}")
            if self.queue is not None:
                self.queue.put_nowait(notification)

    async def deliver(self, client: httpx.AsyncClient, notification: LedgerNotification) -> int:
        """POST one notification to every webhook. Returns the number delivered."""
        payload = notification.to_payload()
        delivered = 0
        for url in self.webhook_urls:
            try:
                resp = await client.post(url, json=payload)
                resp.raise_for_status()
                delivered += 1
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning(
                    f"Notifier: delivery of {notification.event} key={notification.key} "
                    f"to {url} failed: {e}"
                )
        return delivered
