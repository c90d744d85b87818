from __future__ import annotations
import logging
from typing import Optional

import httpx

from app.config import get_settings
from app.services.notifier import Notifier

logger = logging.getLogger(__name__)
settings = get_settings()


async def run_notification_worker(
    notifier: Notifier, transport: Optional[httpx.AsyncBaseTransport] = None
):
    """Background worker that POSTs committed ledger notifications to webhooks.

    Runs until cancelled. Failed deliveries are logged and dropped; ledger
    state never depends on them.
    """
    if notifier.queue is None:
        logger.info("Notification worker idle: no webhook URLs configured")
        return

    logger.info(f"Notification worker started ({len(notifier.webhook_urls)} webhooks)")
    async with httpx.AsyncClient(
        timeout=settings.notification_timeout_seconds, transport=transport
    ) as client:
        while True:
            notification = await notifier.queue.get()
            try:
                await notifier.deliver(client, notification)
            except Exception as e:
                logger.error(
                    f"Notification worker: delivery of {notification.event} "
                    f"key={notification.key} failed: {e}"
                )
            finally:
                notifier.queue.task_done()
