from __future__ import annotations
import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.holder_seen import HolderSeen

logger = logging.getLogger(__name__)


class HolderTracker:
    """Per-asset set of every address ever seen in a transfer.

    Entries are never evicted, so counts derived from it are exact.
    """

    async def mark_seen(
        self, db: AsyncSession, asset: str, address: str, now: datetime
    ) -> bool:
        """Flag (asset, address) as seen. True only on the first call for the pair."""
        if await db.get(HolderSeen, (asset, address)) is not None:
            return False
        db.add(HolderSeen(asset_address=asset, holder_address=address, first_seen_at=now))
        # Flush so a second call in the same transaction (from == to) sees the row
        await db.flush()
        logger.debug(f"HolderTracker: first sighting of {address} on {asset}")
        return True

    async def has_seen(self, db: AsyncSession, asset: str, address: str) -> bool:
        return await db.get(HolderSeen, (asset, address)) is not None
