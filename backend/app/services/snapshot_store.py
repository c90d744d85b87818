from __future__ import annotations
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import InvalidInput, NotFound
from app.models.asset_snapshot import AssetSnapshot
from app.models.ledger_state import SNAPSHOTS
from app.services.asset_registry import AssetRegistry
from app.services.counters import current_value, next_value


class SnapshotStore:
    """Append-only log of caller-supplied aggregate figures per asset."""

    def __init__(self, registry: AssetRegistry):
        self.registry = registry

    async def create(
        self,
        db: AsyncSession,
        asset: str,
        volume_24h: int,
        avg_tx_size: int,
        now: datetime,
    ) -> AssetSnapshot:
        if not await self.registry.exists(db, asset):
            raise NotFound(f"Asset {asset} is not registered")
        if volume_24h < 0 or avg_tx_size < 0:
            raise InvalidInput("Snapshot figures must not be negative")

        snapshot = AssetSnapshot(
            id=await next_value(db, SNAPSHOTS),
            asset_address=asset,
            volume_24h=volume_24h,
            avg_tx_size=avg_tx_size,
            snapshot_at=now,
        )
        db.add(snapshot)
        await db.flush()
        return snapshot

    async def get(self, db: AsyncSession, snapshot_id: int) -> AssetSnapshot:
        if snapshot_id < 0 or snapshot_id >= await self.count(db):
            raise NotFound(f"Snapshot {snapshot_id} does not exist")
        snapshot = await db.get(AssetSnapshot, snapshot_id)
        if snapshot is None:
            raise NotFound(f"Snapshot {snapshot_id} does not exist")
        return snapshot

    async def count(self, db: AsyncSession) -> int:
        return await current_value(db, SNAPSHOTS)
