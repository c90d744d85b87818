"""Asset ledger service.

Composes the registry, transfer ledger, holder tracker, snapshot store
and access guard behind one asyncio lock. Each call runs in a single
database transaction: it either commits every write it made or, when a
LedgerError escapes, none of them.
"""
from __future__ import annotations
import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.schemas.asset import AssetRecord
from app.schemas.ledger import LedgerStats
from app.schemas.snapshot import SnapshotRecord
from app.schemas.transfer import TransferRecord
from app.services import notifier as events
from app.services.access_guard import AccessGuard
from app.services.asset_registry import AssetRegistry
from app.services.counters import seed_counters
from app.services.holder_tracker import HolderTracker
from app.services.notifier import LedgerNotification, Notifier
from app.services.snapshot_store import SnapshotStore
from app.services.transaction_ledger import TransactionLedger

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AssetLedgerService:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        notifier: Optional[Notifier] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._session_factory = session_factory
        self._lock = asyncio.Lock()
        self._clock = clock
        self.notifier = notifier or Notifier()

        self.holders = HolderTracker()
        self.registry = AssetRegistry()
        self.ledger = TransactionLedger(self.registry, self.holders)
        self.snapshots = SnapshotStore(self.registry)
        self.guard = AccessGuard()

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[tuple[AsyncSession, list[LedgerNotification]]]:
        async with self._lock:
            pending: list[LedgerNotification] = []
            async with self._session_factory() as db:
                async with db.begin():
                    yield db, pending
            # Only reached once the transaction has committed
            self.notifier.publish(pending)

    async def bootstrap(self, initial_identity: str) -> str:
        async with self._transaction() as (db, _):
            await seed_counters(db)
            identity = await self.guard.bootstrap(db, initial_identity, self._clock())
        logger.info(f"Asset ledger ready, privileged identity {identity}")
        return identity

    # ── Registry ──────────────────────────────────────────────────────

    async def register_asset(
        self,
        caller: Optional[str],
        address: str,
        name: str,
        symbol: str,
        total_supply: int,
    ) -> AssetRecord:
        async with self._transaction() as (db, pending):
            now = self._clock()
            await self.guard.require(db, caller)
            asset = await self.registry.register(db, address, name, symbol, total_supply, now)
            record = AssetRecord.model_validate(asset)
            index = asset.registration_index
            pending.append(LedgerNotification(
                events.ASSET_REGISTERED, address, now,
                {"name": name, "symbol": symbol, "total_supply": str(total_supply)},
            ))
        logger.info(f"Registered asset {address} ({symbol}) as #{index}")
        return record

    async def set_asset_active(self, caller: Optional[str], address: str, active: bool) -> AssetRecord:
        async with self._transaction() as (db, pending):
            now = self._clock()
            await self.guard.require(db, caller)
            asset = await self.registry.set_active(db, address, active, now)
            record = AssetRecord.model_validate(asset)
            pending.append(LedgerNotification(
                events.ASSET_STATUS_UPDATED, address, now, {"active": active},
            ))
        logger.info(f"Asset {address} active={active}")
        return record

    async def get_asset(self, address: str) -> AssetRecord:
        async with self._transaction() as (db, _):
            return AssetRecord.model_validate(await self.registry.get(db, address))

    async def asset_exists(self, address: str) -> bool:
        async with self._transaction() as (db, _):
            return await self.registry.exists(db, address)

    async def registered_assets(self) -> list[str]:
        async with self._transaction() as (db, _):
            return await self.registry.list_addresses(db)

    # ── Transfers ─────────────────────────────────────────────────────

    async def record_transfer(
        self,
        asset: str,
        sender: str,
        receiver: str,
        amount: int,
        tx_type: str = "transfer",
    ) -> TransferRecord:
        """Append a transfer. Open to any caller."""
        async with self._transaction() as (db, pending):
            now = self._clock()
            recorded = await self.ledger.record(db, asset, sender, receiver, amount, tx_type, now)
            record = TransferRecord.model_validate(recorded.transfer)
            pending.append(LedgerNotification(
                events.TRANSFER_RECORDED, record.id, now,
                {
                    "asset": asset,
                    "from": sender,
                    "to": receiver,
                    "amount": str(amount),
                    "tx_type": record.tx_type,
                    "transaction_count": recorded.asset.transaction_count,
                },
            ))
            if recorded.new_holders:
                pending.append(LedgerNotification(
                    events.HOLDER_COUNT_UPDATED, asset, now,
                    {
                        "new_holders": list(recorded.new_holders),
                        "unique_holder_count": recorded.asset.unique_holder_count,
                    },
                ))
        logger.info(
            f"Recorded transfer #{record.id} of {asset}: {sender} -> {receiver} "
            f"amount={amount} ({len(recorded.new_holders)} new holders)"
        )
        return record

    async def get_transfer(self, transfer_id: int) -> TransferRecord:
        async with self._transaction() as (db, _):
            return TransferRecord.model_validate(await self.ledger.get(db, transfer_id))

    async def list_asset_transfers(self, asset: str) -> list[int]:
        async with self._transaction() as (db, _):
            return await self.ledger.list_for_asset(db, asset)

    async def is_holder(self, asset: str, address: str) -> bool:
        async with self._transaction() as (db, _):
            await self.registry.get(db, asset)
            return await self.holders.has_seen(db, asset, address)

    # ── Snapshots ─────────────────────────────────────────────────────

    async def create_snapshot(
        self, caller: Optional[str], asset: str, volume_24h: int, avg_tx_size: int
    ) -> SnapshotRecord:
        async with self._transaction() as (db, pending):
            now = self._clock()
            await self.guard.require(db, caller)
            snapshot = await self.snapshots.create(db, asset, volume_24h, avg_tx_size, now)
            record = SnapshotRecord.model_validate(snapshot)
            pending.append(LedgerNotification(
                events.SNAPSHOT_CREATED, record.id, now,
                {"asset": asset, "volume_24h": str(volume_24h), "avg_tx_size": str(avg_tx_size)},
            ))
        logger.info(f"Created snapshot #{record.id} for {asset}")
        return record

    async def get_snapshot(self, snapshot_id: int) -> SnapshotRecord:
        async with self._transaction() as (db, _):
            return SnapshotRecord.model_validate(await self.snapshots.get(db, snapshot_id))

    # ── Access ────────────────────────────────────────────────────────

    async def transfer_privilege(self, caller: Optional[str], new_identity: str) -> str:
        async with self._transaction() as (db, pending):
            now = self._clock()
            previous = await self.guard.transfer(db, caller, new_identity, now)
            pending.append(LedgerNotification(
                events.PRIVILEGE_TRANSFERRED, new_identity, now, {"previous": previous},
            ))
        logger.info(f"Privilege transferred from {previous} to {new_identity}")
        return new_identity

    async def privileged_identity(self) -> str:
        async with self._transaction() as (db, _):
            return await self.guard.current(db)

    async def stats(self) -> LedgerStats:
        async with self._transaction() as (db, _):
            return LedgerStats(
                total_assets=await self.registry.count(db),
                total_transfers=await self.ledger.count(db),
                total_snapshots=await self.snapshots.count(db),
            )
