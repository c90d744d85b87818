from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import InvalidAmount, InvalidInput, NotFound
from app.models.asset import TrackedAsset
from app.models.asset_transfer import AssetTransfer, AssetTransferIndex
from app.models.ledger_state import TRANSACTIONS
from app.services.addresses import is_null_address
from app.services.asset_registry import AssetRegistry
from app.services.counters import current_value, next_value
from app.services.holder_tracker import HolderTracker

logger = logging.getLogger(__name__)


@dataclass
class RecordedTransfer:
    transfer: AssetTransfer
    asset: TrackedAsset
    # Addresses that became holders of the asset with this transfer, in order
    new_holders: list[str] = field(default_factory=list)


class TransactionLedger:
    """Append-only transfer log with a per-asset index of ids."""

    def __init__(self, registry: AssetRegistry, holders: HolderTracker):
        self.registry = registry
        self.holders = holders

    async def record(
        self,
        db: AsyncSession,
        asset: str,
        sender: str,
        receiver: str,
        amount: int,
        tx_type: str,
        now: datetime,
    ) -> RecordedTransfer:
        if not await self.registry.exists(db, asset):
            raise NotFound(f"Asset {asset} is not registered")
        if is_null_address(sender) or is_null_address(receiver):
            raise InvalidInput("Transfer parties must not be the null address")
        if amount <= 0:
            raise InvalidAmount("Transfer amount must be greater than zero")

        transfer = AssetTransfer(
            id=await next_value(db, TRANSACTIONS),
            asset_address=asset,
            sender=sender,
            receiver=receiver,
            amount=amount,
            tx_type=tx_type or "",
            recorded_at=now,
        )
        db.add(transfer)
        await db.flush()

        position = await self._index_length(db, asset)
        db.add(AssetTransferIndex(asset_address=asset, position=position, transfer_id=transfer.id))

        recorded = RecordedTransfer(transfer=transfer, asset=await self.registry.get(db, asset))
        for party in (sender, receiver):
            if await self.holders.mark_seen(db, asset, party, now):
                await self.registry.bump_holder_count(db, asset, now)
                recorded.new_holders.append(party)

        await self.registry.bump_transaction_count(db, asset, now)
        return recorded

    async def get(self, db: AsyncSession, transfer_id: int) -> AssetTransfer:
        if transfer_id < 0 or transfer_id >= await self.count(db):
            raise NotFound(f"Transfer {transfer_id} does not exist")
        transfer = await db.get(AssetTransfer, transfer_id)
        if transfer is None:
            raise NotFound(f"Transfer {transfer_id} does not exist")
        return transfer

    async def list_for_asset(self, db: AsyncSession, asset: str) -> list[int]:
        await self.registry.get(db, asset)
        result = await db.execute(
            select(AssetTransferIndex.transfer_id)
            .where(AssetTransferIndex.asset_address == asset)
            .order_by(AssetTransferIndex.position)
        )
        return list(result.scalars().all())

    async def count(self, db: AsyncSession) -> int:
        return await current_value(db, TRANSACTIONS)

    async def _index_length(self, db: AsyncSession, asset: str) -> int:
        result = await db.execute(
            select(func.count())
            .select_from(AssetTransferIndex)
            .where(AssetTransferIndex.asset_address == asset)
        )
        return result.scalar() or 0
