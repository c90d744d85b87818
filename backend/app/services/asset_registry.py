from __future__ import annotations
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import AlreadyRegistered, InvalidInput, NotFound
from app.models.asset import TrackedAsset
from app.models.ledger_state import REGISTERED_ASSETS
from app.services.addresses import is_null_address
from app.services.counters import current_value, next_value


class AssetRegistry:
    """Authority on which assets exist, plus their derived metrics."""

    async def register(
        self,
        db: AsyncSession,
        address: str,
        name: str,
        symbol: str,
        total_supply: int,
        now: datetime,
    ) -> TrackedAsset:
        if is_null_address(address):
            raise InvalidInput("Asset address must not be the null address")
        if await self.exists(db, address):
            raise AlreadyRegistered(f"Asset {address} is already registered")
        if not name:
            raise InvalidInput("Asset name must not be empty")
        if not symbol:
            raise InvalidInput("Asset symbol must not be empty")
        if total_supply < 0:
            raise InvalidInput("Total supply must not be negative")

        asset = TrackedAsset(
            address=address,
            name=name,
            symbol=symbol,
            total_supply=total_supply,
            transaction_count=0,
            unique_holder_count=0,
            last_updated=now,
            is_active=True,
            registration_index=await next_value(db, REGISTERED_ASSETS),
        )
        db.add(asset)
        await db.flush()
        return asset

    async def get(self, db: AsyncSession, address: str) -> TrackedAsset:
        asset = await db.get(TrackedAsset, address)
        if asset is None:
            raise NotFound(f"Asset {address} is not registered")
        return asset

    async def exists(self, db: AsyncSession, address: str) -> bool:
        return await db.get(TrackedAsset, address) is not None

    async def set_active(
        self, db: AsyncSession, address: str, active: bool, now: datetime
    ) -> TrackedAsset:
        asset = await self.get(db, address)
        asset.is_active = active
        asset.last_updated = now
        await db.flush()
        return asset

    async def bump_holder_count(self, db: AsyncSession, address: str, now: datetime) -> int:
        asset = await self.get(db, address)
        asset.unique_holder_count += 1
        asset.last_updated = now
        await db.flush()
        return asset.unique_holder_count

    async def bump_transaction_count(self, db: AsyncSession, address: str, now: datetime) -> int:
        asset = await self.get(db, address)
        asset.transaction_count += 1
        asset.last_updated = now
        await db.flush()
        return asset.transaction_count

    async def list_addresses(self, db: AsyncSession) -> list[str]:
        result = await db.execute(
            select(TrackedAsset.address).order_by(TrackedAsset.registration_index)
        )
        return list(result.scalars().all())

    async def count(self, db: AsyncSession) -> int:
        return await current_value(db, REGISTERED_ASSETS)
