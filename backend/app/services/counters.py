"""Scalar monotonic counters backing the dense id sequences."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.ledger_state import COUNTER_NAMES, LedgerCounter


async def _load(db: AsyncSession, name: str, for_update: bool = False) -> LedgerCounter:
    counter = await db.get(LedgerCounter, name, with_for_update=for_update)
    if counter is None:
        counter = LedgerCounter(name=name, value=0)
        db.add(counter)
        await db.flush()
    return counter


async def seed_counters(db: AsyncSession) -> None:
    for name in COUNTER_NAMES:
        await _load(db, name)


async def next_value(db: AsyncSession, name: str) -> int:
    """Hand out the next id. Only takes effect if the caller's transaction commits."""
    counter = await _load(db, name, for_update=True)
    value = counter.value
    counter.value = value + 1
    await db.flush()
    return value


async def current_value(db: AsyncSession, name: str) -> int:
    counter = await db.get(LedgerCounter, name)
    return counter.value if counter is not None else 0
