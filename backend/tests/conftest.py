import os
import sys
from contextlib import asynccontextmanager

# Add backend to path so tests can import the app package directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Keep the module-level engine in memory; each test builds its own anyway
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import build_engine, init_db
from app.services.asset_ledger import AssetLedgerService
from app.services.notifier import Notifier

ADMIN = "0x00000000000000000000000000000000000000a1"
ALICE = "0x1111111111111111111111111111111111111111"
BOB = "0x2222222222222222222222222222222222222222"
CAROL = "0x3333333333333333333333333333333333333333"
TOKEN_A = "0xaaaa00000000000000000000000000000000aaaa"
TOKEN_B = "0xbbbb00000000000000000000000000000000bbbb"


@asynccontextmanager
async def open_ledger(notifier=None, identity=ADMIN, engine=None):
    """Fresh in-memory ledger, bootstrapped with `identity` as privileged caller."""
    own_engine = engine is None
    engine = engine or build_engine("sqlite+aiosqlite://")
    await init_db(engine)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    ledger = AssetLedgerService(factory, notifier=notifier or Notifier())
    try:
        await ledger.bootstrap(identity)
        yield ledger
    finally:
        if own_engine:
            await engine.dispose()


@pytest.fixture
def ledger_factory():
    return open_ledger


@pytest.fixture
def captured():
    """Notifier plus the list every published notification lands in."""
    received = []
    notifier = Notifier()
    notifier.subscribe(received.append)
    return notifier, received
