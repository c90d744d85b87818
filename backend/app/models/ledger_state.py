from __future__ import annotations
from datetime import datetime
from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base

TRANSACTIONS = "transactions"
SNAPSHOTS = "snapshots"
REGISTERED_ASSETS = "registered_assets"

COUNTER_NAMES = (TRANSACTIONS, SNAPSHOTS, REGISTERED_ASSETS)


class LedgerCounter(Base):
    __tablename__ = "ledger_counters"

    name: Mapped[str] = mapped_column(String, primary_key=True)
    # Next value to hand out; equals the number of values handed out so far
    value: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class AccessControl(Base):
    __tablename__ = "access_control"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False, default=1)
    privileged_address: Mapped[str] = mapped_column(String, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
