from __future__ import annotations
from datetime import datetime
from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base
from app.models.types import TokenAmount


class AssetTransfer(Base):
    __tablename__ = "asset_transfers"

    # Assigned from the global "transactions" counter, dense from 0
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    asset_address: Mapped[str] = mapped_column(
        String, ForeignKey("tracked_assets.address"), nullable=False, index=True
    )
    sender: Mapped[str] = mapped_column(String, nullable=False)
    receiver: Mapped[str] = mapped_column(String, nullable=False)
    amount: Mapped[int] = mapped_column(TokenAmount, nullable=False)
    tx_type: Mapped[str] = mapped_column(String, nullable=False, default="")
    recorded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class AssetTransferIndex(Base):
    """Per-asset, append-only list of transfer ids in recording order."""

    __tablename__ = "asset_transfer_index"

    asset_address: Mapped[str] = mapped_column(
        String, ForeignKey("tracked_assets.address"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    transfer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("asset_transfers.id"), unique=True, nullable=False
    )
