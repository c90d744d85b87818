from __future__ import annotations
from datetime import datetime
from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base
from app.models.types import TokenAmount


class AssetSnapshot(Base):
    __tablename__ = "asset_snapshots"

    # Assigned from the global "snapshots" counter, dense from 0
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    asset_address: Mapped[str] = mapped_column(
        String, ForeignKey("tracked_assets.address"), nullable=False, index=True
    )
    volume_24h: Mapped[int] = mapped_column(TokenAmount, nullable=False)
    avg_tx_size: Mapped[int] = mapped_column(TokenAmount, nullable=False)
    snapshot_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
