from __future__ import annotations
from datetime import datetime
from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base


class HolderSeen(Base):
    """A row exists once an address has appeared in a transfer of the asset."""

    __tablename__ = "holder_seen"

    asset_address: Mapped[str] = mapped_column(
        String, ForeignKey("tracked_assets.address"), primary_key=True
    )
    holder_address: Mapped[str] = mapped_column(String, primary_key=True)
    first_seen_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
