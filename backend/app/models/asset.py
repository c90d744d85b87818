from __future__ import annotations
from datetime import datetime
from sqlalchemy import String, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base
from app.models.types import TokenAmount


class TrackedAsset(Base):
    __tablename__ = "tracked_assets"

    address: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    symbol: Mapped[str] = mapped_column(String, nullable=False)
    total_supply: Mapped[int] = mapped_column(TokenAmount, nullable=False)
    transaction_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    unique_holder_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Position in the global registration order (value of the registered-asset counter)
    registration_index: Mapped[int] = mapped_column(Integer, unique=True, nullable=False, index=True)
