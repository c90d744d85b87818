from __future__ import annotations
from pydantic import BaseModel
from app.schemas.types import Quantity, UtcDatetime


class SnapshotRecord(BaseModel):
    id: int
    asset_address: str
    volume_24h: Quantity
    avg_tx_size: Quantity
    snapshot_at: UtcDatetime

    model_config = {"from_attributes": True}


class CreateSnapshotRequest(BaseModel):
    asset_address: str
    volume_24h: Quantity
    avg_tx_size: Quantity
