from __future__ import annotations
from pydantic import BaseModel, Field
from app.schemas.types import Quantity, UtcDatetime


class TransferRecord(BaseModel):
    id: int
    asset_address: str
    sender: str
    receiver: str
    amount: Quantity
    tx_type: str
    recorded_at: UtcDatetime

    model_config = {"from_attributes": True}


class RecordTransferRequest(BaseModel):
    asset_address: str
    sender: str = Field(alias="from")
    receiver: str = Field(alias="to")
    amount: Quantity
    tx_type: str = "transfer"

    model_config = {"populate_by_name": True}
