from __future__ import annotations
from typing import List
from pydantic import BaseModel
from app.schemas.types import Quantity, UtcDatetime


class AssetRecord(BaseModel):
    address: str
    name: str
    symbol: str
    total_supply: Quantity
    transaction_count: int
    unique_holder_count: int
    last_updated: UtcDatetime
    is_active: bool

    model_config = {"from_attributes": True}


class RegisterAssetRequest(BaseModel):
    address: str
    name: str
    symbol: str
    total_supply: Quantity = 0


class SetActiveRequest(BaseModel):
    active: bool


class AssetListResponse(BaseModel):
    addresses: List[str]
    total: int


class AssetTransfersResponse(BaseModel):
    asset: str
    transfer_ids: List[int]


class HolderStatusResponse(BaseModel):
    asset: str
    holder: str
    seen: bool
