from __future__ import annotations
from pydantic import BaseModel


class LedgerStats(BaseModel):
    total_assets: int
    total_transfers: int
    total_snapshots: int


class PrivilegeResponse(BaseModel):
    privileged_identity: str


class TransferPrivilegeRequest(BaseModel):
    new_identity: str
