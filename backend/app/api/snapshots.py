from __future__ import annotations
from fastapi import APIRouter, Depends, status
from app.api.deps import get_ledger
from app.middleware.auth import get_caller
from app.schemas.snapshot import SnapshotRecord, CreateSnapshotRequest
from app.services.asset_ledger import AssetLedgerService

router = APIRouter(prefix="/api/snapshots", tags=["snapshots"])


@router.post("", response_model=SnapshotRecord, status_code=status.HTTP_201_CREATED)
async def create_snapshot(
    req: CreateSnapshotRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedgerService = Depends(get_ledger),
):
    return await ledger.create_snapshot(caller, req.asset_address, req.volume_24h, req.avg_tx_size)


@router.get("/{snapshot_id}", response_model=SnapshotRecord)
async def get_snapshot(snapshot_id: int, ledger: AssetLedgerService = Depends(get_ledger)):
    return await ledger.get_snapshot(snapshot_id)
