from __future__ import annotations
from fastapi import APIRouter, Depends, status
from app.api.deps import get_ledger
from app.schemas.transfer import TransferRecord, RecordTransferRequest
from app.services.asset_ledger import AssetLedgerService

router = APIRouter(prefix="/api/transfers", tags=["transfers"])


@router.post("", response_model=TransferRecord, status_code=status.HTTP_201_CREATED)
async def record_transfer(
    req: RecordTransferRequest,
    ledger: AssetLedgerService = Depends(get_ledger),
):
    # Open to anonymous callers
    return await ledger.record_transfer(
        req.asset_address, req.sender, req.receiver, req.amount, req.tx_type
    )


@router.get("/{transfer_id}", response_model=TransferRecord)
async def get_transfer(transfer_id: int, ledger: AssetLedgerService = Depends(get_ledger)):
    return await ledger.get_transfer(transfer_id)
