from __future__ import annotations
from fastapi import APIRouter, Depends
from app.api.deps import get_ledger
from app.middleware.auth import get_caller
from app.schemas.ledger import LedgerStats, PrivilegeResponse, TransferPrivilegeRequest
from app.services.asset_ledger import AssetLedgerService

router = APIRouter(prefix="/api", tags=["access"])


@router.get("/access", response_model=PrivilegeResponse)
async def get_privileged_identity(ledger: AssetLedgerService = Depends(get_ledger)):
    return PrivilegeResponse(privileged_identity=await ledger.privileged_identity())


@router.post("/access/transfer", response_model=PrivilegeResponse)
async def transfer_privilege(
    req: TransferPrivilegeRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedgerService = Depends(get_ledger),
):
    identity = await ledger.transfer_privilege(caller, req.new_identity)
    return PrivilegeResponse(privileged_identity=identity)


@router.get("/stats", response_model=LedgerStats)
async def get_stats(ledger: AssetLedgerService = Depends(get_ledger)):
    return await ledger.stats()
