from __future__ import annotations
from fastapi import APIRouter, Depends, status
from app.api.deps import get_ledger
from app.middleware.auth import get_caller
from app.schemas.asset import (
    AssetRecord,
    RegisterAssetRequest,
    SetActiveRequest,
    AssetListResponse,
    AssetTransfersResponse,
    HolderStatusResponse,
)
from app.services.asset_ledger import AssetLedgerService

router = APIRouter(prefix="/api/assets", tags=["assets"])


@router.post("", response_model=AssetRecord, status_code=status.HTTP_201_CREATED)
async def register_asset(
    req: RegisterAssetRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedgerService = Depends(get_ledger),
):
    return await ledger.register_asset(caller, req.address, req.name, req.symbol, req.total_supply)


@router.get("", response_model=AssetListResponse)
async def list_assets(ledger: AssetLedgerService = Depends(get_ledger)):
    addresses = await ledger.registered_assets()
    return AssetListResponse(addresses=addresses, total=len(addresses))


@router.get("/{address}", response_model=AssetRecord)
async def get_asset(address: str, ledger: AssetLedgerService = Depends(get_ledger)):
    return await ledger.get_asset(address)


@router.patch("/{address}/status", response_model=AssetRecord)
async def set_asset_status(
    address: str,
    req: SetActiveRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedgerService = Depends(get_ledger),
):
    return await ledger.set_asset_active(caller, address, req.active)


@router.get("/{address}/transfers", response_model=AssetTransfersResponse)
async def list_asset_transfers(address: str, ledger: AssetLedgerService = Depends(get_ledger)):
    ids = await ledger.list_asset_transfers(address)
    return AssetTransfersResponse(asset=address, transfer_ids=ids)


@router.get("/{address}/holders/{holder}", response_model=HolderStatusResponse)
async def get_holder_status(
    address: str,
    holder: str,
    ledger: AssetLedgerService = Depends(get_ledger),
):
    seen = await ledger.is_holder(address, holder)
    return HolderStatusResponse(asset=address, holder=holder, seen=seen)
