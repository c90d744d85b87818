from __future__ import annotations
from fastapi import Request
from app.services.asset_ledger import AssetLedgerService


def get_ledger(request: Request) -> AssetLedgerService:
    return request.app.state.ledger
