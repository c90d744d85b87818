from app.models.asset import TrackedAsset
from app.models.asset_transfer import AssetTransfer, AssetTransferIndex
from app.models.holder_seen import HolderSeen
from app.models.asset_snapshot import AssetSnapshot
from app.models.ledger_state import LedgerCounter, AccessControl

__all__ = [
    "TrackedAsset",
    "AssetTransfer",
    "AssetTransferIndex",
    "HolderSeen",
    "AssetSnapshot",
    "LedgerCounter",
    "AccessControl",
]
