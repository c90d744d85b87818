from __future__ import annotations
from typing import Optional

NULL_ADDRESS = "0x0000000000000000000000000000000000000000"


def is_null_address(address: Optional[str]) -> bool:
    """True for missing, blank or all-zero sentinel addresses."""
    if not address or not address.strip():
        return True
    return address.strip().lower() == NULL_ADDRESS
