"""Column types shared by the ledger tables."""
from __future__ import annotations
from typing import Optional
from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class TokenAmount(TypeDecorator):
    """Non-negative integer of arbitrary size, stored as decimal text.

    Float and most NUMERIC backends would round quantities past 2**53, so
    the value round-trips through its base-10 string instead.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value: Optional[int], dialect) -> Optional[str]:
        if value is None:
            return None
        return str(int(value))

    def process_result_value(self, value: Optional[str], dialect) -> Optional[int]:
        if value is None:
            return None
        return int(value)
