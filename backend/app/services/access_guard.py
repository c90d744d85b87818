from __future__ import annotations
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import InvalidInput, NotBootstrapped, Unauthorized
from app.models.ledger_state import AccessControl
from app.services.addresses import is_null_address

logger = logging.getLogger(__name__)

_ROW_ID = 1


class AccessGuard:
    """Holds the single privileged identity and gates privileged calls."""

    async def bootstrap(self, db: AsyncSession, identity: str, now: datetime) -> str:
        """Store the initial identity unless one was persisted by an earlier run."""
        row = await db.get(AccessControl, _ROW_ID)
        if row is not None:
            if row.privileged_address != identity:
                logger.info(
                    f"AccessGuard: keeping persisted privileged identity "
                    f"{row.privileged_address} (configured {identity})"
                )
            return row.privileged_address
        if is_null_address(identity):
            raise InvalidInput("Privileged identity must not be the null address")
        db.add(AccessControl(id=_ROW_ID, privileged_address=identity, updated_at=now))
        await db.flush()
        return identity

    async def current(self, db: AsyncSession) -> str:
        row = await db.get(AccessControl, _ROW_ID)
        if row is None:
            raise NotBootstrapped("Access control has not been bootstrapped")
        return row.privileged_address

    async def require(self, db: AsyncSession, caller: Optional[str]) -> None:
        if not caller or caller != await self.current(db):
            raise Unauthorized("Caller is not the privileged identity")

    async def transfer(
        self, db: AsyncSession, caller: Optional[str], new_identity: str, now: datetime
    ) -> str:
        """Swap the privileged identity. Returns the previous one."""
        await self.require(db, caller)
        if is_null_address(new_identity):
            raise InvalidInput("New privileged identity must not be the null address")
        row = await db.get(AccessControl, _ROW_ID)
        previous = row.privileged_address
        row.privileged_address = new_identity
        row.updated_at = now
        await db.flush()
        return previous
