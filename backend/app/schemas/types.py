from __future__ import annotations
from datetime import datetime, timezone
from typing import Annotated
from pydantic import AfterValidator, PlainSerializer


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# Token quantities can exceed what a JSON number survives in most clients,
# so they go out as decimal strings. Inputs accept either form.
Quantity = Annotated[int, PlainSerializer(lambda v: str(v), return_type=str, when_used="json")]

UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]
