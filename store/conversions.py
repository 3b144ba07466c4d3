"""
Conversion history records.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from config import CONVERSIONS_TTL, settings
from store import keys
from store.client import redis_incr, redis_lrange, redis_rpush

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionRecord:
    id: int
    amount: float
    from_currency: str
    to_currency: str
    rate: float
    result: float
    created_at: datetime


def _serialise(c: ConversionRecord) -> str:
    return json.dumps({
        "id": c.id,
        "amount": c.amount,
        "from_currency": c.from_currency,
        "to_currency": c.to_currency,
        "rate": c.rate,
        "result": c.result,
        "created_at": c.created_at.isoformat(),
    })


def _deserialise(raw: str) -> ConversionRecord:
    d = json.loads(raw)
    return ConversionRecord(
        id=int(d["id"]),
        amount=float(d["amount"]),
        from_currency=d["from_currency"],
        to_currency=d["to_currency"],
        rate=float(d["rate"]),
        result=float(d["result"]),
        created_at=datetime.fromisoformat(d["created_at"]),
    )


async def save(
    amount: float,
    from_currency: str,
    to_currency: str,
    rate: float,
    result: float,
) -> ConversionRecord:
    record = ConversionRecord(
        id=await redis_incr(keys.conversion_ids()),
        amount=amount,
        from_currency=from_currency.upper(),
        to_currency=to_currency.upper(),
        rate=rate,
        result=result,
        created_at=datetime.now(timezone.utc),
    )
    await redis_rpush(
        keys.conversions(),
        _serialise(record),
        ttl=CONVERSIONS_TTL,
        max_len=settings.conversions_max_items,
    )
    return record


async def list_recent(limit: Optional[int] = None) -> List[ConversionRecord]:
    """Stored conversions, newest first."""
    records: List[ConversionRecord] = []
    for raw in await redis_lrange(keys.conversions()):
        try:
            records.append(_deserialise(raw))
        except (KeyError, TypeError, ValueError) as exc:
            log.debug("Skipping unreadable conversion record: %s", exc)
    records.sort(key=lambda c: (c.created_at, c.id), reverse=True)
    return records[:limit] if limit else records
