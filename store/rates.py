"""
Exchange rate records per currency pair. Records are keyed by timestamp so refetching the same history overwrites rather than duplicates.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from config import RATES_TTL, settings
from store import keys
from store.client import redis_get, redis_incr, redis_set

log = logging.getLogger(__name__)

_write_lock = asyncio.Lock()


@dataclass(frozen=True)
class ExchangeRateRecord:
    id: int
    base_currency: str
    target_currency: str
    rate: float
    date: datetime


def _utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value.astimezone(timezone.utc)


def _to_dict(r: ExchangeRateRecord) -> dict:
    return {
        "id": r.id,
        "base_currency": r.base_currency,
        "target_currency": r.target_currency,
        "rate": r.rate,
        "date": r.date.isoformat(),
    }


def _from_dict(d: dict) -> ExchangeRateRecord:
    return ExchangeRateRecord(
        id=int(d["id"]),
        base_currency=d["base_currency"],
        target_currency=d["target_currency"],
        rate=float(d["rate"]),
        date=_utc(datetime.fromisoformat(d["date"])),
    )


async def _load(base_currency: str, target_currency: str) -> Dict[str, dict]:
    try:
        raw = await redis_get(keys.rates(base_currency, target_currency))
        if raw:
            return json.loads(raw)
    except (TypeError, ValueError) as exc:
        log.debug("Rates load failed %s/%s: %s", base_currency, target_currency, exc)
    return {}


async def save_many(
    base_currency: str,
    target_currency: str,
    points: Iterable[Tuple[datetime, float]],
) -> List[ExchangeRateRecord]:
    base_currency, target_currency = base_currency.upper(), target_currency.upper()
    saved: List[ExchangeRateRecord] = []
    async with _write_lock:
        existing = await _load(base_currency, target_currency)
        for date, rate in points:
            date = _utc(date)
            slot = date.isoformat()
            record_id = existing[slot]["id"] if slot in existing else await redis_incr(keys.rate_ids())
            record = ExchangeRateRecord(
                id=record_id,
                base_currency=base_currency,
                target_currency=target_currency,
                rate=float(rate),
                date=date,
            )
            existing[slot] = _to_dict(record)
            saved.append(record)

        limit = settings.rates_max_items_per_pair
        if limit and len(existing) > limit:
            for slot in sorted(existing)[:-limit]:
                del existing[slot]

        await redis_set(keys.rates(base_currency, target_currency), json.dumps(existing), ttl=RATES_TTL)
    return saved


async def save(base_currency: str, target_currency: str, rate: float, date: datetime) -> ExchangeRateRecord:
    saved = await save_many(base_currency, target_currency, [(date, rate)])
    return saved[0]


async def list_since(
    base_currency: str,
    target_currency: str,
    days: int,
    now: Optional[datetime] = None,
) -> List[ExchangeRateRecord]:
    """Records for the pair dated within the last ``days`` days, oldest first."""
    cutoff = _utc(now or datetime.now(timezone.utc)) - timedelta(days=days)
    records = [_from_dict(d) for d in (await _load(base_currency, target_currency)).values()]
    return sorted((r for r in records if r.date >= cutoff), key=lambda r: r.date)


async def latest(base_currency: str, target_currency: str) -> Optional[ExchangeRateRecord]:
    records = [_from_dict(d) for d in (await _load(base_currency, target_currency)).values()]
    return max(records, key=lambda r: r.date) if records else None
