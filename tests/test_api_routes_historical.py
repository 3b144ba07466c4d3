"""
Tests for historical route semantics: stored-versus-fetched series and statistics.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import HTTPException

from api.routes import historical as historical_route
from config import settings
from datasources.base import RatePoint
from datasources.exceptions import PairNotFound


class CountingSource:
    name = "counting"

    def __init__(self, rates=None, error=None):
        self.rates = rates or [0.90, 0.92, 0.88, 0.91, 0.89]
        self.error = error
        self.calls = []

    async def get_history(self, base, target, days):
        self.calls.append((base, target, days))
        if self.error:
            raise self.error
        today = datetime.now(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
        values = (self.rates * days)[:days]
        return [RatePoint(date=today - timedelta(days=days - 1 - i), rate=v) for i, v in enumerate(values)]


@pytest.mark.asyncio
async def test_historical_fetches_then_serves_from_store(monkeypatch):
    source = CountingSource()
    monkeypatch.setattr(historical_route, "get_source", lambda: source)

    first = await historical_route.historical(from_currency="usd", to_currency="eur", days=5)
    second = await historical_route.historical(from_currency="USD", to_currency="EUR", days=5)

    assert source.calls == [("USD", "EUR", 5)]
    assert [p.rate for p in first.rates] == [0.90, 0.92, 0.88, 0.91, 0.89]
    assert [p.rate for p in second.rates] == [p.rate for p in first.rates]
    assert first.rates[0].date < first.rates[-1].date


@pytest.mark.asyncio
async def test_historical_statistics(monkeypatch):
    monkeypatch.setattr(historical_route, "get_source", lambda: CountingSource())
    resp = await historical_route.historical(days=5)
    stats = resp.statistics
    assert stats.average == pytest.approx(0.9)
    assert stats.min == 0.88
    assert stats.max == 0.92
    assert stats.volatility == 4.44


@pytest.mark.asyncio
async def test_historical_uses_default_window(monkeypatch):
    source = CountingSource()
    monkeypatch.setattr(historical_route, "get_source", lambda: source)
    resp = await historical_route.historical()
    assert source.calls == [("USD", "EUR", settings.default_history_days)]
    assert len(resp.rates) == settings.default_history_days
    dumped = resp.model_dump(by_alias=True)
    assert set(dumped["statistics"]) == {"average", "min", "max", "volatility"}


@pytest.mark.asyncio
async def test_historical_unknown_pair_is_400(monkeypatch):
    monkeypatch.setattr(historical_route, "get_source", lambda: CountingSource(error=PairNotFound("bad pair")))
    with pytest.raises(HTTPException) as info:
        await historical_route.historical(from_currency="USD", to_currency="XXX", days=5)
    assert info.value.status_code == 400


@pytest.mark.asyncio
async def test_historical_empty_history_is_400(monkeypatch):
    class EmptySource(CountingSource):
        async def get_history(self, base, target, days):
            return []

    monkeypatch.setattr(historical_route, "get_source", lambda: EmptySource())
    with pytest.raises(HTTPException) as info:
        await historical_route.historical(days=5)
    assert info.value.status_code == 400
