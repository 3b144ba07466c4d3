"""
Tests for forecast route semantics.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import HTTPException

from api.routes import forecast as forecast_route
from config import settings
from connectors.static import StaticRateSource
from datasources.base import RatePoint
from engine.enums import Direction
from store import rates as rate_store


class LineSource:
    name = "line"

    def __init__(self, start=0.90, step=0.001):
        self.start = start
        self.step = step
        self.calls = []

    async def get_history(self, base, target, days):
        self.calls.append(days)
        today = datetime.now(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
        return [
            RatePoint(date=today - timedelta(days=days - 1 - i), rate=self.start + self.step * i)
            for i in range(days)
        ]


@pytest.fixture
def quiet_noise(monkeypatch):
    monkeypatch.setattr(settings, "forecast_noise_amplitude", 0.0)


@pytest.mark.asyncio
async def test_forecast_projects_rising_line(monkeypatch, quiet_noise):
    source = LineSource()
    monkeypatch.setattr(forecast_route, "get_source", lambda: source)

    resp = await forecast_route.rate_forecast(from_currency="USD", to_currency="EUR", days=10)

    assert source.calls == [settings.forecast_history_days]
    assert len(resp.forecast) == 10
    last_hist = 0.90 + 0.001 * (settings.forecast_history_days - 1)
    assert resp.forecast[0].rate == pytest.approx(last_hist + 0.001)
    assert resp.analysis.direction is Direction.up
    assert resp.analysis.confidence == 95.0
    assert resp.analysis.expected_high == round(resp.forecast[-1].rate, 4)
    assert resp.analysis.expected_low == round(resp.forecast[0].rate, 4)


@pytest.mark.asyncio
async def test_forecast_points_are_dated_forward_with_band(monkeypatch, quiet_noise):
    monkeypatch.setattr(forecast_route, "get_source", lambda: LineSource())
    resp = await forecast_route.rate_forecast(days=3)
    today = datetime.now(timezone.utc).date()
    assert [p.date.date() for p in resp.forecast] == [today + timedelta(days=i) for i in (1, 2, 3)]
    for p in resp.forecast:
        assert p.lower == pytest.approx(p.rate * 0.995)
        assert p.upper == pytest.approx(p.rate * 1.005)
    dumped = resp.model_dump(by_alias=True)
    assert set(dumped["analysis"]) == {"percentChange", "direction", "confidence", "expectedHigh", "expectedLow"}
    assert dumped["analysis"]["direction"] in {"up", "down", "stable"}


@pytest.mark.asyncio
async def test_forecast_uses_stored_history_when_enough(monkeypatch, quiet_noise):
    now = datetime.now(timezone.utc)
    await rate_store.save_many(
        "USD", "EUR", [(now - timedelta(days=d), 1.10 - 0.01 * d) for d in range(8)]
    )
    source = LineSource()
    monkeypatch.setattr(forecast_route, "get_source", lambda: source)

    resp = await forecast_route.rate_forecast(from_currency="USD", to_currency="EUR", days=5)

    assert source.calls == []
    assert resp.analysis.direction is Direction.up


@pytest.mark.asyncio
async def test_forecast_default_horizon(monkeypatch):
    monkeypatch.setattr(forecast_route, "get_source", lambda: StaticRateSource(seed=4))
    resp = await forecast_route.rate_forecast()
    assert len(resp.forecast) == settings.default_forecast_days
    assert 50.0 <= resp.analysis.confidence <= 95.0


@pytest.mark.asyncio
async def test_forecast_single_point_history_is_400(monkeypatch):
    monkeypatch.setattr(forecast_route, "get_source", lambda: LineSource())
    monkeypatch.setattr(settings, "forecast_history_days", 1)
    with pytest.raises(HTTPException) as info:
        await forecast_route.rate_forecast(days=5)
    assert info.value.status_code == 400
