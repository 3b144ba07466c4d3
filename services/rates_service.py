"""
Rate, history, forecast and conversion flows behind the dashboard API. Engine calls are pure; this layer decides where the rate series comes from and what gets persisted.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import numpy as np

from api.requests import ConversionRequest
from api.responses import (
    ConversionOut,
    CurrencyOut,
    ForecastAnalysisOut,
    ForecastPointOut,
    ForecastResponse,
    HistoricalResponse,
    RatePointOut,
    RateResponse,
    StatisticsOut,
)
from api.routes.common import safe_call
from config import settings
from datasources.base import RateSource
from datasources.currencies import country_code
from engine.analyzer import build_outlook
from engine.forecast import confidence_band
from engine.stats import summarize
from store import conversions as conversion_store, rates as rate_store

log = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _noise_rng() -> np.random.Generator:
    return np.random.default_rng(settings.forecast_noise_seed)


async def get_current_rate(source: RateSource, base: str, target: str) -> RateResponse:
    rate = await safe_call(source.get_rate(base, target))
    now = _now()
    await rate_store.save(base, target, rate, now)
    return RateResponse(rate=rate, base_currency=base, target_currency=target, last_updated=now)


async def _fetch_and_persist(source: RateSource, base: str, target: str, days: int) -> List[tuple[datetime, float]]:
    history = await safe_call(source.get_history(base, target, days))
    points = [(p.date, p.rate) for p in history]
    await rate_store.save_many(base, target, points)
    log.info("Fetched %d historical rate(s) for %s/%s from %s", len(points), base, target, source.name)
    return points


async def get_history(source: RateSource, base: str, target: str, days: int) -> HistoricalResponse:
    stored = await rate_store.list_since(base, target, days)
    if len(stored) >= days:
        points = [(r.date, r.rate) for r in stored]
    else:
        points = await _fetch_and_persist(source, base, target, days)

    stats = summarize([rate for _, rate in points], precision=settings.statistics_precision)
    return HistoricalResponse(
        rates=[RatePointOut(date=d, rate=r) for d, r in points],
        statistics=StatisticsOut(
            average=stats.average,
            min=stats.min,
            max=stats.max,
            volatility=stats.volatility,
        ),
    )


async def get_forecast(
    source: RateSource,
    base: str,
    target: str,
    days: int,
    rng: Optional[np.random.Generator] = None,
) -> ForecastResponse:
    window = settings.forecast_history_days
    stored = await rate_store.list_since(base, target, window)
    if len(stored) < settings.forecast_min_stored_points:
        series = [rate for _, rate in await _fetch_and_persist(source, base, target, window)]
    else:
        series = [r.rate for r in stored]

    outlook = build_outlook(series, days, rng=rng or _noise_rng())
    band = confidence_band(outlook.points)
    today = _now()
    analysis = outlook.analysis
    return ForecastResponse(
        forecast=[
            ForecastPointOut(date=today + timedelta(days=p.offset), rate=p.rate, lower=lo, upper=hi)
            for p, (lo, hi) in zip(outlook.points, band)
        ],
        analysis=ForecastAnalysisOut(
            percent_change=analysis.percent_change,
            direction=analysis.direction,
            confidence=analysis.confidence,
            expected_high=analysis.expected_high,
            expected_low=analysis.expected_low,
        ),
    )


def _conversion_out(record: conversion_store.ConversionRecord) -> ConversionOut:
    return ConversionOut(
        id=record.id,
        amount=record.amount,
        from_currency=record.from_currency,
        to_currency=record.to_currency,
        rate=record.rate,
        result=record.result,
        created_at=record.created_at,
    )


async def record_conversion(req: ConversionRequest) -> ConversionOut:
    record = await conversion_store.save(
        amount=req.amount,
        from_currency=req.from_currency,
        to_currency=req.to_currency,
        rate=req.rate,
        result=req.result,
    )
    return _conversion_out(record)


async def list_conversions(limit: Optional[int] = None) -> List[ConversionOut]:
    return [_conversion_out(r) for r in await conversion_store.list_recent(limit)]


async def list_currencies(source: RateSource) -> List[CurrencyOut]:
    codes = await safe_call(source.list_currencies())
    return [CurrencyOut(code=code, name=name, country_code=country_code(code)) for code, name in codes]
