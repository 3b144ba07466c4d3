"""
Response models for API endpoints. Field names serialise in camelCase, which is what the dashboard client reads.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

from engine.enums import Direction


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class RateResponse(NpModel):

    rate: float
    base_currency: str
    target_currency: str
    last_updated: datetime


class RatePointOut(NpModel):

    date: datetime
    rate: float


class StatisticsOut(NpModel):

    average: float
    min: float
    max: float
    volatility: float


class HistoricalResponse(NpModel):

    rates: List[RatePointOut]
    statistics: StatisticsOut


class ForecastPointOut(NpModel):

    date: datetime
    rate: float
    lower: float
    upper: float


class ForecastAnalysisOut(NpModel):

    percent_change: float
    direction: Direction
    confidence: float = Field(ge=0.0, le=100.0)
    expected_high: float
    expected_low: float


class ForecastResponse(NpModel):

    forecast: List[ForecastPointOut]
    analysis: ForecastAnalysisOut


class ConversionOut(NpModel):

    id: int
    amount: float
    from_currency: str
    to_currency: str
    rate: float
    result: float
    created_at: datetime


class CurrencyOut(NpModel):

    code: str
    name: str
    country_code: str
