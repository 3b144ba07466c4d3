"""
Forecast outlook: projects a rate series forward and derives the analysis block shown next to the forecast chart (percent change, direction, confidence and expected range).

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from config import settings
from engine.enums import Direction, PercentChangeSource
from engine.forecast import ForecastPoint, forecast
from engine.regression import RegressionFit, fit
from engine.series import RateSeries, as_array
from engine.trend import ClassificationPolicy, confidence, percent_change

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastAnalysis:
    percent_change: float
    direction: Direction
    confidence: float
    expected_high: float
    expected_low: float


@dataclass(frozen=True)
class ForecastOutlook:
    points: List[ForecastPoint]
    analysis: ForecastAnalysis
    fit: RegressionFit


def _change_endpoints(
    history: np.ndarray,
    points: List[ForecastPoint],
    line: RegressionFit,
    source: PercentChangeSource,
) -> tuple[float, float]:
    if source is PercentChangeSource.series:
        return float(history[0]), float(history[-1])
    if source is PercentChangeSource.fitted:
        last_x = history.size - 1
        return line.predict(last_x + points[0].offset), line.predict(last_x + points[-1].offset)
    return points[0].rate, points[-1].rate


def build_outlook(
    series: RateSeries,
    horizon_days: int,
    policy: Optional[ClassificationPolicy] = None,
    change_source: PercentChangeSource | str | None = None,
    rng: Optional[np.random.Generator] = None,
) -> ForecastOutlook:
    if policy is None:
        policy = ClassificationPolicy.from_mode(settings.forecast_classification_mode)
    if change_source is None:
        change_source = settings.forecast_change_source
    source = PercentChangeSource(change_source)

    history = as_array(series, min_length=2, operation="build_outlook")
    line = fit(history)
    points = forecast(history, horizon_days, rng=rng, line=line)

    start, end = _change_endpoints(history, points, line, source)
    change = percent_change(start, end)
    rates = [p.rate for p in points]

    analysis = ForecastAnalysis(
        percent_change=round(change, settings.forecast_percent_precision),
        direction=policy.classify(line.slope, change),
        confidence=round(confidence(history, line), 2),
        expected_high=round(max(rates), settings.forecast_expected_precision),
        expected_low=round(min(rates), settings.forecast_expected_precision),
    )
    log.debug(
        "Outlook over %d point(s), horizon %d: slope=%.6g direction=%s",
        history.size, horizon_days, line.slope, analysis.direction.value,
    )
    return ForecastOutlook(points=points, analysis=analysis, fit=line)
