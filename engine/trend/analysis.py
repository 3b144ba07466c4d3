"""
Trend direction, percent change and R² based confidence over a rate series.

Percent change always comes from the raw series endpoints while the slope
policy classifies by the fitted line, so the two can disagree on a noisy
series. Both are reported as computed.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from config import settings
from engine.enums import Direction
from engine.errors import InvalidInput
from engine.regression import RegressionFit, fit, r_squared
from engine.series import RateSeries, as_array, ensure_finite
from engine.trend.policy import ClassificationPolicy


@dataclass(frozen=True)
class TrendSummary:
    direction: Direction
    percent_change: float


def percent_change(start: float, end: float) -> float:
    if start == 0:
        raise InvalidInput("percent change is undefined for a zero starting rate")
    return ensure_finite((end - start) / start * 100.0, "percent change")


def analyze_trend(
    series: RateSeries,
    policy: Optional[ClassificationPolicy] = None,
    line: Optional[RegressionFit] = None,
) -> TrendSummary:
    if policy is None:
        policy = ClassificationPolicy.slope_based()
    y = as_array(series, min_length=2, operation="analyze_trend")
    if line is None:
        line = fit(y)
    change = percent_change(float(y[0]), float(y[-1]))
    return TrendSummary(direction=policy.classify(line.slope, change), percent_change=change)


def confidence(
    series: RateSeries,
    line: Optional[RegressionFit] = None,
    floor: float | None = None,
    ceiling: float | None = None,
) -> float:
    if floor is None:
        floor = settings.confidence_floor
    if ceiling is None:
        ceiling = settings.confidence_ceiling
    r2 = r_squared(series, line)
    # a flat series is fully explained by a flat line
    if r2 is None:
        return float(ceiling)
    return float(min(ceiling, max(floor, r2 * 100.0)))
