"""
Forecast projection for rate series: extends the fitted regression line past the last observed day and adds a small uniform noise to each point so charts do not draw a perfectly straight synthetic line.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from config import settings
from engine.errors import InvalidInput
from engine.regression import RegressionFit, fit
from engine.series import RateSeries, as_array, ensure_finite


@dataclass(frozen=True)
class ForecastPoint:
    offset: int
    rate: float


def forecast(
    series: RateSeries,
    horizon_days: int,
    rng: Optional[np.random.Generator] = None,
    noise: Optional[float] = None,
    line: Optional[RegressionFit] = None,
) -> List[ForecastPoint]:
    if horizon_days < 1:
        raise InvalidInput(f"forecast horizon must be at least 1 day, got {horizon_days}")
    if noise is None:
        noise = settings.forecast_noise_amplitude
    if rng is None:
        rng = np.random.default_rng()

    y = as_array(series, min_length=2, operation="forecast")
    if line is None:
        line = fit(y)
    last_x = y.size - 1

    points: List[ForecastPoint] = []
    for i in range(horizon_days):
        x = last_x + i + 1
        jitter = (float(rng.random()) - 0.5) * noise
        rate = ensure_finite(line.predict(x) + jitter, "forecast rate")
        points.append(ForecastPoint(offset=i + 1, rate=rate))
    return points


def confidence_band(
    points: Sequence[ForecastPoint],
    pct: Optional[float] = None,
) -> List[Tuple[float, float]]:
    if pct is None:
        pct = settings.forecast_band_pct
    if pct < 0:
        raise InvalidInput(f"band width must be non-negative, got {pct}")
    ratio = pct / 100.0
    return [(p.rate - p.rate * ratio, p.rate + p.rate * ratio) for p in points]
