"""
Summary statistics over a displayed or forecast rate series. Volatility here is the simple range over mean, in percent, not a standard deviation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from engine.errors import InvalidInput
from engine.series import RateSeries, as_array, ensure_finite


@dataclass(frozen=True)
class StatSummary:
    average: float
    min: float
    max: float
    volatility: float


def summarize(series: RateSeries, precision: Optional[int] = 2) -> StatSummary:
    arr = as_array(series, min_length=1, operation="summarize")
    with np.errstate(over="ignore", invalid="ignore"):
        average = ensure_finite(np.mean(arr), "average rate")
    if average == 0.0:
        raise InvalidInput("volatility is undefined for a series averaging zero")
    low = float(np.min(arr))
    high = float(np.max(arr))
    volatility = ensure_finite((high - low) / average * 100.0, "volatility")
    if precision is not None:
        volatility = round(volatility, precision)
    return StatSummary(average=average, min=low, max=high, volatility=volatility)
