"""
Closed-form linear regression over (day index, rate) pairs, with the R² of the fitted line used downstream as a confidence proxy.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from engine.series import RateSeries, as_array, ensure_finite


@dataclass(frozen=True)
class RegressionFit:
    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def fit(series: RateSeries) -> RegressionFit:
    y = as_array(series, min_length=2, operation="fit")
    n = y.size
    x = np.arange(n, dtype=float)

    with np.errstate(over="ignore", invalid="ignore"):
        sum_x = float(np.sum(x))
        sum_y = float(np.sum(y))
        sum_xy = float(np.sum(x * y))
        sum_xx = float(np.sum(x * x))

    # never zero for n >= 2 distinct indices
    denominator = n * sum_xx - sum_x * sum_x
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return RegressionFit(
        slope=ensure_finite(slope, "fitted slope"),
        intercept=ensure_finite(intercept, "fitted intercept"),
    )


def r_squared(series: RateSeries, line: Optional[RegressionFit] = None) -> Optional[float]:
    """Coefficient of determination of ``line`` over ``series``.

    Returns ``None`` for a constant series, where SS_total is zero and R² is
    undefined.
    """
    y = as_array(series, min_length=2, operation="r_squared")
    # a float mean can leave a tiny nonzero SS_total for identical values
    if np.ptp(y) == 0.0:
        return None
    if line is None:
        line = fit(y)
    with np.errstate(over="ignore", invalid="ignore"):
        predicted = line.slope * np.arange(y.size, dtype=float) + line.intercept
        ss_res = float(np.sum((y - predicted) ** 2))
        ss_tot = float(np.sum((y - np.mean(y)) ** 2))
    # distinct but tiny rates can still underflow SS_total
    if ss_tot == 0.0:
        return None
    return ensure_finite(1.0 - ss_res / ss_tot, "R²")
