"""
Validation helpers turning an ordered rate sequence into a numeric array.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from engine.errors import InvalidInput

RateSeries = Sequence[float]


def as_array(series: RateSeries, min_length: int = 1, operation: str = "operation") -> np.ndarray:
    """Return ``series`` as a 1-D float array, preserving order.

    Raises :class:`InvalidInput` when the series is shorter than
    ``min_length`` or holds anything that is not a finite number.
    """
    try:
        arr = np.asarray(series, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{operation} requires a numeric rate series") from exc
    if arr.ndim != 1:
        raise InvalidInput(f"{operation} requires a one-dimensional rate series")
    if arr.size < min_length:
        raise InvalidInput(
            f"{operation} requires at least {min_length} rate(s), got {arr.size}"
        )
    if not np.all(np.isfinite(arr)):
        raise InvalidInput(f"{operation} received a non-finite rate")
    return arr


def ensure_finite(value: float, what: str) -> float:
    """Return ``value`` as a float, raising :class:`InvalidInput` if it overflowed."""
    value = float(value)
    if not np.isfinite(value):
        raise InvalidInput(f"{what} is not finite; rates are out of numeric range")
    return value
