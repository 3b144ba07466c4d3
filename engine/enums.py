"""
Enumerations for trend direction, classification mode and percent-change source.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    up = "up"
    down = "down"
    stable = "stable"

    @classmethod
    def from_value(cls, value: float, threshold: float) -> Direction:
        if value > threshold:
            return cls.up
        if value < -threshold:
            return cls.down
        return cls.stable


class ClassificationMode(str, Enum):
    slope = "slope"
    percent_change = "percent_change"


class PercentChangeSource(str, Enum):
    # first and last noisy forecast points
    forecast = "forecast"
    # noise-free fitted line at the first and last forecast offsets
    fitted = "fitted"
    # first and last observed values
    series = "series"
