"""
Direction classification policy. Two rules are in use: the chart utility classifies by the fitted slope, the forecast endpoint by percent change. Callers pick one explicitly.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass

from config import settings
from engine.enums import ClassificationMode, Direction
from engine.errors import InvalidInput


@dataclass(frozen=True)
class ClassificationPolicy:
    mode: ClassificationMode
    threshold: float

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise InvalidInput(f"classification threshold must be non-negative, got {self.threshold}")

    @classmethod
    def slope_based(cls, threshold: float | None = None) -> ClassificationPolicy:
        if threshold is None:
            threshold = settings.trend_slope_threshold
        return cls(mode=ClassificationMode.slope, threshold=threshold)

    @classmethod
    def percent_change_based(cls, threshold: float | None = None) -> ClassificationPolicy:
        if threshold is None:
            threshold = settings.trend_percent_threshold
        return cls(mode=ClassificationMode.percent_change, threshold=threshold)

    @classmethod
    def from_mode(cls, mode: str | ClassificationMode, threshold: float | None = None) -> ClassificationPolicy:
        resolved = ClassificationMode(mode)
        if resolved is ClassificationMode.slope:
            return cls.slope_based(threshold)
        return cls.percent_change_based(threshold)

    def classify(self, slope: float, percent_change: float) -> Direction:
        value = slope if self.mode is ClassificationMode.slope else percent_change
        return Direction.from_value(value, self.threshold)
