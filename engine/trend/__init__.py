"""
Trend classification and confidence scoring for rate series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.trend.policy import ClassificationPolicy
from engine.trend.analysis import TrendSummary, analyze_trend, confidence, percent_change

__all__ = ["ClassificationPolicy", "TrendSummary", "analyze_trend", "confidence", "percent_change"]
