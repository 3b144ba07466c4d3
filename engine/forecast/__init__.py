"""
Forecast projection of rate series from their linear trend, with injectable noise and a percentage band around each projected point.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.projection import ForecastPoint, confidence_band, forecast

__all__ = ["ForecastPoint", "forecast", "confidence_band"]
