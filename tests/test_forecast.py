"""
Test cases for forecast projection, including noise bounds, seeded reproducibility and the confidence band.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from config import settings
from engine.errors import InvalidInput
from engine.forecast import ForecastPoint, confidence_band, forecast
from engine.regression import RegressionFit, fit

NOISE_TOLERANCE = 0.001 + 1e-12


def test_forecast_returns_horizon_points_in_order():
    series = [1.0, 1.02, 1.01, 1.03, 1.05, 1.04]
    points = forecast(series, 30)
    assert len(points) == 30
    assert [p.offset for p in points] == list(range(1, 31))


def test_forecast_points_stay_within_noise_of_line():
    series = [1.0, 1.02, 1.01, 1.03, 1.05, 1.04]
    line = fit(series)
    for p in forecast(series, 30, rng=np.random.default_rng(7)):
        expected = line.predict(len(series) - 1 + p.offset)
        assert abs(p.rate - expected) <= NOISE_TOLERANCE


def test_forecast_flat_pair():
    for p in forecast([0.75, 0.75], 5):
        assert p.rate == pytest.approx(0.75, abs=0.002)


def test_forecast_example_series():
    points = forecast([0.90, 0.91, 0.92, 0.93, 0.94], 3)
    for p, expected in zip(points, [0.95, 0.96, 0.97]):
        assert p.rate == pytest.approx(expected, abs=NOISE_TOLERANCE)


def test_seeded_generator_is_reproducible():
    series = [1.1, 1.2, 1.15, 1.3]
    first = forecast(series, 10, rng=np.random.default_rng(42))
    second = forecast(series, 10, rng=np.random.default_rng(42))
    assert first == second


def test_zero_noise_is_exact_line():
    series = [2.0, 2.5, 3.0]
    points = forecast(series, 2, noise=0.0)
    assert [p.rate for p in points] == pytest.approx([3.5, 4.0])


def test_noise_amplitude_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "forecast_noise_amplitude", 0.0)
    points = forecast([1.0, 2.0], 3)
    assert [p.rate for p in points] == pytest.approx([3.0, 4.0, 5.0])


def test_forecast_rejects_short_series():
    with pytest.raises(InvalidInput):
        forecast([1.0], 5)


@pytest.mark.parametrize("horizon", [0, -3])
def test_forecast_rejects_bad_horizon(horizon):
    with pytest.raises(InvalidInput):
        forecast([1.0, 2.0], horizon)


def test_confidence_band_half_percent():
    band = confidence_band([ForecastPoint(offset=1, rate=2.0)], pct=0.5)
    assert band[0] == pytest.approx((1.99, 2.01))


def test_confidence_band_rejects_negative_width():
    with pytest.raises(InvalidInput):
        confidence_band([ForecastPoint(offset=1, rate=2.0)], pct=-1)


def test_forecast_rejects_projection_out_of_range():
    steep = RegressionFit(slope=1e308, intercept=0.0)
    with pytest.raises(InvalidInput):
        forecast([1.0, 2.0], 3, rng=np.random.default_rng(0), noise=0.0, line=steep)
