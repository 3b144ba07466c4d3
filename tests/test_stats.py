"""
Test cases for rate series statistics.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.errors import InvalidInput
from engine.stats import summarize


def test_constant_series_has_no_volatility():
    assert summarize([100, 100, 100]).volatility == 0


def test_summary_values():
    s = summarize([0.9, 1.0, 1.1])
    assert s.average == pytest.approx(1.0)
    assert s.min == 0.9
    assert s.max == 1.1
    assert s.volatility == 20.0


def test_volatility_rounds_to_two_places():
    s = summarize([0.91234, 0.93456, 0.92011])
    assert s.volatility == round(s.volatility, 2)
    raw = summarize([0.91234, 0.93456, 0.92011], precision=None)
    assert raw.volatility == pytest.approx((0.93456 - 0.91234) / raw.average * 100)


def test_single_point():
    s = summarize([1.25])
    assert (s.average, s.min, s.max, s.volatility) == (1.25, 1.25, 1.25, 0.0)


def test_empty_series_rejected():
    with pytest.raises(InvalidInput):
        summarize([])


def test_zero_average_rejected():
    with pytest.raises(InvalidInput):
        summarize([0.0, 0.0])


def test_overflowing_average_rejected():
    with pytest.raises(InvalidInput):
        summarize([1.7e308, 1.7e308])
