"""
Tests for conversion history route semantics.
"""

from __future__ import annotations

import pytest

from api.requests import ConversionRequest
from api.routes import conversions as conversions_route


def _req(amount, rate, src="USD", dst="EUR"):
    return ConversionRequest(amount=amount, from_currency=src, to_currency=dst, rate=rate, result=amount * rate)


@pytest.mark.asyncio
async def test_save_conversion_assigns_ids():
    first = await conversions_route.save_conversion(_req(100, 0.92))
    second = await conversions_route.save_conversion(_req(5, 151.2, dst="JPY"))
    assert (first.id, second.id) == (1, 2)
    assert second.to_currency == "JPY"
    assert first.result == pytest.approx(92.0)


@pytest.mark.asyncio
async def test_history_is_newest_first_and_limited():
    for amount in (1, 2, 3):
        await conversions_route.save_conversion(_req(amount, 2.0))

    rows = await conversions_route.conversion_history()
    assert [r.amount for r in rows] == [3, 2, 1]

    limited = await conversions_route.conversion_history(limit=2)
    assert [r.amount for r in limited] == [3, 2]


@pytest.mark.asyncio
async def test_conversion_dump_is_camel_case():
    row = await conversions_route.save_conversion(_req(10, 1.5))
    dumped = row.model_dump(by_alias=True)
    assert {"fromCurrency", "toCurrency", "createdAt"} <= set(dumped)
