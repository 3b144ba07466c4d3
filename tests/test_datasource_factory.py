"""
Tests for rate source factory construction and settings validation.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from config import RATE_BACKEND_EXCHANGERATE_API, RATE_BACKEND_STATIC
from datasources.data_config import RateSourceSettings
from datasources.factory import RateSourceFactory


def _cfg(**overrides):
    base = dict(
        rate_backend=RATE_BACKEND_STATIC,
        exchangerate_base_url="https://rates.example",
        exchangerate_api_key="key",
        connector_timeout=42,
        synthetic_jitter=0.02,
        synthetic_seed=7,
    )
    base.update(overrides)
    return SimpleNamespace(**base)


def test_factory_builds_static_source_with_jitter_and_seed(monkeypatch):
    captured = {}

    def fake_static(jitter=None, seed=None):
        captured.update(jitter=jitter, seed=seed)
        return "static"

    monkeypatch.setattr("datasources.factory.StaticRateSource", fake_static)
    assert RateSourceFactory.create(_cfg()) == "static"
    assert captured == {"jitter": 0.02, "seed": 7}


def test_factory_passes_connector_timeout_to_remote_source(monkeypatch):
    captured = {}

    def fake_remote(url, key, timeout=None):
        captured.update(url=url, key=key, timeout=timeout)
        return "remote"

    monkeypatch.setattr("datasources.factory.ExchangeRateApiSource", fake_remote)
    assert RateSourceFactory.create(_cfg(rate_backend=RATE_BACKEND_EXCHANGERATE_API)) == "remote"
    assert captured == {"url": "https://rates.example", "key": "key", "timeout": 42}


def test_factory_rejects_unknown_backend():
    with pytest.raises(ValueError):
        RateSourceFactory.create(_cfg(rate_backend="fixer"))


def test_settings_normalise_backend_and_url():
    cfg = RateSourceSettings(rate_backend=" ExchangeRate_API ", exchangerate_base_url="https://x.example/v6/")
    assert cfg.rate_backend == RATE_BACKEND_EXCHANGERATE_API
    assert cfg.exchangerate_base_url == "https://x.example/v6"
    with pytest.raises(ValidationError):
        RateSourceSettings(rate_backend="fixer")


@pytest.mark.asyncio
async def test_get_source_is_cached_until_closed(fresh_source):
    first = fresh_source.get_source()
    assert fresh_source.get_source() is first
    await fresh_source.close_sources()
    assert fresh_source._source is None
