"""
Constants and configuration for Ratecast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

from engine.enums import ClassificationMode, PercentChangeSource


REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
RATES_TTL: int = int(os.getenv("RATES_TTL", "7776000"))
CONVERSIONS_TTL: int = int(os.getenv("CONVERSIONS_TTL", "2592000"))

RATE_BACKEND_STATIC = "static"
RATE_BACKEND_EXCHANGERATE_API = "exchangerate_api"

RATECAST_RATE_BACKEND = os.getenv("RATECAST_RATE_BACKEND", RATE_BACKEND_STATIC).lower()
RATECAST_EXCHANGERATE_API_KEY = os.getenv("EXCHANGERATE_API_KEY", "DEMO_API_KEY")
RATECAST_EXCHANGERATE_BASE_URL = os.getenv(
    "RATECAST_EXCHANGERATE_BASE_URL", "https://v6.exchangerate-api.com/v6"
).rstrip("/")

RATECAST_CONNECTOR_TIMEOUT = int(os.getenv("RATECAST_CONNECTOR_TIMEOUT", "15"))
RATECAST_STARTUP_TIMEOUT = int(os.getenv("RATECAST_STARTUP_TIMEOUT", "30"))

DEFAULT_BASE_CURRENCY = "USD"
DEFAULT_TARGET_CURRENCY = "EUR"

HEALTH_PATH = "/ready"


class Settings(BaseSettings):
    rate_backend: str = RATECAST_RATE_BACKEND
    exchangerate_api_key: str = RATECAST_EXCHANGERATE_API_KEY
    exchangerate_base_url: str = RATECAST_EXCHANGERATE_BASE_URL

    connector_timeout: int = RATECAST_CONNECTOR_TIMEOUT
    startup_timeout: int = RATECAST_STARTUP_TIMEOUT
    connector_retry_attempts: int = 3
    connector_retry_delay: float = 0.5
    connector_retry_backoff: float = 2.0

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000

    default_base_currency: str = DEFAULT_BASE_CURRENCY
    default_target_currency: str = DEFAULT_TARGET_CURRENCY

    # historical endpoint
    default_history_days: int = 30
    max_history_days: int = 365
    statistics_precision: int = 2

    # forecast endpoint
    default_forecast_days: int = 30
    max_forecast_days: int = 365
    # history window loaded before fitting; more data than the chart shows
    forecast_history_days: int = 90
    # below this many stored records the history is refetched from the source
    forecast_min_stored_points: int = 7
    # full width of the uniform noise added to each forecast point
    forecast_noise_amplitude: float = 0.002
    # unset means fresh noise per request
    forecast_noise_seed: Optional[int] = None
    # "forecast", "fitted" or "series"
    forecast_change_source: str = "forecast"
    # "slope" or "percent_change"
    forecast_classification_mode: str = "percent_change"
    forecast_band_pct: float = 0.5
    forecast_percent_precision: int = 2
    forecast_expected_precision: int = 4

    # trend classification thresholds
    trend_slope_threshold: float = 0.0001
    trend_percent_threshold: float = 0.5

    # R² confidence clamp, in percent
    confidence_floor: float = 50.0
    confidence_ceiling: float = 95.0

    # synthetic history for the static rate backend
    synthetic_jitter: float = 0.01
    synthetic_seed: Optional[int] = None

    # store
    conversions_max_items: int = 1000
    rates_max_items_per_pair: int = 5000
    store_redis_retry_cooldown_seconds: float = 10.0
    store_fallback_max_items: int = 10_000

    @field_validator("forecast_change_source", mode="before")
    @classmethod
    def validate_change_source(cls, v: str) -> str:
        value = str(v or "").strip().lower()
        if value not in {s.value for s in PercentChangeSource}:
            raise ValueError(f"Unsupported forecast change source: {value!r}")
        return value

    @field_validator("forecast_classification_mode", mode="before")
    @classmethod
    def validate_classification_mode(cls, v: str) -> str:
        value = str(v or "").strip().lower()
        if value not in {m.value for m in ClassificationMode}:
            raise ValueError(f"Unsupported classification mode: {value!r}")
        return value

    model_config = {
        "env_prefix": "RATECAST_",
        "extra": "ignore",
    }


settings = Settings()
