"""
Rate source configuration: which backend serves rates and how to reach it.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings
from config import (
    RATE_BACKEND_STATIC,
    RATE_BACKEND_EXCHANGERATE_API,
    RATECAST_RATE_BACKEND,
    RATECAST_EXCHANGERATE_API_KEY,
    RATECAST_EXCHANGERATE_BASE_URL,
    RATECAST_CONNECTOR_TIMEOUT,
    RATECAST_STARTUP_TIMEOUT,
)

class RateSourceSettings(BaseSettings):
    rate_backend: str = RATECAST_RATE_BACKEND
    exchangerate_api_key: str = RATECAST_EXCHANGERATE_API_KEY
    exchangerate_base_url: str = RATECAST_EXCHANGERATE_BASE_URL
    connector_timeout: int = RATECAST_CONNECTOR_TIMEOUT
    startup_timeout: int = RATECAST_STARTUP_TIMEOUT
    synthetic_jitter: float = 0.01
    synthetic_seed: Optional[int] = None

    @field_validator("exchangerate_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        return str(v).rstrip("/") if v is not None else v

    @field_validator("rate_backend", mode="before")
    @classmethod
    def validate_rate_backend(cls, v: str) -> str:
        value = str(v or "").strip().lower()
        if value not in {RATE_BACKEND_STATIC, RATE_BACKEND_EXCHANGERATE_API}:
            raise ValueError(f"Unsupported rate backend: {value!r}")
        return value

    model_config = {"env_prefix": "RATECAST_", "extra": "ignore"}
