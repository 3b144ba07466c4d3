"""
Factory for creating the configured rate source.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from connectors.exchangerate_api import ExchangeRateApiSource
from connectors.static import StaticRateSource


class RateSourceFactory:

    @staticmethod
    def create(config):
        from config import RATE_BACKEND_EXCHANGERATE_API, RATE_BACKEND_STATIC

        if config.rate_backend == RATE_BACKEND_STATIC:
            return StaticRateSource(jitter=config.synthetic_jitter, seed=config.synthetic_seed)
        if config.rate_backend == RATE_BACKEND_EXCHANGERATE_API:
            return ExchangeRateApiSource(
                config.exchangerate_base_url,
                config.exchangerate_api_key,
                timeout=config.connector_timeout,
            )
        raise ValueError("Unsupported rate backend")
