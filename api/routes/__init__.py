"""
Routes initialization for the dashboard API.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health import router as health_router
from api.routes.rates import router as rates_router
from api.routes.historical import router as historical_router
from api.routes.forecast import router as forecast_router
from api.routes.conversions import router as conversions_router

router = APIRouter()

router.include_router(health_router)
router.include_router(rates_router)
router.include_router(historical_router)
router.include_router(forecast_router)
router.include_router(conversions_router)

__all__ = ["router"]
