"""
Current exchange rate and supported currency routes.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from api.responses import CurrencyOut, RateResponse
from api.routes.common import get_source, resolve_pair
from api.routes.exception import handle_exceptions
from services import rates_service

router = APIRouter(tags=["Rates"])


@router.get("/rate", response_model=RateResponse, summary="Current exchange rate for a currency pair")
@handle_exceptions
async def current_rate(
    from_currency: Optional[str] = Query(default=None, alias="from"),
    to_currency: Optional[str] = Query(default=None, alias="to"),
) -> RateResponse:
    base, target = resolve_pair(from_currency, to_currency)
    return await rates_service.get_current_rate(get_source(), base, target)


@router.get("/currencies", response_model=List[CurrencyOut], summary="Supported currencies")
@handle_exceptions
async def currencies() -> List[CurrencyOut]:
    return await rates_service.list_currencies(get_source())
