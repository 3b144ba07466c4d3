"""
Historical rate route returning the daily series for a pair together with its summary statistics.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from api.responses import HistoricalResponse
from api.routes.common import get_source, query_value, resolve_pair
from api.routes.exception import handle_exceptions
from config import settings
from services import rates_service

router = APIRouter(tags=["Historical"])


@router.get("/historical", response_model=HistoricalResponse, summary="Historical rates and statistics")
@handle_exceptions
async def historical(
    from_currency: Optional[str] = Query(default=None, alias="from"),
    to_currency: Optional[str] = Query(default=None, alias="to"),
    days: Optional[int] = Query(default=None, ge=1, le=settings.max_history_days),
) -> HistoricalResponse:
    base, target = resolve_pair(from_currency, to_currency)
    window = query_value(days, int) or settings.default_history_days
    return await rates_service.get_history(get_source(), base, target, window)
