"""
Conversion history routes.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from api.requests import ConversionRequest
from api.responses import ConversionOut
from api.routes.common import query_value
from api.routes.exception import handle_exceptions
from services import rates_service

router = APIRouter(tags=["Conversions"])


@router.post("/conversions", response_model=ConversionOut, status_code=201, summary="Record a conversion")
@handle_exceptions
async def save_conversion(req: ConversionRequest) -> ConversionOut:
    return await rates_service.record_conversion(req)


@router.get("/conversions", response_model=List[ConversionOut], summary="Conversion history, newest first")
@handle_exceptions
async def conversion_history(limit: Optional[int] = Query(default=None, ge=1)) -> List[ConversionOut]:
    return await rates_service.list_conversions(query_value(limit, int))
