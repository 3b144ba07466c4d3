"""
Tests for route exception translation.
"""

from __future__ import annotations

import pytest
from fastapi import HTTPException

from api.routes.exception import handle_exceptions, to_http_exception
from datasources.exceptions import PairNotFound, QueryTimeout
from engine.errors import InvalidInput


@pytest.mark.parametrize(
    "exc,status",
    [
        (InvalidInput("too short"), 400),
        (PairNotFound("XXX"), 400),
        (QueryTimeout("slow"), 502),
        (RuntimeError("boom"), 500),
    ],
)
def test_to_http_exception_status(exc, status):
    http = to_http_exception(exc)
    assert http.status_code == status
    assert http.detail == str(exc)


@pytest.mark.asyncio
async def test_async_handler_passes_http_exceptions_through():
    @handle_exceptions
    async def route():
        raise HTTPException(status_code=418, detail="teapot")

    with pytest.raises(HTTPException) as info:
        await route()
    assert info.value.status_code == 418


def test_sync_handler_wraps_errors():
    @handle_exceptions
    def route(x):
        if x < 0:
            raise InvalidInput("negative")
        return x

    assert route(2) == 2
    with pytest.raises(HTTPException) as info:
        route(-1)
    assert info.value.status_code == 400
