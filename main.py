"""
Entry point for the Ratecast currency dashboard API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from api.routes import router
from api.routes.common import close_sources, get_source
from config import settings
from datasources.base import RateSource
from datasources.exceptions import BackendStartupTimeout

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)

_backend_ready = False
_backend_status: Dict[str, str] = {}


async def wait_for(
    name: str,
    url: str,
    timeout: float,
    accept_status: tuple = (200,),
) -> None:
    deadline = time.monotonic() + timeout
    attempt = 0
    async with httpx.AsyncClient() as client:
        while time.monotonic() < deadline:
            attempt += 1
            try:
                resp = await client.get(url, timeout=3.0)
                if resp.status_code in accept_status:
                    log.info("%s ready (attempt %d, status %d)", name, attempt, resp.status_code)
                    return
                log.debug("%s probe returned %d (attempt %d)", name, resp.status_code, attempt)
            except httpx.HTTPError as exc:
                log.debug("%s not reachable (attempt %d): %s", name, attempt, exc)
            await asyncio.sleep(2)
    raise BackendStartupTimeout(f"{name} did not become ready within {timeout}s")


async def _wait_for_source(source: RateSource, timeout: float) -> None:
    global _backend_ready

    if not source.health_url:
        _backend_status[source.name] = "ready"
        _backend_ready = True
        return

    _backend_status[source.name] = "waiting"
    log.info("Rate source readiness check starting (timeout=%ds) ...", timeout)
    try:
        await wait_for(source.name, source.health_url, timeout)
    except BackendStartupTimeout as exc:
        log.error("%s failed readiness: %s", source.name, exc)
        _backend_status[source.name] = f"failed: {exc}"
        _backend_ready = False
        return
    _backend_status[source.name] = "ready"
    _backend_ready = True


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    source = get_source()
    log.info("Serving rates from %s backend", source.name)
    readiness_task = asyncio.create_task(_wait_for_source(source, settings.startup_timeout))
    try:
        yield
    finally:
        readiness_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await readiness_task
        await close_sources()


app = FastAPI(
    title="Ratecast",
    description="Currency conversion, historical rates and trend-based forecasts.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix="/api")


@app.get("/api/ready", tags=["health"], summary="Rate source readiness probe")
async def ready() -> JSONResponse:
    code = 200 if _backend_ready else 503
    return JSONResponse(
        status_code=code,
        content={"ready": _backend_ready, "backends": _backend_status},
    )


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )
