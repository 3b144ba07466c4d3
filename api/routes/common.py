"""
Shared utilities and dependencies for API route modules.

Provides a centralized place for creating the rate source, translating rate
source failures into HTTP responses, and resolving query parameters. This
keeps individual route files thin and avoids repeating boilerplate logic.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Awaitable, Optional, Tuple, TypeVar

from fastapi import HTTPException

from config import settings
from datasources.base import RateSource
from datasources.currencies import normalize_code
from datasources.data_config import RateSourceSettings
from datasources.exceptions import PairNotFound, RateSourceError
from datasources.factory import RateSourceFactory


_T = TypeVar("_T")
_source: Optional[RateSource] = None


def get_source() -> RateSource:
    global _source
    if _source is None:
        _source = RateSourceFactory.create(RateSourceSettings())
    return _source


async def close_sources() -> None:
    global _source
    source, _source = _source, None
    if source is not None:
        await source.aclose()


async def safe_call(coro: Awaitable[_T]) -> _T:
    try:
        return await coro
    except PairNotFound as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except RateSourceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


def query_value(value: Any, cast: Any = None) -> Any:
    # Allow direct unit-test invocation without FastAPI Query parsing.
    raw = value.default if hasattr(value, "default") else value
    if raw is None or cast is None:
        return raw
    return cast(raw)


def resolve_pair(base: Any, target: Any) -> Tuple[str, str]:
    base_code = normalize_code(query_value(base) or settings.default_base_currency)
    target_code = normalize_code(query_value(target) or settings.default_target_currency)
    return base_code, target_code
