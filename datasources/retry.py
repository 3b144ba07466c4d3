"""
Retry decorator for rate source calls.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Type, TypeVar, Tuple, cast

from datasources.exceptions import QueryTimeout, RateSourceUnavailable

F = TypeVar("F", bound=Callable[..., Any])

log = logging.getLogger(__name__)

TRANSIENT_ERRORS: Tuple[Type[Exception], ...] = (RateSourceUnavailable, QueryTimeout)


def retry(
    *,
    attempts: int = 3,
    delay: float = 0.5,
    backoff: float = 2.0,
    exceptions: Tuple[Type[Exception], ...] = TRANSIENT_ERRORS,
) -> Callable[[F], F]:
    """Retry the wrapped callable on ``exceptions``, sleeping ``delay`` then
    ``delay * backoff`` and so on between attempts. The last error is re-raised.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                wait = delay
                for attempt in range(1, attempts + 1):
                    try:
                        return await func(*args, **kwargs)
                    except exceptions as exc:
                        if attempt >= attempts:
                            raise
                        log.warning("%s failed (attempt %d/%d): %s", func.__qualname__, attempt, attempts, exc)
                        await asyncio.sleep(wait)
                        wait *= backoff

            return cast(F, async_wrapper)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            wait = delay
            for attempt in range(1, attempts + 1):
                try:
                    return func(*args, **kwargs)
                except exceptions as exc:
                    if attempt >= attempts:
                        raise
                    log.warning("%s failed (attempt %d/%d): %s", func.__qualname__, attempt, attempts, exc)
                    time.sleep(wait)
                    wait *= backoff

        return cast(F, sync_wrapper)

    return decorator
