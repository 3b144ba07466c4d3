"""
Client code for Redis access, with in-memory fallback if Redis is unavailable.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Optional, TypeVar

from config import REDIS_URL, settings

log = logging.getLogger(__name__)

_T = TypeVar("_T")

_MAX_FALLBACK_SIZE = int(settings.store_fallback_max_items)
_REDIS_RETRY_COOLDOWN_SECONDS = float(settings.store_redis_retry_cooldown_seconds)
_REDIS_OP_TIMEOUT_SECONDS = 0.5


class _Memory:
    """Process-local stand-in for the handful of Redis commands the store uses."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.lists: dict[str, list[str]] = {}
        self.counters: dict[str, int] = {}

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def put(self, key: str, value: str) -> None:
        if key in self.values or len(self.values) < _MAX_FALLBACK_SIZE:
            self.values[key] = value

    def incr(self, key: str) -> int:
        self.counters[key] = self.counters.get(key, 0) + 1
        return self.counters[key]

    def push(self, key: str, value: str, max_len: Optional[int]) -> None:
        items = self.lists.setdefault(key, [])
        items.append(value)
        if max_len and len(items) > max_len:
            del items[:-max_len]

    def items(self, key: str) -> list[str]:
        return list(self.lists.get(key, []))

    def drop(self, key: str) -> None:
        self.values.pop(key, None)
        self.lists.pop(key, None)
        self.counters.pop(key, None)

    def clear(self) -> None:
        self.values.clear()
        self.lists.clear()
        self.counters.clear()


_memory = _Memory()
_redis_client: Any = None
_using_fallback = False
_init_lock = asyncio.Lock()
_retry_after_monotonic: float = 0.0


async def get_redis() -> Any:
    global _redis_client, _using_fallback, _retry_after_monotonic

    if _redis_client is not None:
        return _redis_client
    if time.monotonic() < _retry_after_monotonic:
        _using_fallback = True
        return None

    async with _init_lock:
        if _redis_client is not None:
            return _redis_client
        if time.monotonic() < _retry_after_monotonic:
            _using_fallback = True
            return None
        try:
            import redis.asyncio as aioredis

            conn = aioredis.from_url(
                REDIS_URL,
                decode_responses=True,
                socket_connect_timeout=_REDIS_OP_TIMEOUT_SECONDS,
                socket_timeout=_REDIS_OP_TIMEOUT_SECONDS,
            )
            await asyncio.wait_for(conn.ping(), timeout=_REDIS_OP_TIMEOUT_SECONDS)
        except Exception as exc:
            _retry_after_monotonic = time.monotonic() + max(0.0, _REDIS_RETRY_COOLDOWN_SECONDS)
            if not _using_fallback:
                log.warning("Redis unavailable (%s), using in-memory fallback", exc)
                _using_fallback = True
            return None
        _redis_client = conn
        _retry_after_monotonic = 0.0
        _using_fallback = False
        log.info("Redis connected: %s", REDIS_URL)
        return _redis_client


async def _run(
    command: str,
    key: str,
    call: Callable[[Any], Awaitable[_T]],
    fallback: Callable[[], _T],
) -> _T:
    conn = await get_redis()
    if conn is None:
        return fallback()
    try:
        return await asyncio.wait_for(call(conn), timeout=_REDIS_OP_TIMEOUT_SECONDS)
    except Exception as exc:
        log.debug("Redis %s error %s: %s", command, key, exc)
        return fallback()


async def redis_get(key: str) -> Optional[str]:
    return await _run("GET", key, lambda c: c.get(key), lambda: _memory.get(key))


async def redis_set(key: str, value: str, ttl: Optional[int] = None) -> None:
    def call(c: Any) -> Awaitable[Any]:
        return c.setex(key, ttl, value) if ttl else c.set(key, value)

    await _run("SET", key, call, lambda: _memory.put(key, value))


async def redis_delete(key: str) -> None:
    await _run("DEL", key, lambda c: c.delete(key), lambda: _memory.drop(key))


async def redis_incr(key: str) -> int:
    return int(await _run("INCR", key, lambda c: c.incr(key), lambda: _memory.incr(key)))


async def redis_rpush(key: str, value: str, ttl: Optional[int] = None, max_len: Optional[int] = None) -> None:
    def call(c: Any) -> Awaitable[Any]:
        pipe = c.pipeline()
        pipe.rpush(key, value)
        if max_len:
            pipe.ltrim(key, -max_len, -1)
        if ttl:
            pipe.expire(key, ttl)
        return pipe.execute()

    await _run("RPUSH", key, call, lambda: _memory.push(key, value, max_len))


async def redis_lrange(key: str) -> list[str]:
    return await _run("LRANGE", key, lambda c: c.lrange(key, 0, -1), lambda: _memory.items(key))


def is_using_fallback() -> bool:
    return _using_fallback


def reset_fallback() -> None:
    _memory.clear()
