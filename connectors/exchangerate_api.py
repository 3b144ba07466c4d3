# connectors/exchangerate_api.py

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx

from config import settings
from datasources.base import RatePoint, RateSource
from datasources.currencies import normalize_code
from datasources.exceptions import (
    InvalidQuery,
    PairNotFound,
    QueryTimeout,
    RateSourceError,
    RateSourceUnavailable,
)
from datasources.retry import retry

log = logging.getLogger(__name__)

_NOT_FOUND_ERRORS = {"unsupported-code", "malformed-request"}


def _error_body(response: httpx.Response) -> Optional[Dict[str, Any]]:
    """The API's own error payload, if a non-2xx reply carries one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("result") == "error":
        return data
    return None


def _parse_date(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class ExchangeRateApiSource(RateSource):
    """Client for the exchangerate-api.com v6 REST API."""

    name = "exchangerate_api"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: int = 15,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = str(base_url).rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @property
    def health_url(self) -> str:
        return self._url("codes")

    def _url(self, *parts: str) -> str:
        return "/".join([self.base_url, self.api_key, *parts])

    @retry(
        attempts=settings.connector_retry_attempts,
        delay=settings.connector_retry_delay,
        backoff=settings.connector_retry_backoff,
    )
    async def _get(self, *parts: str) -> Dict[str, Any]:
        url = self._url(*parts)
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            data = _error_body(e.response)
            if data is None:
                raise InvalidQuery(f"Rate API request failed [{e.response.status_code}]: {e.response.text}") from e
        except httpx.TimeoutException as e:
            raise QueryTimeout("Rate API request timed out") from e
        except httpx.RequestError as e:
            raise RateSourceUnavailable(f"Cannot reach rate API at {self.base_url}") from e
        except ValueError as e:
            raise InvalidQuery("Rate API returned a non-JSON body") from e

        if data.get("result") != "success":
            error = data.get("error-type") or data.get("error") or "unknown error"
            if error in _NOT_FOUND_ERRORS:
                raise PairNotFound(f"Rate API rejected request: {error}")
            raise RateSourceError(f"Rate API error: {error}")
        return data

    async def get_rate(self, base: str, target: str) -> float:
        data = await self._get("pair", normalize_code(base), normalize_code(target))
        try:
            return float(data["conversion_rate"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidQuery("Rate API response has no conversion_rate") from e

    async def get_history(self, base: str, target: str, days: int) -> List[RatePoint]:
        data = await self._get("history", normalize_code(base), normalize_code(target), str(days))
        raw = data.get("conversion_rates") or {}
        points = []
        for date_str, rate in raw.items():
            try:
                points.append(RatePoint(date=_parse_date(date_str), rate=float(rate)))
            except (TypeError, ValueError):
                log.warning("Skipping malformed history entry %r=%r", date_str, rate)
        points.sort(key=lambda p: p.date)
        return points

    async def list_currencies(self) -> List[tuple[str, str]]:
        data = await self._get("codes")
        return [(str(code), str(name)) for code, name in data.get("supported_codes") or []]

    async def aclose(self) -> None:
        await self._client.aclose()
