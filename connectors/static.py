# connectors/static.py

import logging
from datetime import datetime, time, timedelta, timezone
from typing import List, Optional

import numpy as np

from datasources.base import RatePoint, RateSource
from datasources.currencies import all_currencies, cross_rate, normalize_code
from datasources.exceptions import PairNotFound
from engine.history import synthetic_series

log = logging.getLogger(__name__)


class StaticRateSource(RateSource):
    """Rates from the shared hardcoded table, with jittered synthetic history."""

    name = "static"

    def __init__(self, jitter: Optional[float] = None, seed: Optional[int] = None):
        self.jitter = jitter
        self.seed = seed

    def _rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    def _base_rate(self, base: str, target: str) -> float:
        rate = cross_rate(base, target)
        if rate is None:
            raise PairNotFound(f"Unsupported currency pair {normalize_code(base)}/{normalize_code(target)}")
        return rate

    async def get_rate(self, base: str, target: str) -> float:
        return self._base_rate(base, target)

    async def get_history(self, base: str, target: str, days: int) -> List[RatePoint]:
        base_rate = self._base_rate(base, target)
        values = synthetic_series(base_rate, days, jitter=self.jitter, rng=self._rng())
        today = datetime.combine(datetime.now(timezone.utc).date(), time.min, tzinfo=timezone.utc)
        start = today - timedelta(days=days - 1)
        log.debug("Synthetic history %s/%s: %d day(s) around %.6g", base, target, days, base_rate)
        return [RatePoint(date=start + timedelta(days=i), rate=v) for i, v in enumerate(values)]

    async def list_currencies(self) -> List[tuple[str, str]]:
        return [(c.code, c.name) for c in all_currencies()]
