"""
Synthetic rate history for sources without real historical data: independent uniform jitter around a base rate.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from config import settings
from engine.errors import InvalidInput


def synthetic_series(
    base_rate: float,
    days: int,
    jitter: Optional[float] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[float]:
    if jitter is None:
        jitter = settings.synthetic_jitter
    if not np.isfinite(base_rate) or base_rate <= 0:
        raise InvalidInput(f"base rate must be a positive number, got {base_rate}")
    if days < 1:
        raise InvalidInput(f"synthetic history needs at least 1 day, got {days}")
    if not 0 <= jitter < 1:
        raise InvalidInput(f"jitter must be within [0, 1), got {jitter}")
    if rng is None:
        rng = np.random.default_rng()

    offsets = (rng.random(days) - 0.5) * 2.0 * jitter
    return [float(v) for v in base_rate * (1.0 + offsets)]
