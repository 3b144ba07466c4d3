"""
Base class for rate sources.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List


@dataclass(frozen=True)
class RatePoint:
    date: datetime
    rate: float


class RateSource(ABC):
    name: str = ""

    @property
    def health_url(self) -> str:
        """Probe URL for readiness checks; empty when there is nothing to wait for."""
        return ""

    @abstractmethod
    async def get_rate(self, base: str, target: str) -> float: ...

    @abstractmethod
    async def get_history(self, base: str, target: str, days: int) -> List[RatePoint]:
        """Daily rates for the pair, oldest first."""

    @abstractmethod
    async def list_currencies(self) -> List[tuple[str, str]]: ...

    async def aclose(self) -> None:
        return None
