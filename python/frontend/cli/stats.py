"""Running min / mean / max over a stream of samples."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class StatsCollector:
    min: float = math.inf
    max: float = -math.inf
    avg: float = 0.0
    n: int = 0

    def observe(self, sample: float) -> None:
        self.n += 1
        self.min = min(self.min, sample)
        self.max = max(self.max, sample)
        self.avg += (sample - self.avg) / self.n

    def __str__(self) -> str:
        return f"[{self.min:.3f}; {self.avg:.3f}; {self.max:.3f}]"
