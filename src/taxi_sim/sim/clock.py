# sim/clock.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TickClock:
    """Discrete simulation time. Tick 0 is "before the first step"."""

    tick: int = 0

    @property
    def now(self) -> int:
        return self.tick

    def advance(self) -> int:
        self.tick += 1
        return self.tick
