# src/mazerun/engine/timing.py
# Round timer and in-memory best time. The clock is injected so tests can drive it.

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

Clock = Callable[[], float]


@dataclass
class RoundTimer:
    clock: Clock = time.monotonic
    started_at: float = 0.0
    best: Optional[float] = None  # None until the first finished round
    _running: bool = field(default=False, repr=False)

    def start(self) -> None:
        self.started_at = self.clock()
        self._running = True

    def elapsed(self) -> float:
        if not self._running:
            return 0.0
        return self.clock() - self.started_at

    def finish(self) -> Tuple[float, bool]:
        """Stop the round; return (elapsed seconds, whether it set a new best)."""
        t = self.elapsed()
        self._running = False
        improved = self.best is None or t < self.best
        if improved:
            self.best = t
        return t, improved
