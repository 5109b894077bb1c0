"""
Seedable random source for maze generation and round placement.

Anything with a ``random() -> float`` method in ``[0, 1)`` can drive the
generator (``random.Random`` included). ``PMRandom`` is a small Park–Miller
stream whose output is identical on every platform and Python version, which
keeps recorded mazes stable in tests and in ``tools/mazetool.py``.
"""

from dataclasses import dataclass
from typing import Protocol

A = 16807
M = 0x7FFFFFFF  # 2^31-1


class UniformSource(Protocol):
    def random(self) -> float: ...


def pm_next(state: int) -> int:
    return (state * A) % M


def normalize_seed(seed: int) -> int:
    # 0 is a fixed point of the recurrence
    s = seed % M
    return s if s else 1


@dataclass
class PMRandom:
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(normalize_seed(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        # state is in 1..M-1, so the result is in [0, 1)
        return (self.next32() - 1) / (M - 1)


def pick_index(rng: UniformSource, n: int) -> int:
    """Uniform index in ``range(n)`` as ``floor(random() * n)``."""
    i = int(rng.random() * n)
    # guards float rounding on sources that can return values just below 1.0
    return min(i, n - 1)
