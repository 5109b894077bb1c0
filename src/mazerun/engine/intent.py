# src/mazerun/engine/intent.py
# Directional intent: the set of directions held this frame, independent of the
# input backend. The runner feeds key-down/key-up events through a key map.

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Hashable, Mapping, Set


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Resolution order inside one tick: vertical before horizontal.
RESOLVE_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

Intent = FrozenSet[Direction]
NO_INTENT: Intent = frozenset()


class KeyState:
    """Tracks which mapped keys are down and reports them as an intent."""

    def __init__(self, keymap: Mapping[Hashable, Direction]) -> None:
        self.keymap: Dict[Hashable, Direction] = dict(keymap)
        self._down: Set[Hashable] = set()

    def press(self, key: Hashable) -> None:
        if key in self.keymap:
            self._down.add(key)

    def release(self, key: Hashable) -> None:
        self._down.discard(key)

    def clear(self) -> None:
        self._down.clear()

    def intent(self) -> Intent:
        return frozenset(self.keymap[k] for k in self._down)
