# src/mazerun/engine/avatar.py
# Entities placed on the maze: a continuous pixel position plus the cell it falls in.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

XY = Tuple[int, int]


def cell_of(x: float, y: float, cell_size: float) -> XY:
    return (math.floor(x / cell_size), math.floor(y / cell_size))


@dataclass(frozen=True)
class Entity:
    x: float
    y: float
    cell_size: float
    speed: float = 0.0  # pixels per second

    @classmethod
    def at_cell(cls, cell_x: int, cell_y: int, cell_size: float, speed: float = 0.0) -> "Entity":
        return cls(
            x=(cell_x + 0.5) * cell_size,
            y=(cell_y + 0.5) * cell_size,
            cell_size=cell_size,
            speed=speed,
        )

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    # Pixel position is authoritative; the cell is always derived from it.
    @property
    def cell(self) -> XY:
        return cell_of(self.x, self.y, self.cell_size)

    @property
    def cell_x(self) -> int:
        return self.cell[0]

    @property
    def cell_y(self) -> int:
        return self.cell[1]

    def distance_to(self, other: "Entity") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)
