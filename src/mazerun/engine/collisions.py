# src/mazerun/engine/collisions.py
# Continuous movement against the wall grid (no pygame).
#
# The avatar is a point with a square footprint of half-width `wall_thickness`.
# Moving along one axis is blocked by
#   a) the wall straight ahead of the current cell, or
#   b/c) a wall of the next cell along the travel axis in the neighbouring column/row,
#        when the footprint overlaps that side of the cell (corner clipping).
# A blocked move stops `wall_thickness` short of the cell edge. Each step is
# capped at one cell so a single tick can never jump past a wall.

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Tuple

from ..grid import WallGrid
from .avatar import XY, Entity, cell_of
from .intent import RESOLVE_ORDER, Direction

Pos = Tuple[float, float]


def is_blocked(grid: WallGrid, direction: Direction, cell: XY, pos: Pos, wall_thickness: float) -> bool:
    cx, cy = cell
    x, y = pos
    cs = grid.cell_size
    near_right = (cx + 1) * cs - x < wall_thickness
    near_left = x - cx * cs < wall_thickness
    near_bottom = (cy + 1) * cs - y < wall_thickness
    near_top = y - cy * cs < wall_thickness

    # The straight-ahead check comes first: when it is False the neighbour
    # row/column exists, because the outer rim is always walled.
    if direction is Direction.UP:
        return (
            grid.has_wall_above(cy, cx)
            or (near_right and grid.has_wall_right(cy - 1, cx))
            or (near_left and grid.has_wall_left(cy - 1, cx))
        )
    if direction is Direction.DOWN:
        return (
            grid.has_wall_below(cy, cx)
            or (near_right and grid.has_wall_right(cy + 1, cx))
            or (near_left and grid.has_wall_left(cy + 1, cx))
        )
    if direction is Direction.LEFT:
        return (
            grid.has_wall_left(cy, cx)
            or (near_bottom and grid.has_wall_below(cy, cx - 1))
            or (near_top and grid.has_wall_above(cy, cx - 1))
        )
    return (
        grid.has_wall_right(cy, cx)
        or (near_bottom and grid.has_wall_below(cy, cx + 1))
        or (near_top and grid.has_wall_above(cy, cx + 1))
    )


def resolve_movement(
    position: Pos,
    cell_index: XY,
    speed: float,
    intent: Iterable[Direction],
    delta_seconds: float,
    wall_thickness: float,
    grid: WallGrid,
) -> Pos:
    """
    Return the new (x, y) after holding `intent` for `delta_seconds`.
    Directions are applied up, down, left, right; the cell index is refreshed
    after each one so horizontal checks see the row reached this tick.
    """
    assert wall_thickness > 0, "wall_thickness must be positive"
    active = set(intent)
    x, y = position
    cx, cy = cell_index
    cs = grid.cell_size
    # capped for free moves too, so one tick never crosses more than one cell
    reach = min(speed * delta_seconds, cs)

    for d in RESOLVE_ORDER:
        if d not in active:
            continue
        blocked = is_blocked(grid, d, (cx, cy), (x, y), wall_thickness)
        if d is Direction.UP:
            y = max(y - reach, cy * cs + wall_thickness) if blocked else y - reach
        elif d is Direction.DOWN:
            y = min(y + reach, (cy + 1) * cs - wall_thickness) if blocked else y + reach
        elif d is Direction.LEFT:
            x = max(x - reach, cx * cs + wall_thickness) if blocked else x - reach
        else:
            x = min(x + reach, (cx + 1) * cs - wall_thickness) if blocked else x + reach
        cx, cy = cell_of(x, y, cs)

    return (x, y)


def step(entity: Entity, intent: Iterable[Direction], delta_seconds: float, wall_thickness: float, grid: WallGrid) -> Entity:
    x, y = resolve_movement(
        entity.pos, entity.cell, entity.speed, intent, delta_seconds, wall_thickness, grid
    )
    return replace(entity, x=x, y=y)
