# Render a maze to a still image using Pillow (no display needed).

from __future__ import annotations

import os
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from ..grid import WallGrid

RGBA = Tuple[int, int, int, int]

FLOOR: RGBA = (236, 232, 220, 255)
WALL: RGBA = (0, 0, 0, 255)
AVATAR: RGBA = (40, 120, 220, 255)
GOAL: RGBA = (230, 180, 20, 255)


def _marker(draw: ImageDraw.ImageDraw, cell: Tuple[int, int], cell_size: float, margin: int, fill: RGBA) -> None:
    cx, cy = cell
    r = cell_size * 0.25
    x = margin + (cx + 0.5) * cell_size
    y = margin + (cy + 0.5) * cell_size
    draw.ellipse((x - r, y - r, x + r, y + r), fill=fill)


def render_maze_image(
    grid: WallGrid,
    *,
    line_width: int = 15,
    margin: int = 8,
    avatar_cell: Optional[Tuple[int, int]] = None,
    goal_cell: Optional[Tuple[int, int]] = None,
) -> Image.Image:
    """Draw walls as thick strokes; optional avatar/goal markers are given as (cell_x, cell_y)."""
    cs = grid.cell_size
    w = int(grid.width * cs) + 2 * margin
    h = int(grid.height * cs) + 2 * margin
    img = Image.new("RGBA", (w, h), FLOOR)
    draw = ImageDraw.Draw(img)
    ext = line_width / 2

    for row in range(grid.height + 1):
        for col in range(grid.width):
            if grid.h_walls[row][col]:
                y = margin + row * cs
                draw.line((margin + col * cs - ext, y, margin + (col + 1) * cs + ext, y), fill=WALL, width=line_width)
    for row in range(grid.height):
        for col in range(grid.width + 1):
            if grid.v_walls[row][col]:
                x = margin + col * cs
                draw.line((x, margin + row * cs - ext, x, margin + (row + 1) * cs + ext), fill=WALL, width=line_width)

    if goal_cell is not None:
        _marker(draw, goal_cell, cs, margin, GOAL)
    if avatar_cell is not None:
        _marker(draw, avatar_cell, cs, margin, AVATAR)
    return img


def save_maze_png(grid: WallGrid, out_png: str, **kwargs) -> None:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_maze_image(grid, **kwargs).save(out_png)
