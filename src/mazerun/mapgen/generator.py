# src/mazerun/mapgen/generator.py
# Public entry point: build a fresh maze in one call.

import random
from typing import Optional

from ..grid import WallGrid
from ..rng import PMRandom, UniformSource
from .carve import MazeGenerator


def generate_maze(
    width: int,
    height: int,
    cell_size: float,
    rng: Optional[UniformSource] = None,
) -> WallGrid:
    if width < 1 or height < 1:
        raise ValueError(f"maze must be at least 1x1 cells, got {width}x{height}")
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    gen = MazeGenerator(rng if rng is not None else random.Random())
    gen.initialize(width, height, cell_size)
    return gen.generate()


def generate_seeded(width: int, height: int, cell_size: float, seed: int) -> WallGrid:
    """Reproducible maze for a given seed (Park–Miller stream)."""
    return generate_maze(width, height, cell_size, rng=PMRandom.from_seed(seed))
