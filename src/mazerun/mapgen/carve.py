# src/mazerun/mapgen/carve.py
# Randomized depth-first carving ("recursive backtracker") over a fully walled grid.
# Coordinates are (row, col), 0-based; (0, 0) is the top-left cell.

import logging
from typing import List, Optional, Tuple

from ..grid import RC, WallGrid
from ..rng import UniformSource, pick_index

logger = logging.getLogger(__name__)

# Neighbour enumeration order: left, right, up, down. Fixed so a seeded source
# reproduces the same maze.
NEIGHBOR_OFFSETS: Tuple[RC, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


class MazeGenerator:
    def __init__(self, rng: UniformSource) -> None:
        self.rng = rng
        self.width = 0
        self.height = 0
        self.cell_size = 0.0
        self.visited: List[List[bool]] = []
        self.grid: Optional[WallGrid] = None

    def initialize(self, width: int, height: int, cell_size: float) -> None:
        assert width >= 1 and height >= 1, "maze needs at least one cell"
        assert cell_size > 0, "cell_size must be positive"
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.visited = [[False] * width for _ in range(height)]
        self.grid = WallGrid.closed(width, height, cell_size)

    def unvisited_neighbors(self, row: int, col: int) -> List[RC]:
        out = []
        for dr, dc in NEIGHBOR_OFFSETS:
            r, c = row + dr, col + dc
            if 0 <= r < self.height and 0 <= c < self.width and not self.visited[r][c]:
                out.append((r, c))
        return out

    def _remove_wall_between(self, a: RC, b: RC) -> None:
        # The wall index between two adjacent cells is the larger coordinate
        # (ceiling of the midpoint).
        if a[0] == b[0]:
            self.grid.v_walls[a[0]][max(a[1], b[1])] = False
        else:
            self.grid.h_walls[max(a[0], b[0])][a[1]] = False

    def generate(self) -> WallGrid:
        """
        Carve the maze and return the finished grid. The last element of
        ``path`` is the current cell; dead ends pop back to the previous one.
        A wall is only ever removed toward an unvisited cell, so the open
        passages form a spanning tree.
        """
        assert self.grid is not None, "initialize() must be called first"
        path: List[RC] = [(0, 0)]
        removed = 0
        while path:
            row, col = path[-1]
            self.visited[row][col] = True
            candidates = self.unvisited_neighbors(row, col)
            if not candidates:
                path.pop()
                continue
            nxt = candidates[pick_index(self.rng, len(candidates))]
            self._remove_wall_between((row, col), nxt)
            removed += 1
            path.append(nxt)

        logger.debug("carved %dx%d maze, %d walls removed", self.width, self.height, removed)
        grid = self.grid
        # visited only matters while carving
        self.visited = []
        return grid
