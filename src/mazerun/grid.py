from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

RC = Tuple[int, int]  # (row, col)


class Edge(Enum):
    ABOVE = "above"
    BELOW = "below"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class WallGrid:
    """
    Wall layout of a width x height maze.

    h_walls[row][col] is the top edge of cell (row, col); there are height+1 rows
    so the last one is the bottom rim. v_walls[row][col] is the left edge of
    cell (row, col); there are width+1 columns so the last one is the right rim.
    """
    width: int
    height: int
    cell_size: float
    h_walls: List[List[bool]]
    v_walls: List[List[bool]]

    @classmethod
    def closed(cls, width: int, height: int, cell_size: float) -> "WallGrid":
        # Every edge starts walled; carving removes them.
        h = [[True] * width for _ in range(height + 1)]
        v = [[True] * (width + 1) for _ in range(height)]
        return cls(width=width, height=height, cell_size=cell_size, h_walls=h, v_walls=v)

    def has_wall_above(self, row: int, col: int) -> bool:
        return self.h_walls[row][col]

    def has_wall_below(self, row: int, col: int) -> bool:
        return self.h_walls[row + 1][col]

    def has_wall_left(self, row: int, col: int) -> bool:
        return self.v_walls[row][col]

    def has_wall_right(self, row: int, col: int) -> bool:
        return self.v_walls[row][col + 1]

    def has_wall(self, edge: Edge, row: int, col: int) -> bool:
        if edge is Edge.ABOVE:
            return self.has_wall_above(row, col)
        if edge is Edge.BELOW:
            return self.has_wall_below(row, col)
        if edge is Edge.LEFT:
            return self.has_wall_left(row, col)
        return self.has_wall_right(row, col)

    def open_neighbors(self, row: int, col: int) -> List[RC]:
        """Cells reachable from (row, col) in one step, i.e. not separated by a wall."""
        out = []
        if not self.has_wall_left(row, col):
            out.append((row, col - 1))
        if not self.has_wall_right(row, col):
            out.append((row, col + 1))
        if not self.has_wall_above(row, col):
            out.append((row - 1, col))
        if not self.has_wall_below(row, col):
            out.append((row + 1, col))
        return out

    def removed_wall_count(self) -> int:
        # Only interior edges can be removed.
        closed_total = (self.height + 1) * self.width + self.height * (self.width + 1)
        present = sum(map(sum, self.h_walls)) + sum(map(sum, self.v_walls))
        return closed_total - present

    def boundary_intact(self) -> bool:
        return (
            all(self.h_walls[0])
            and all(self.h_walls[self.height])
            and all(row[0] and row[self.width] for row in self.v_walls)
        )

    def as_text(self) -> List[str]:
        """
        Character picture of the maze, two text rows per cell row:
            +--+--+
            |     |
            +  +--+
        """
        lines = []
        for row in range(self.height + 1):
            top = "+"
            for col in range(self.width):
                top += ("--" if self.h_walls[row][col] else "  ") + "+"
            lines.append(top)
            if row == self.height:
                break
            mid = ""
            for col in range(self.width + 1):
                mid += "|" if self.v_walls[row][col] else " "
                if col < self.width:
                    mid += "  "
            lines.append(mid)
        return lines
