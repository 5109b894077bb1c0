from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional, Tuple

import pygame

from ..config import GameConfig
from ..engine.state import Round
from ..grid import WallGrid
from ..ui.hud import hud_lines, radar_alpha

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
FLOOR = (236, 232, 220)

_FALLBACK_COLORS = {
    "avatar": (40, 120, 220, 255),
    "goal": (230, 180, 20, 255),
}


class Sprites:
    """
    Cached sprite loader:
      - Looks for <image_dir>/avatar.png and <image_dir>/goal.png
      - Falls back to a filled circle of the sprite size
    """
    def __init__(self, image_dir: str, size: int):
        self.image_dir = image_dir
        self.size = size

    @lru_cache(maxsize=8)
    def get(self, name: str) -> pygame.Surface:
        path = os.path.join(self.image_dir, f"{name}.png")
        if os.path.exists(path):
            img = pygame.image.load(path)
            # convert_alpha needs a display mode
            return img.convert_alpha() if pygame.display.get_surface() else img
        img = pygame.Surface((self.size, self.size), pygame.SRCALPHA)
        color = _FALLBACK_COLORS.get(name, (200, 200, 200, 255))
        pygame.draw.circle(img, color, (self.size // 2, self.size // 2), self.size // 2)
        return img


def draw_walls(surface: pygame.Surface, grid: WallGrid, line_width: int, wall_thickness: int) -> None:
    # Segments run past both ends by half the wall thickness so corners close.
    cs = grid.cell_size
    ext = wall_thickness / 2
    for row in range(grid.height + 1):
        for col in range(grid.width):
            if grid.h_walls[row][col]:
                y = row * cs
                pygame.draw.line(surface, BLACK, (col * cs - ext, y), ((col + 1) * cs + ext, y), line_width)
    for row in range(grid.height):
        for col in range(grid.width + 1):
            if grid.v_walls[row][col]:
                x = col * cs
                pygame.draw.line(surface, BLACK, (x, row * cs - ext), (x, (row + 1) * cs + ext), line_width)


def make_fog(size: Tuple[int, int], inner: float, outer: float) -> pygame.Surface:
    """
    Darkness overlay twice the maze size, clear in the middle and opaque past
    `outer`. Blit it centred on the avatar.
    """
    w, h = size
    fog = pygame.Surface((2 * w, 2 * h), pygame.SRCALPHA)
    fog.fill((0, 0, 0, 255))
    center = (w, h)
    span = max(1.0, outer - inner)
    r = int(outer)
    while r > 0:
        alpha = int(255 * max(0.0, min(1.0, (r - inner) / span)))
        pygame.draw.circle(fog, (0, 0, 0, alpha), center, r)
        r -= 2
    return fog


class MazeView:
    def __init__(self, config: GameConfig, font: Optional[pygame.font.Font] = None):
        self.config = config
        self.sprites = Sprites(config.image_dir, config.avatar_size)
        self.fog = make_fog(config.maze_px, 16, config.sight_range)
        self.font = font

    def draw(self, surface: pygame.Surface, rnd: Round, radius: float) -> None:
        cfg = self.config
        surface.fill(BLACK)
        maze_w, maze_h = cfg.maze_px
        surface.fill(FLOOR, pygame.Rect(0, 0, maze_w, maze_h))
        draw_walls(surface, rnd.maze, cfg.wall_line_width, cfg.wall_thickness)

        half = cfg.avatar_size / 2
        surface.blit(self.sprites.get("goal"), (rnd.goal.x - half, rnd.goal.y - half))
        surface.blit(self.sprites.get("avatar"), (rnd.avatar.x - half, rnd.avatar.y - 0.75 * cfg.avatar_size))

        ax, ay = int(rnd.avatar.x), int(rnd.avatar.y)
        if radius >= 1:
            ring = pygame.Surface((maze_w, maze_h), pygame.SRCALPHA)
            pygame.draw.circle(ring, (0, 0, 0, int(255 * radar_alpha(radius))), (ax, ay), int(radius), 5)
            surface.blit(ring, (0, 0))

        # Only the window of the fog that lands on the maze area
        surface.blit(self.fog, (0, 0), pygame.Rect(maze_w - ax, maze_h - ay, maze_w, maze_h))

        if self.font is not None:
            time_line, best_line = hud_lines(rnd.timer.elapsed(), rnd.best_time)
            x = surface.get_width() - 128
            surface.blit(self.font.render(time_line, True, WHITE), (x, 32))
            surface.blit(self.font.render(best_line, True, WHITE), (x, 64))
