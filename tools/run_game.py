# tools/run_game.py
# Interactive maze runner: arrow keys / WASD move the avatar, Esc quits.
# A new maze is generated each time the goal is reached; best time lives in memory only.

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import Optional

import pygame

try:
    from mazerun.config import CONFIG
    from mazerun.engine.intent import Direction, KeyState
    from mazerun.engine.state import Round
    from mazerun.render.view import MazeView
    from mazerun.rng import PMRandom
    from mazerun.ui.hud import radar_radius
except ImportError as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

KEYMAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Maze runner")
    parser.add_argument("--width", type=int, default=CONFIG.width, help="cells across")
    parser.add_argument("--height", type=int, default=CONFIG.height, help="cells down")
    parser.add_argument("--cell", type=int, default=CONFIG.cell_size, help="cell size in pixels")
    parser.add_argument("--speed", type=float, default=CONFIG.avatar_speed, help="avatar speed in pixels/second")
    parser.add_argument("--fps", type=int, default=CONFIG.fps)
    parser.add_argument("--images", type=str, default=CONFIG.image_dir, help="directory with avatar.png and goal.png")
    parser.add_argument("--seed", type=int, default=None, help="reproducible rounds")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(name)s: %(message)s")

    try:
        cfg = replace(
            CONFIG,
            width=args.width,
            height=args.height,
            cell_size=args.cell,
            avatar_speed=args.speed,
            fps=args.fps,
            image_dir=args.images,
        )
    except ValueError as e:
        parser.error(str(e))

    rng = PMRandom.from_seed(args.seed) if args.seed is not None else None
    rnd = Round(cfg, rng=rng)

    pygame.init()
    screen = pygame.display.set_mode(cfg.window_px)
    pygame.display.set_caption("Maze runner")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Helvetica", 24)
    view = MazeView(cfg, font=font)
    keys = KeyState(KEYMAP)
    radius = 1.0

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                keys.press(event.key)
            elif event.type == pygame.KEYUP:
                keys.release(event.key)
            elif event.type == pygame.WINDOWFOCUSLOST:
                keys.clear()

        delta = clock.tick(cfg.fps) / 1000.0
        out = rnd.tick(keys.intent(), delta)
        radius = radar_radius(radius, out.distance_to_goal, cfg.diagonal)

        view.draw(screen, rnd, radius)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
