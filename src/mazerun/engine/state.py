# src/mazerun/engine/state.py
# Round orchestrator: owns the maze, the avatar and the goal for one round,
# and starts a new round whenever the avatar reaches the goal.

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional

from ..config import CONFIG, GameConfig
from ..grid import WallGrid
from ..mapgen.generator import generate_maze
from ..rng import UniformSource, pick_index
from .avatar import Entity
from .collisions import step
from .intent import Direction
from .timing import Clock, RoundTimer

logger = logging.getLogger(__name__)


def has_reached_goal(avatar: Entity, goal: Entity, cell_size: float, fraction: float = 0.2) -> bool:
    """
    Win test on each axis separately. Two points near a shared cell corner can
    pass while sitting in wall-separated cells; this is the game's behaviour
    and is kept as is.
    """
    limit = fraction * cell_size
    return abs(avatar.x - goal.x) < limit and abs(avatar.y - goal.y) < limit


@dataclass
class TickOut:
    won: bool
    distance_to_goal: float
    elapsed: Optional[float] = None  # set on the winning tick
    new_best: bool = False


class Round:
    def __init__(
        self,
        config: GameConfig = CONFIG,
        *,
        rng: Optional[UniformSource] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.timer = RoundTimer(clock=clock) if clock is not None else RoundTimer()
        self.rounds_won = 0
        self.maze: WallGrid
        self.avatar: Entity
        self.goal: Entity
        self.reset()

    @property
    def best_time(self) -> Optional[float]:
        return self.timer.best

    def _random_cell(self, speed: float = 0.0) -> Entity:
        cfg = self.config
        cell_x = pick_index(self.rng, cfg.width)
        cell_y = pick_index(self.rng, cfg.height)
        return Entity.at_cell(cell_x, cell_y, cfg.cell_size, speed=speed)

    def reset(self) -> None:
        cfg = self.config
        # Avatar and goal are drawn independently and may share a cell.
        self.avatar = self._random_cell(speed=cfg.avatar_speed)
        self.goal = self._random_cell()
        self.maze = generate_maze(cfg.width, cfg.height, cfg.cell_size, rng=self.rng)
        self.timer.start()
        logger.debug("new round: avatar at %s, goal at %s", self.avatar.cell, self.goal.cell)

    def reached_goal(self) -> bool:
        return has_reached_goal(self.avatar, self.goal, self.config.cell_size, self.config.win_fraction)

    def tick(self, intent: Iterable[Direction], delta_seconds: float) -> TickOut:
        # Distance is measured before moving, matching what the radar shows this frame.
        distance = self.avatar.distance_to(self.goal)
        self.avatar = step(self.avatar, intent, delta_seconds, self.config.wall_thickness, self.maze)

        if not self.reached_goal():
            return TickOut(won=False, distance_to_goal=distance)

        elapsed, improved = self.timer.finish()
        self.rounds_won += 1
        if improved:
            logger.info("round %d finished in %.2fs (new best)", self.rounds_won, elapsed)
        else:
            logger.info("round %d finished in %.2fs (best %.2fs)", self.rounds_won, elapsed, self.timer.best)
        self.reset()
        return TickOut(won=True, distance_to_goal=distance, elapsed=elapsed, new_best=improved)
