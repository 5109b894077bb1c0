from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    # Maze shape
    width: int = 15        # cells
    height: int = 10       # cells
    cell_size: int = 50    # pixels per cell side

    # Collision buffer kept between the avatar and a wall plane
    wall_thickness: int = 16
    # Stroke used when drawing walls (slightly thinner than the buffer)
    wall_line_width: int = 15

    avatar_speed: float = 256.0  # pixels per second
    avatar_size: int = 32        # sprite side in pixels

    # Avatar reaches the goal when both |dx| and |dy| are under this fraction of a cell
    win_fraction: float = 0.2

    sight_cells: int = 5
    panel_width: int = 256
    fps: int = 60
    image_dir: str = "images"

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"maze must be at least 1x1 cells, got {self.width}x{self.height}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.wall_thickness <= 0:
            raise ValueError(f"wall_thickness must be positive, got {self.wall_thickness}")
        if self.wall_thickness * 2 > self.cell_size:
            raise ValueError("wall_thickness must fit twice inside a cell")

    @property
    def maze_px(self) -> tuple:
        return (self.width * self.cell_size, self.height * self.cell_size)

    @property
    def window_px(self) -> tuple:
        w, h = self.maze_px
        return (w + self.panel_width, h)

    @property
    def sight_range(self) -> float:
        return self.sight_cells * self.cell_size

    @property
    def diagonal(self) -> float:
        w, h = self.maze_px
        return (w * w + h * h) ** 0.5


# Global defaults (tools swap fields with dataclasses.replace)
CONFIG = GameConfig()
