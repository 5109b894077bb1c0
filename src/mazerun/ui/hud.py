from typing import Optional, Tuple


def format_seconds(t: Optional[float]) -> str:
    return "None" if t is None else f"{t:.2f}"


def hud_lines(elapsed: float, best: Optional[float]) -> Tuple[str, str]:
    """The two side-panel lines, e.g. ("Time: 3.14", "Best: None")."""
    return (f"Time: {format_seconds(elapsed)}", f"Best: {format_seconds(best)}")


def radar_radius(prev: float, distance: float, diagonal: float) -> float:
    """
    Next radius of the pulsing circle around the avatar. It grows faster the
    closer the goal is and wraps at half the distance. Returns 0 when the
    avatar sits on the goal.
    """
    if distance <= 0:
        return 0.0
    return (prev + (1 / (distance / diagonal) - 1)) % (distance / 2)


def radar_alpha(radius: float) -> float:
    return max(0.0, min(1.0, 1 - radius / 300))
