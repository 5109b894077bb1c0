# tests/test_collisions.py
import pytest

from mazerun.engine.avatar import Entity
from mazerun.engine.collisions import is_blocked, resolve_movement, step
from mazerun.engine.intent import NO_INTENT, Direction
from mazerun.grid import WallGrid

CS = 50
WT = 16
UP, DOWN, LEFT, RIGHT = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT


def make_grid(width, height, opened=()):
    """Closed grid with the listed walls removed: ("h", row, col) or ("v", row, col)."""
    g = WallGrid.closed(width, height, CS)
    for kind, row, col in opened:
        walls = g.h_walls if kind == "h" else g.v_walls
        walls[row][col] = False
    return g


def test_no_intent_keeps_position():
    g = make_grid(1, 1)
    e = Entity.at_cell(0, 0, CS, speed=256)
    assert step(e, NO_INTENT, 0.5, WT, g) == e


def test_closed_cell_clamps_each_axis():
    g = make_grid(1, 1)
    e = Entity.at_cell(0, 0, CS, speed=256)
    moved = step(e, {UP, RIGHT}, 0.1, WT, g)
    assert moved.pos == pytest.approx((CS - WT, WT))
    moved = step(e, {DOWN, LEFT}, 0.1, WT, g)
    assert moved.pos == pytest.approx((WT, CS - WT))


def test_open_passage_moves_by_speed_times_delta():
    g = make_grid(2, 1, opened=[("v", 0, 1)])
    e = Entity.at_cell(0, 0, CS, speed=256)
    moved = step(e, {RIGHT}, 0.05, WT, g)
    assert moved.pos == pytest.approx((25 + 12.8, 25))
    assert moved.cell == (0, 0)
    # original entity is untouched
    assert e.pos == (25, 25)


def test_clamp_is_exactly_wall_thickness_from_the_plane():
    g = make_grid(1, 1)
    # half a wall thickness from the right wall, pushed back out to a full one
    e = Entity(CS - WT / 2, 25, CS, speed=256)
    assert step(e, {RIGHT}, 0.01, WT, g).x == pytest.approx(CS - WT)
    e = Entity(WT / 2, 25, CS, speed=256)
    assert step(e, {LEFT}, 0.01, WT, g).x == pytest.approx(WT)
    e = Entity(25, WT / 2, CS, speed=256)
    assert step(e, {UP}, 0.01, WT, g).y == pytest.approx(WT)
    e = Entity(25, CS - WT / 2, CS, speed=256)
    assert step(e, {DOWN}, 0.01, WT, g).y == pytest.approx(CS - WT)


def test_blocked_move_stops_short_when_target_is_before_clamp():
    g = make_grid(1, 1)
    e = Entity.at_cell(0, 0, CS, speed=10)
    # 25 + 1 is still inside the free band, so it is kept
    assert step(e, {RIGHT}, 0.1, WT, g).x == pytest.approx(26)


def test_huge_step_cannot_tunnel_through_wall():
    g = make_grid(3, 1)
    e = Entity.at_cell(0, 0, CS, speed=1e6)
    moved = step(e, {RIGHT}, 1.0, WT, g)
    assert moved.cell == (0, 0)
    assert moved.x == pytest.approx(CS - WT)


def test_huge_step_advances_at_most_one_cell():
    # open between cells 0 and 1, wall between 1 and 2
    g = make_grid(3, 1, opened=[("v", 0, 1)])
    e = Entity.at_cell(0, 0, CS, speed=1e6)
    e = step(e, {RIGHT}, 1.0, WT, g)
    assert e.cell == (1, 0)
    for _ in range(5):
        e = step(e, {RIGHT}, 1.0, WT, g)
        assert e.cell == (1, 0)
    assert e.x == pytest.approx(2 * CS - WT)

    # same vertically
    g = make_grid(1, 3, opened=[("h", 1, 0)])
    e = Entity.at_cell(0, 0, CS, speed=1e6)
    for _ in range(5):
        e = step(e, {DOWN}, 1.0, WT, g)
        assert e.cell_y <= 1
    assert e.y == pytest.approx(2 * CS - WT)


def test_corner_clip_against_neighbour_wall():
    # (0,0) opens right into (0,1); the bottom edge of (0,1) stays walled.
    g = make_grid(2, 2, opened=[("v", 0, 1)])
    e = Entity(25, CS - 5, CS, speed=100)  # footprint overlaps the bottom of the row
    assert is_blocked(g, RIGHT, e.cell, e.pos, WT)
    assert step(e, {RIGHT}, 0.5, WT, g).x == pytest.approx(CS - WT)

    g.h_walls[1][1] = False
    assert not is_blocked(g, RIGHT, e.cell, e.pos, WT)
    assert step(e, {RIGHT}, 0.5, WT, g).x == pytest.approx(25 + CS)


def test_corner_clip_moving_up():
    # (1,0) opens up into (0,0); (0,0) has its right wall.
    g = make_grid(2, 2, opened=[("h", 1, 0)])
    e = Entity(CS - 5, CS + 25, CS, speed=100)
    assert is_blocked(g, UP, e.cell, e.pos, WT)
    e_mid = Entity(25, CS + 25, CS, speed=100)
    assert not is_blocked(g, UP, e_mid.cell, e_mid.pos, WT)


def test_vertical_resolved_before_horizontal():
    # Avatar starts in row 1 and moves up into row 0 in the same tick it moves
    # right; row 0 is open to the right, row 1 is not.
    g = make_grid(2, 2, opened=[("h", 1, 0), ("v", 0, 1), ("h", 1, 1)])
    x, y = resolve_movement((25, 52), (0, 1), 100, {RIGHT, UP}, 0.1, WT, g)
    assert (x, y) == pytest.approx((35, 42))


def test_resolve_movement_uses_given_cell_index_first():
    g = make_grid(2, 1, opened=[("v", 0, 1)])
    x, y = resolve_movement((30, 25), (0, 0), 50, [RIGHT], 0.2, WT, g)
    assert (x, y) == pytest.approx((40, 25))


def open_interior(width, height):
    g = WallGrid.closed(width, height, CS)
    for row in range(1, height):
        g.h_walls[row] = [False] * width
    for row in g.v_walls:
        row[1:width] = [False] * (width - 1)
    return g


# Avatar in the middle cell of an open 3x3 grid, hugging one side of the
# travel axis. The only wall that can stop it is the neighbour's edge on that
# side; `axis_blocked`/`axis_free` are the coordinate after a 50px attempt.
@pytest.mark.parametrize(
    "direction,pos,kind,row,col,axis_blocked,axis_free",
    [
        (UP, (95, 75), "v", 0, 2, 66, 25),
        (UP, (55, 75), "v", 0, 1, 66, 25),
        (DOWN, (95, 75), "v", 2, 2, 84, 125),
        (DOWN, (55, 75), "v", 2, 1, 84, 125),
        (LEFT, (75, 95), "h", 2, 0, 66, 25),
        (LEFT, (75, 55), "h", 1, 0, 66, 25),
        (RIGHT, (75, 95), "h", 2, 2, 84, 125),
        (RIGHT, (75, 55), "h", 1, 2, 84, 125),
    ],
)
def test_corner_clip_every_direction_and_side(direction, pos, kind, row, col, axis_blocked, axis_free):
    g = open_interior(3, 3)
    walls = g.h_walls if kind == "h" else g.v_walls
    e = Entity(pos[0], pos[1], CS, speed=100)
    assert e.cell == (1, 1)
    axis = 1 if direction in (UP, DOWN) else 0

    walls[row][col] = True
    assert is_blocked(g, direction, e.cell, e.pos, WT)
    assert step(e, {direction}, 0.5, WT, g).pos[axis] == pytest.approx(axis_blocked)

    walls[row][col] = False
    assert not is_blocked(g, direction, e.cell, e.pos, WT)
    assert step(e, {direction}, 0.5, WT, g).pos[axis] == pytest.approx(axis_free)


def test_zero_wall_thickness_is_rejected():
    g = make_grid(1, 1)
    with pytest.raises(AssertionError):
        resolve_movement((25, 25), (0, 0), 256, {RIGHT}, 1.0, 0, g)
