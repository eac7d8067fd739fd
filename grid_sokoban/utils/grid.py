"""Grid math helpers.

Utility predicates used by the resolver and movement systems. Functions here
are pure and take plain dimensions rather than a ``State`` so they can run
against an occupancy snapshot as well.
"""

from typing import Dict, List, Tuple

from grid_sokoban.actions import Action
from grid_sokoban.components import Position

DIRECTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}


def is_in_bounds(width: int, height: int, pos: Position) -> bool:
    """Return True if ``pos`` lies within the ``width`` x ``height`` rectangle."""
    return 0 <= pos.x < width and 0 <= pos.y < height


def step_position(pos: Position, action: Action) -> Position:
    """Return the neighbour of ``pos`` one cell along ``action``."""
    dx, dy = DIRECTION_DELTAS[action]
    return Position(pos.x + dx, pos.y + dy)


def ray_positions(
    width: int, height: int, start: Position, action: Action
) -> List[Position]:
    """Cells from ``start`` to the grid edge along ``action``, both inclusive.

    Returns an empty list when ``start`` itself is outside the grid.
    """
    path: List[Position] = []
    pos = start
    while is_in_bounds(width, height, pos):
        path.append(pos)
        pos = step_position(pos, action)
    return path
