"""Text level format.

A level is a rectangular block of whitespace-separated tokens, one row per
line. Blank lines and indentation are ignored.

======  ==========================================
Token   Cell contents
======  ==========================================
``.``   floor
``W``   wall on floor
``P``   player on floor
``B``   box on floor
``S``   scoring target on floor
``*``   box on a target
``+``   player on a target
``N``   void (no tile at all)
======  ==========================================

Every non-void cell gets one floor entity plus its feature entities.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from grid_sokoban.components import Position
from grid_sokoban.errors import LevelLoadError
from grid_sokoban.objectives import default_objective_fn
from grid_sokoban.state import State
from grid_sokoban.types import ObjectiveFn, QueuePolicy
from grid_sokoban.utils.ecs import entities_at
from .convert import to_state
from .entity_spec import EntitySpec
from .factories import (
    create_box,
    create_floor,
    create_player,
    create_target,
    create_wall,
)
from .grid import Level

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = """
N N W W W W W W
W W W . . . . W
W . . . B . . W
W . . . . . . W
W . P . . . . W
W . . . . . . W
W . . S . . . W
W . . . . . . W
W W W W W W W W
"""

VOID_TOKEN = "N"

TOKEN_FACTORIES: Dict[str, List[Callable[[], EntitySpec]]] = {
    ".": [create_floor],
    "W": [create_floor, create_wall],
    "P": [create_floor, create_player],
    "B": [create_floor, create_box],
    "S": [create_floor, create_target],
    "*": [create_floor, create_target, create_box],
    "+": [create_floor, create_target, create_player],
    VOID_TOKEN: [],
}


def tokenize(text: str) -> List[List[str]]:
    """Split level text into rows of tokens, dropping blank lines."""
    return [line.split() for line in text.splitlines() if line.strip()]


def parse_level(
    text: str,
    objective_fn: ObjectiveFn = default_objective_fn,
    queue_policy: QueuePolicy = QueuePolicy.FIFO,
) -> Level:
    """Build an authoring-time :class:`Level` from level text.

    Raises:
        LevelLoadError: If the text is empty, rows differ in length, or a
            token is not part of the format.
    """
    rows = tokenize(text)
    if not rows:
        raise LevelLoadError("Level text contains no rows")

    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise LevelLoadError(
                f"Row {y} has {len(row)} tokens, expected {width} like row 0"
            )

    level = Level(
        width=width,
        height=len(rows),
        objective_fn=objective_fn,
        queue_policy=queue_policy,
    )
    for y, row in enumerate(rows):
        for x, token in enumerate(row):
            factories = TOKEN_FACTORIES.get(token)
            if factories is None:
                raise LevelLoadError("Unrecognized map token", token=token, x=x, y=y)
            for factory in factories:
                level.add((x, y), factory())
    return level


def load_level(
    text: Optional[str] = None,
    objective_fn: ObjectiveFn = default_objective_fn,
    queue_policy: QueuePolicy = QueuePolicy.FIFO,
) -> State:
    """Parse level text (``DEFAULT_LEVEL`` if omitted) into a ready ``State``."""
    level = parse_level(
        DEFAULT_LEVEL if text is None else text,
        objective_fn=objective_fn,
        queue_policy=queue_policy,
    )
    state = to_state(level)
    logger.info(
        "Loaded %dx%d level: %d entities, %d boxes, %d targets",
        state.width,
        state.height,
        len(state.entity),
        sum(1 for eid in state.pushable if eid not in state.agent),
        len(state.target),
    )
    return state


def cell_token(state: State, x: int, y: int) -> str:
    """Token describing the current contents of cell ``(x, y)``."""
    eids = entities_at(state, Position(x, y))
    if not eids:
        return VOID_TOKEN
    on_target = any(eid in state.target for eid in eids)
    if any(eid in state.blocking for eid in eids):
        return "W"
    if any(eid in state.agent for eid in eids):
        return "+" if on_target else "P"
    if any(eid in state.pushable for eid in eids):
        return "*" if on_target else "B"
    if on_target:
        return "S"
    return "."


def level_to_text(state: State) -> str:
    """Write the current board back in the level text format.

    A player or box standing on a void cell prints as ``P``/``B``; loading the
    result puts a floor under it that the original board did not have.
    """
    return "\n".join(
        " ".join(cell_token(state, x, y) for x in range(state.width))
        for y in range(state.height)
    )
