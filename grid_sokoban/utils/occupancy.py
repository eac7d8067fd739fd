"""Occupancy snapshot used by the move resolver.

An :class:`Occupancy` is built once per tick from the current ``State`` and
shared by every player resolved in that tick, so no chain can observe the
relocation of another chain. It is never cached across ticks.
"""

from dataclasses import dataclass
from typing import Dict, Mapping

from grid_sokoban.components import Position
from grid_sokoban.errors import InvariantViolation
from grid_sokoban.state import State
from grid_sokoban.types import EntityID
from grid_sokoban.utils.ecs import is_immovable, is_movable


@dataclass(frozen=True)
class Occupancy:
    """Blocking occupants of each cell.

    Attributes:
        width: Grid width in tiles.
        height: Grid height in tiles.
        movable: Cell -> id of the movable entity (box or player) on it.
        immovable: Cell -> id of the immovable entity (wall) on it.
    """

    width: int
    height: int
    movable: Mapping[Position, EntityID]
    immovable: Mapping[Position, EntityID]


def build_occupancy(state: State) -> Occupancy:
    """Index movable and immovable occupants by cell.

    Raises:
        InvariantViolation: If two blocking occupants share a cell or an
            entity is both movable and immovable.
    """
    movable: Dict[Position, EntityID] = {}
    immovable: Dict[Position, EntityID] = {}
    for eid in sorted(state.position.keys()):
        pos = state.position[eid]
        mov, immov = is_movable(state, eid), is_immovable(state, eid)
        if mov and immov:
            raise InvariantViolation(f"Entity {eid} is both movable and immovable")
        if not (mov or immov):
            continue
        other = movable.get(pos, immovable.get(pos))
        if other is not None:
            raise InvariantViolation(
                f"Entities {other} and {eid} both occupy ({pos.x}, {pos.y})"
            )
        if mov:
            movable[pos] = eid
        else:
            immovable[pos] = eid
    return Occupancy(
        width=state.width, height=state.height, movable=movable, immovable=immovable
    )


def check_occupancy(state: State) -> None:
    """Raise :class:`InvariantViolation` if ``state`` double-books a cell."""
    build_occupancy(state)
