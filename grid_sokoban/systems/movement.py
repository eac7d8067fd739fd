"""Relocation application system.

Applies a :data:`~grid_sokoban.types.RelocationPlan` to the position store in
one step. Either every relocation lands or an :class:`InvariantViolation` is
raised and the input ``State`` is left as it was; there is no clamping and
no partial application.
"""

from dataclasses import replace
from typing import Dict

from grid_sokoban.components import Position
from grid_sokoban.errors import InvariantViolation
from grid_sokoban.state import State
from grid_sokoban.types import EntityID, RelocationPlan
from grid_sokoban.utils.grid import is_in_bounds, step_position
from grid_sokoban.utils.occupancy import check_occupancy


def movement_system(state: State, plan: RelocationPlan) -> State:
    """Shift every entity in ``plan`` by one cell along its direction.

    Args:
        state (State): Current state.
        plan (RelocationPlan): Pairs produced by the resolver.

    Returns:
        State: Same state if ``plan`` is empty, otherwise a state with updated
        positions.

    Raises:
        InvariantViolation: If an entity has no position, is asked to move
            twice in different directions, would leave the grid, or the
            result puts two blocking occupants on one cell.
    """
    if not plan:
        return state

    destinations: Dict[EntityID, Position] = {}
    for eid, direction in sorted(plan):
        current = state.position.get(eid)
        if current is None:
            raise InvariantViolation(f"Entity {eid} has no position to move from")
        dest = step_position(current, direction)
        if destinations.get(eid, dest) != dest:
            raise InvariantViolation(f"Entity {eid} relocated in two directions")
        if not is_in_bounds(state.width, state.height, dest):
            raise InvariantViolation(
                f"Entity {eid} relocated outside the grid to ({dest.x}, {dest.y})"
            )
        destinations[eid] = dest

    position = state.position.update(destinations)
    moved = replace(state, position=position)
    check_occupancy(moved)
    return moved
