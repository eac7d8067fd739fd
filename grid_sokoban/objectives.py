"""Objective predicate functions and registry.

Each objective function answers: *"Is the level solved?"* They are pure
predicates over a :class:`State`. The turn controller evaluates
``state.objective_fn`` after relocations are applied and flips the phase to
``WON`` when it returns True.

Both predicates re-scan the whole store on every call; levels are small.
"""

from typing import Dict, List

from grid_sokoban.state import State
from grid_sokoban.types import EntityID, ObjectiveFn
from grid_sokoban.utils.ecs import entities_with_components_at


def _boxes(state: State) -> List[EntityID]:
    # Players carry Pushable too but are never cover.
    return [eid for eid in state.pushable if eid not in state.agent]


def all_targets_covered_objective_fn(state: State) -> bool:
    """Every Target shares its cell with a box.

    Players do not count as cover. A level without targets is trivially
    solved.
    """
    boxes = set(_boxes(state))
    for target_id in state.target:
        if target_id not in state.position:
            return False
        occupants = entities_with_components_at(
            state, state.position[target_id], state.pushable
        )
        if not boxes.intersection(occupants):
            return False
    return True


def all_boxes_on_targets_objective_fn(state: State) -> bool:
    """Every box sits on a Target cell."""
    for box_id in _boxes(state):
        if box_id not in state.position:
            return False
        if not entities_with_components_at(
            state, state.position[box_id], state.target
        ):
            return False
    return True


default_objective_fn = all_targets_covered_objective_fn

OBJECTIVE_FN_REGISTRY: Dict[str, ObjectiveFn] = {
    "default": default_objective_fn,
    "targets": all_targets_covered_objective_fn,
    "boxes": all_boxes_on_targets_objective_fn,
}
"""Name -> objective predicate mapping for level configuration."""
