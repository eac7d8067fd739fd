"""Turn controller.

This module wires the systems together to implement a single *tick*. The
exported :func:`tick` is the only gameplay mutation entry point and is pure:
it returns a *new* :class:`grid_sokoban.state.State`.

Ordering within a tick:

1. Consume at most one queued key (``input`` system). Keys without a
   direction binding are consumed and ignored.
2. Build one occupancy snapshot and resolve every player against it, so no
   chain sees another chain's relocation.
3. Apply the union of all plans (``movement_system``) and count the move.
4. Evaluate the objective (``win_system``).

Winning does not freeze the board: later keys still move entities and count
as moves. ``win_system`` keeps the phase at ``WON`` once it is reached.
"""

import logging
from dataclasses import replace
from typing import Set

from grid_sokoban.actions import Action, action_from_key
from grid_sokoban.state import State
from grid_sokoban.systems.input import enqueue_key, pop_key
from grid_sokoban.systems.movement import movement_system
from grid_sokoban.systems.resolve import resolve
from grid_sokoban.systems.terminal import win_system
from grid_sokoban.types import Relocation, RelocationPlan
from grid_sokoban.utils.occupancy import build_occupancy

logger = logging.getLogger(__name__)


def tick(state: State) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable world state.

    Returns:
        State: Next state snapshot. If the queue is empty the same object is
            returned unchanged.

    Raises:
        InvariantViolation: If the entity store is corrupt or a relocation
            would leave the grid.
    """
    state, key = pop_key(state)
    if key is None:
        return state

    state = replace(state, turn=state.turn + 1)

    action = action_from_key(key)
    if action is None:
        logger.debug("Ignoring non-directional key %r", key)
        return state

    plan = plan_moves(state, action)
    state = movement_system(state, plan)
    if plan:
        state = replace(state, moves_count=state.moves_count + 1)

    return win_system(state)


def plan_moves(state: State, action: Action) -> RelocationPlan:
    """Resolve every player against a single occupancy snapshot.

    Players are visited in ascending id order; the union of their plans is
    returned.
    """
    occupancy = build_occupancy(state)
    relocations: Set[Relocation] = set()
    for agent_id in sorted(state.agent.keys()):
        pos = state.position.get(agent_id)
        if pos is None:
            continue
        relocations |= resolve(action, pos, occupancy)
    return frozenset(relocations)


def step(state: State, action: Action) -> State:
    """Queue ``action`` and run one tick.

    Meant for callers that drive the engine directly (Gym wrapper, tests) and
    keep the queue empty between steps.
    """
    return tick(enqueue_key(state, action.value))


def run(state: State) -> State:
    """Tick until the input queue is drained."""
    while len(state.input_queue) > 0:
        state = tick(state)
    return state
