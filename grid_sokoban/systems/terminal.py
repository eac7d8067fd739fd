"""Terminal condition system.

Evaluates ``state.objective_fn`` after relocations are applied and flips
``phase`` to ``WON`` exactly once. Later calls on a won state return it
unchanged, so the phase never reverts.
"""

import logging
from dataclasses import replace

from grid_sokoban.state import State
from grid_sokoban.types import Phase

logger = logging.getLogger(__name__)

WIN_MESSAGE = "All targets covered"


def win_system(state: State) -> State:
    """Set ``phase`` to ``WON`` if the objective holds (idempotent)."""
    if state.phase == Phase.WON:
        return state

    if state.objective_fn(state):
        logger.info("Level solved after %d moves", state.moves_count)
        return replace(state, phase=Phase.WON, message=WIN_MESSAGE)
    return state


evaluate = win_system
