"""Push-chain resolution.

Given a direction and a player's cell, :func:`resolve` walks a ray from that
cell toward the grid edge and decides which entities move:

* a movable occupant (box or player) joins the chain and the walk continues;
* an immovable occupant cancels the whole chain, player included;
* an empty cell ends the walk and every chained entity shifts by one cell.

A walk that reaches the edge without finding an empty cell also cancels the
chain. The function is pure and deterministic: the plan depends only on the
direction, the start cell and the occupancy snapshot.
"""

import logging
from typing import List

from grid_sokoban.actions import Action
from grid_sokoban.components import Position
from grid_sokoban.types import EntityID, RelocationPlan
from grid_sokoban.utils.grid import ray_positions
from grid_sokoban.utils.occupancy import Occupancy

logger = logging.getLogger(__name__)

EMPTY_PLAN: RelocationPlan = frozenset()


def resolve(
    direction: Action, player_position: Position, occupancy: Occupancy
) -> RelocationPlan:
    """Compute the relocation plan for one player.

    Args:
        direction (Action): Commanded direction.
        player_position (Position): Cell of the pushing player (ray start).
        occupancy (Occupancy): Snapshot of blocking occupants for this tick.

    Returns:
        RelocationPlan: ``(entity id, direction)`` pairs to apply, or an empty
        set if nothing may move.
    """
    chain: List[EntityID] = []
    for pos in ray_positions(
        occupancy.width, occupancy.height, player_position, direction
    ):
        movable_id = occupancy.movable.get(pos)
        if movable_id is not None:
            chain.append(movable_id)
            continue
        wall_id = occupancy.immovable.get(pos)
        if wall_id is not None:
            logger.debug(
                "Chain of %d blocked by entity %d at (%d, %d)",
                len(chain),
                wall_id,
                pos.x,
                pos.y,
            )
            return EMPTY_PLAN
        return frozenset((eid, direction) for eid in chain)

    logger.debug(
        "Chain from (%d, %d) reached the %s edge without a gap",
        player_position.x,
        player_position.y,
        direction,
    )
    return EMPTY_PLAN
