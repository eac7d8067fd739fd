from __future__ import annotations

from typing import Any, Dict

from pyrsistent import pmap

from grid_sokoban.components.properties import Position
from grid_sokoban.entity import Entity
from grid_sokoban.state import State
from grid_sokoban.types import EntityID
from grid_sokoban.levels.grid import Level


def _init_store_maps() -> Dict[str, Dict[EntityID, Any]]:
    """
    Initialize mutable component-store maps mirroring State; converted to pmaps later.
    """
    return {
        "agent": {},
        "appearance": {},
        "blocking": {},
        "position": {},
        "pushable": {},
        "target": {},
    }


def to_state(level: Level) -> State:
    """
    Convert a Level (grid of EntitySpec) into an immutable State.

    Entity ids are allocated densely from 0 in row-major order (y, then x,
    then placement order within the cell), so the same level always yields
    the same ids.
    """
    entity: Dict[EntityID, Entity] = {}
    stores: Dict[str, Dict[EntityID, Any]] = _init_store_maps()
    next_eid: EntityID = 0

    for y in range(level.height):
        for x in range(level.width):
            for obj in level.grid[y][x]:
                eid = next_eid
                next_eid += 1
                entity[eid] = Entity()
                for store_name, comp in obj.iter_components():
                    stores[store_name][eid] = comp
                stores["position"][eid] = Position(x, y)

    return State(
        width=level.width,
        height=level.height,
        objective_fn=level.objective_fn,
        entity=pmap(entity),
        agent=pmap(stores["agent"]),
        appearance=pmap(stores["appearance"]),
        blocking=pmap(stores["blocking"]),
        position=pmap(stores["position"]),
        pushable=pmap(stores["pushable"]),
        target=pmap(stores["target"]),
        queue_policy=level.queue_policy,
    )
