"""ECS convenience queries.

Helper functions for querying entity/component relationships without
introducing iteration logic into systems. All functions are pure and operate
on the immutable :class:`grid_sokoban.state.State` snapshot.

Performance: ``entities_at`` uses a cached reverse index of the immutable
``State.position`` PMap to provide O(1) lookups per state snapshot.
"""

from functools import lru_cache
from typing import Dict, FrozenSet, List, Mapping, Set

from grid_sokoban.components import Position
from grid_sokoban.state import State
from grid_sokoban.types import EntityID, Tag


@lru_cache(maxsize=4096)
def _position_index(
    position_store: Mapping[EntityID, Position],
) -> Mapping[Position, FrozenSet[EntityID]]:
    """Build a reverse index from position to entity IDs.

    The argument is a persistent/immutable PMap, which is hashable and thus
    safe to use with ``lru_cache``. Any new ``State`` (or updated position
    store) produces a distinct key, ensuring correctness across ticks.
    """
    index: Dict[Position, Set[EntityID]] = {}
    for eid, pos in position_store.items():
        index.setdefault(pos, set()).add(eid)
    return {pos: frozenset(eids) for pos, eids in index.items()}


def entities_at(state: State, pos: Position) -> Set[EntityID]:
    """Return entity IDs whose position equals ``pos``."""
    idx = _position_index(state.position)
    return set(idx.get(pos, ()))


def entities_with_components_at(
    state: State, pos: Position, *component_stores: Mapping[EntityID, object]
) -> List[EntityID]:
    """Return IDs at ``pos`` possessing all provided component stores."""
    ids_at_pos: Set[EntityID] = entities_at(state, pos)
    for store in component_stores:
        ids_at_pos &= set(store.keys())
    return sorted(ids_at_pos)


def is_movable(state: State, eid: EntityID) -> bool:
    """Players push like boxes, so both count as movable occupants."""
    return eid in state.pushable or eid in state.agent


def is_immovable(state: State, eid: EntityID) -> bool:
    return eid in state.blocking


def entity_tags(state: State, eid: EntityID) -> FrozenSet[Tag]:
    """Return the capability tags carried by ``eid``."""
    tags: Set[Tag] = set()
    if eid in state.agent:
        tags.add(Tag.PLAYER)
    if is_movable(state, eid):
        tags.add(Tag.MOVABLE)
    if is_immovable(state, eid):
        tags.add(Tag.IMMOVABLE)
    if eid in state.target:
        tags.add(Tag.SCORING_TARGET)
    return frozenset(tags)
