from typing import TypedDict

from pyrsistent import pmap

from grid_sokoban.actions import Action
from grid_sokoban.components import (
    Agent,
    Appearance,
    AppearanceName,
    Blocking,
    Position,
    Pushable,
    Target,
)
from grid_sokoban.entity import Entity, new_entity_id
from grid_sokoban.objectives import default_objective_fn
from grid_sokoban.state import State
from grid_sokoban.types import EntityID, ObjectiveFn, QueuePolicy


class BoardEntities(TypedDict):
    player_ids: list[EntityID]
    box_ids: list[EntityID]
    wall_ids: list[EntityID]
    target_ids: list[EntityID]


def make_board_state(
    *,
    player_positions: list[tuple[int, int]] | None = None,
    box_positions: list[tuple[int, int]] | None = None,
    wall_positions: list[tuple[int, int]] | None = None,
    target_positions: list[tuple[int, int]] | None = None,
    width: int = 5,
    height: int = 5,
    queue_policy: QueuePolicy = QueuePolicy.FIFO,
    objective_fn: ObjectiveFn | None = None,
) -> tuple[State, BoardEntities]:
    """Players, boxes, walls and targets on an otherwise empty board.

    Players are Agent + Pushable, matching what the level loader produces.
    """
    pos: dict[EntityID, Position] = {}
    agent: dict[EntityID, Agent] = {}
    pushable: dict[EntityID, Pushable] = {}
    blocking: dict[EntityID, Blocking] = {}
    target: dict[EntityID, Target] = {}
    appearance: dict[EntityID, Appearance] = {}
    entity: dict[EntityID, Entity] = {}

    def place(xy: tuple[int, int], name: AppearanceName, layer: int) -> EntityID:
        eid = new_entity_id()
        pos[eid] = Position(*xy)
        appearance[eid] = Appearance(name=name, layer=layer)
        entity[eid] = Entity()
        return eid

    entities = BoardEntities(player_ids=[], box_ids=[], wall_ids=[], target_ids=[])
    for xy in target_positions or []:
        tid = place(xy, AppearanceName.TARGET, 9)
        target[tid] = Target()
        entities["target_ids"].append(tid)
    for xy in player_positions or []:
        pid = place(xy, AppearanceName.PLAYER, 10)
        agent[pid] = Agent()
        pushable[pid] = Pushable()
        entities["player_ids"].append(pid)
    for xy in box_positions or []:
        bid = place(xy, AppearanceName.BOX, 10)
        pushable[bid] = Pushable()
        entities["box_ids"].append(bid)
    for xy in wall_positions or []:
        wid = place(xy, AppearanceName.WALL, 10)
        blocking[wid] = Blocking()
        entities["wall_ids"].append(wid)

    state = State(
        width=width,
        height=height,
        objective_fn=objective_fn if objective_fn is not None else default_objective_fn,
        entity=pmap(entity),
        agent=pmap(agent),
        appearance=pmap(appearance),
        blocking=pmap(blocking),
        position=pmap(pos),
        pushable=pmap(pushable),
        target=pmap(target),
        queue_policy=queue_policy,
    )
    return state, entities


def assert_entity_positions(
    state: State, expected: dict[EntityID, tuple[int, int]],
) -> None:
    """Check that expected entities are at the right positions."""
    for eid, (x, y) in expected.items():
        actual = state.position.get(eid)
        assert actual == Position(x, y), (
            f"Entity {eid} expected at {(x, y)}, got {actual}"
        )


def assert_no_shared_cells(state: State) -> None:
    """No two movable/immovable entities share a coordinate."""
    seen: dict[Position, EntityID] = {}
    for eid, p in state.position.items():
        if eid in state.pushable or eid in state.agent or eid in state.blocking:
            assert p not in seen, f"Entities {seen[p]} and {eid} share {p}"
            seen[p] = eid


# Shortest push sequence solving levels.text.DEFAULT_LEVEL.
DEFAULT_LEVEL_SOLUTION = [
    Action.RIGHT,
    Action.RIGHT,
    Action.RIGHT,
    Action.UP,
    Action.UP,
    Action.LEFT,
    Action.UP,
    Action.LEFT,
    Action.DOWN,
    Action.DOWN,
    Action.DOWN,
    Action.DOWN,
]
