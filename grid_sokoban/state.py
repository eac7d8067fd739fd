"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents one
level at a single tick: the entity store, the pending input queue and the
session counters. All systems are pure functions that take a previous
``State`` and return a *new* ``State``; no mutation happens in-place. Readers
such as renderers therefore always see a consistent snapshot, and a tick
that fails part way leaves the previous state untouched.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not carry that
    component; capability checks are plain membership tests.
* ``input_queue`` holds raw key names. Which end is consumed first is decided
    by ``queue_policy``.
* ``phase`` only ever moves from ``PLAYING`` to ``WON``.

See :mod:`grid_sokoban.step` for how the tick orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, PVector, pmap, pvector

from grid_sokoban.entity import Entity
from grid_sokoban.components.properties import (
    Agent,
    Appearance,
    Blocking,
    Position,
    Pushable,
    Target,
)
from grid_sokoban.types import EntityID, ObjectiveFn, Phase, QueuePolicy


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Attributes:
        width (int): Grid width in tiles.
        height (int): Grid height in tiles.
        objective_fn (ObjectiveFn): Predicate evaluated after each tick to set ``phase``.
        entity (PMap[EntityID, Entity]): Registry of entity descriptors.
        agent (PMap[EntityID, Agent]): Player entities.
        appearance (PMap[EntityID, Appearance]): Sprite name and layer.
        blocking (PMap[EntityID, Blocking]): Immovable occupants (walls).
        position (PMap[EntityID, Position]): Current grid position of entities.
        pushable (PMap[EntityID, Pushable]): Movable occupants (boxes).
        target (PMap[EntityID, Target]): Scoring target markers.
        input_queue (PVector[str]): Pending raw key names.
        queue_policy (QueuePolicy): Which queued key a tick consumes.
        moves_count (int): Ticks in which at least one entity moved.
        turn (int): Ticks processed, including no-op ticks.
        phase (Phase): ``PLAYING`` until the objective is met, then ``WON``.
        message (str | None): Optional informational message.
    """

    # Level
    width: int
    height: int
    objective_fn: "ObjectiveFn"

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    agent: PMap[EntityID, Agent] = pmap()
    appearance: PMap[EntityID, Appearance] = pmap()
    blocking: PMap[EntityID, Blocking] = pmap()
    position: PMap[EntityID, Position] = pmap()
    pushable: PMap[EntityID, Pushable] = pmap()
    target: PMap[EntityID, Target] = pmap()

    # Input
    input_queue: PVector[str] = pvector()
    queue_policy: QueuePolicy = QueuePolicy.FIFO

    # Session
    moves_count: int = 0
    turn: int = 0
    phase: Phase = Phase.PLAYING
    message: Optional[str] = None

    @property
    def won(self) -> bool:
        return self.phase == Phase.WON

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Returns:
            PMap[str, Any]: Persistent map of field name to value for all
            populated fields. Empty component stores and an empty queue are
            skipped to keep debugging output short.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, (type(pmap()), type(pvector()))) and len(value) == 0:
                continue
            description = description.set(field, value)
        return pmap(description)
