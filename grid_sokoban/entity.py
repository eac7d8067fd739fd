"""Entity primitives & ID generation.

The engine models each *thing* as an ``EntityID`` (an integer) plus zero or
more component dataclasses stored in persistent maps on :class:`State`.

Level conversion allocates IDs densely from zero for every level it builds
(see :mod:`grid_sokoban.levels.convert`); the process-wide generator below is
used when states are assembled by hand, e.g. in tests.

IDs are *not* recycled: entities live for the whole level and only their
positions change.
"""

from dataclasses import dataclass
from typing import Iterator

from grid_sokoban.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Entity descriptor. Carries no data; components live on ``State``."""

    pass


def entity_id_generator() -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = 0
    while True:
        yield eid
        eid += 1


_entity_id_gen = entity_id_generator()


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID."""
    return next(_entity_id_gen)
