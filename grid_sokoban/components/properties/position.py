"""Position component.

Immutable integer grid coordinates. Stored in ``State.position`` keyed by
entity id. Equality and hashing are by value, so positions double as keys of
the occupancy lookups built each tick.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
