"""Blocking component.

Marks an entity as an immovable occupant of its tile. Any push chain that
reaches a blocking entity is cancelled as a whole.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Blocking:
    """Marker (no data)."""

    pass
