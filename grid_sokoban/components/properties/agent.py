"""Agent marker component.

Presence of :class:`Agent` designates a player entity. One player is
expected per level, but the turn controller resolves every agent it finds.
Agents always push as if they were :class:`~grid_sokoban.components.Pushable`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Agent:
    """Marker (no fields)."""

    pass
