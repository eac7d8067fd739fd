"""Common type aliases and enumerations.

``ObjectiveFn`` is the extension point stored on ``State`` that decides when
a level counts as solved. ``Phase`` and ``QueuePolicy`` are the two small
session enums read by the turn controller.
"""

from enum import StrEnum, auto
from typing import Callable, FrozenSet, Tuple, TYPE_CHECKING


# Forward declaration for typing to avoid circular imports:
if TYPE_CHECKING:
    from grid_sokoban.state import State
    from grid_sokoban.actions import Action

EntityID = int

ObjectiveFn = Callable[["State"], bool]

Relocation = Tuple[EntityID, "Action"]
RelocationPlan = FrozenSet[Relocation]


class Phase(StrEnum):
    """Session phase. ``PLAYING`` -> ``WON`` is the only transition."""

    PLAYING = auto()
    WON = auto()


class QueuePolicy(StrEnum):
    """Order in which queued keys are consumed, one per tick."""

    FIFO = auto()
    LIFO = auto()


class Tag(StrEnum):
    """Capability tags reported by :func:`grid_sokoban.utils.ecs.entity_tags`."""

    PLAYER = auto()
    MOVABLE = auto()
    IMMOVABLE = auto()
    SCORING_TARGET = auto()
