"""Direction enumerations and keyboard bindings.

Defines the human readable :class:`Action` (string enum) used by the engine
and a stable integer :class:`GymAction` mapping for Gymnasium compatibility.

``KEY_BINDINGS`` maps raw key names (as reported by an input capture widget)
to directions. Keys missing from the table are non-directional and are
ignored by the turn controller.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Optional


class Action(StrEnum):
    """String enum of movement directions."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


KEY_BINDINGS: Dict[str, Action] = {
    "up": Action.UP,
    "arrowup": Action.UP,
    "w": Action.UP,
    "down": Action.DOWN,
    "arrowdown": Action.DOWN,
    "s": Action.DOWN,
    "left": Action.LEFT,
    "arrowleft": Action.LEFT,
    "a": Action.LEFT,
    "right": Action.RIGHT,
    "arrowright": Action.RIGHT,
    "d": Action.RIGHT,
}


def action_from_key(key: str) -> Optional[Action]:
    """Return the direction bound to ``key`` (case-insensitive) or ``None``."""
    return KEY_BINDINGS.get(key.strip().lower())
