"""Rendering appearance component.

``Appearance`` names the sprite used for an entity and its ``layer``
(z-order). Renderers draw lower layers first. The layer is a render hint
only; movement resolution never reads it.
"""

from dataclasses import dataclass
from enum import StrEnum, auto


class AppearanceName(StrEnum):
    """Enumeration of built-in sprite names."""

    NONE = auto()
    BOX = auto()
    FLOOR = auto()
    PLAYER = auto()
    TARGET = auto()
    WALL = auto()


@dataclass(frozen=True)
class Appearance:
    """Visual rendering metadata.

    Attributes:
        name: Symbolic sprite identifier.
        layer: Z-order; higher layers are drawn on top.
    """

    name: AppearanceName
    layer: int = 0
