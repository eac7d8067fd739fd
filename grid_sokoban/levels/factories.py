"""Convenience factory functions for authoring ``EntitySpec`` objects.

Each helper returns a preconfigured :class:`EntitySpec` for one map feature.
Layers follow the fixed z-order of the tile set: floor at the bottom, target
markers above it, and walls, boxes and the player on top.
"""

from __future__ import annotations

from grid_sokoban.components.properties import (
    Agent,
    Appearance,
    AppearanceName,
    Blocking,
    Pushable,
    Target,
)
from .entity_spec import EntitySpec

FLOOR_LAYER = 5
TARGET_LAYER = 9
OCCUPANT_LAYER = 10


def create_player() -> EntitySpec:
    """Player-controlled agent; pushes like a box."""
    return EntitySpec(
        agent=Agent(),
        pushable=Pushable(),
        appearance=Appearance(name=AppearanceName.PLAYER, layer=OCCUPANT_LAYER),
    )


def create_floor() -> EntitySpec:
    """Background floor tile (never blocks)."""
    return EntitySpec(
        appearance=Appearance(name=AppearanceName.FLOOR, layer=FLOOR_LAYER),
    )


def create_wall() -> EntitySpec:
    """Immovable wall."""
    return EntitySpec(
        appearance=Appearance(name=AppearanceName.WALL, layer=OCCUPANT_LAYER),
        blocking=Blocking(),
    )


def create_box() -> EntitySpec:
    """Pushable box."""
    return EntitySpec(
        appearance=Appearance(name=AppearanceName.BOX, layer=OCCUPANT_LAYER),
        pushable=Pushable(),
    )


def create_target() -> EntitySpec:
    """Scoring target marker."""
    return EntitySpec(
        appearance=Appearance(name=AppearanceName.TARGET, layer=TARGET_LAYER),
        target=Target(),
    )
