"""Read-only render contract.

Renderers only ever see what these helpers return: one
``(position, layer, sprite)`` tuple per placed entity, in draw order, and the
``(phase, moves_count)`` pair for the status text.
"""

from typing import List, NamedTuple, Tuple

from grid_sokoban.components import AppearanceName, Position
from grid_sokoban.state import State
from grid_sokoban.types import Phase


class RenderItem(NamedTuple):
    position: Position
    layer: int
    sprite: AppearanceName


def render_items(state: State) -> List[RenderItem]:
    """Placed entities with an appearance, sorted by layer then entity id."""
    items: List[Tuple[int, int, RenderItem]] = []
    for eid, pos in state.position.items():
        appearance = state.appearance.get(eid)
        if appearance is None:
            continue
        items.append(
            (appearance.layer, eid, RenderItem(pos, appearance.layer, appearance.name))
        )
    return [item for _, _, item in sorted(items, key=lambda t: (t[0], t[1]))]


def status_of(state: State) -> Tuple[Phase, int]:
    return state.phase, state.moves_count


def status_text(state: State) -> str:
    phase, moves = status_of(state)
    return f"{phase.name.capitalize()}  Moves: {moves}"
