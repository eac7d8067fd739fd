from grid_sokoban.levels.text import level_to_text
from grid_sokoban.state import State
from grid_sokoban.utils.render import status_text


def render_text(state: State, show_status: bool = True) -> str:
    """Board in level-token form, optionally followed by the status line."""
    board = level_to_text(state)
    if not show_status:
        return board
    return f"{board}\n{status_text(state)}"
