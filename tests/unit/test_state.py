from dataclasses import replace

from grid_sokoban.actions import Action
from grid_sokoban.step import step
from grid_sokoban.systems.input import enqueue_key
from grid_sokoban.types import Phase
from tests.test_utils import make_board_state


def test_won_tracks_phase() -> None:
    state, _ = make_board_state(
        player_positions=[(0, 0)], box_positions=[(1, 0)], target_positions=[(2, 0)]
    )
    assert not state.won
    state = step(state, Action.RIGHT)
    assert state.won
    assert replace(state, phase=Phase.PLAYING).won is False


def test_description_skips_empty_stores() -> None:
    state, _ = make_board_state(player_positions=[(1, 1)])
    description = state.description
    assert "blocking" not in description
    assert "target" not in description
    assert "input_queue" not in description
    assert description["width"] == 5
    assert description["phase"] == Phase.PLAYING
    assert len(description["agent"]) == 1


def test_description_shows_pending_keys() -> None:
    state, _ = make_board_state(player_positions=[(1, 1)])
    description = enqueue_key(state, "left").description
    assert list(description["input_queue"]) == ["left"]
