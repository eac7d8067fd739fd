from dataclasses import replace

import pytest

from grid_sokoban.actions import Action
from grid_sokoban.components import Position
from grid_sokoban.errors import InvariantViolation
from grid_sokoban.step import plan_moves, run, step, tick
from grid_sokoban.systems.input import enqueue_key, enqueue_keys
from grid_sokoban.types import Phase, QueuePolicy
from tests.test_utils import (
    assert_entity_positions,
    assert_no_shared_cells,
    make_board_state,
)


def test_empty_queue_tick_is_a_no_op() -> None:
    state, _ = make_board_state(player_positions=[(1, 1)])
    assert tick(state) is state


def test_player_moves_alone() -> None:
    state, ids = make_board_state(player_positions=[(1, 1)])
    pid = ids["player_ids"][0]
    state = step(state, Action.DOWN)
    assert_entity_positions(state, {pid: (1, 2)})
    assert state.moves_count == 1
    assert state.turn == 1


def test_agent_pushes_box_successfully() -> None:
    state, ids = make_board_state(player_positions=[(0, 0)], box_positions=[(1, 0)])
    pid, bid = ids["player_ids"][0], ids["box_ids"][0]
    state = step(state, Action.RIGHT)
    assert_entity_positions(state, {pid: (1, 0), bid: (2, 0)})
    assert state.moves_count == 1


def test_chain_of_boxes_counts_as_one_move() -> None:
    state, ids = make_board_state(
        player_positions=[(0, 2)], box_positions=[(1, 2), (2, 2), (3, 2)]
    )
    pid = ids["player_ids"][0]
    b1, b2, b3 = ids["box_ids"]
    state = step(state, Action.RIGHT)
    assert_entity_positions(state, {pid: (1, 2), b1: (2, 2), b2: (3, 2), b3: (4, 2)})
    assert state.moves_count == 1


def test_push_blocked_by_wall() -> None:
    state, ids = make_board_state(
        player_positions=[(0, 0)], box_positions=[(1, 0)], wall_positions=[(2, 0)]
    )
    pid, bid = ids["player_ids"][0], ids["box_ids"][0]
    state = step(state, Action.RIGHT)
    assert_entity_positions(state, {pid: (0, 0), bid: (1, 0)})
    assert state.moves_count == 0
    assert state.turn == 1


def test_wall_anywhere_in_chain_blocks_whole_chain() -> None:
    state, ids = make_board_state(
        player_positions=[(2, 4)],
        box_positions=[(2, 3), (2, 2), (2, 1)],
        wall_positions=[(2, 0)],
    )
    before = state.position
    state = step(state, Action.UP)
    assert state.position == before
    assert state.moves_count == 0


def test_push_into_boundary_is_blocked() -> None:
    state, ids = make_board_state(
        player_positions=[(3, 0)], box_positions=[(4, 0)], width=5, height=5
    )
    state = step(state, Action.RIGHT)
    assert_entity_positions(state, {ids["player_ids"][0]: (3, 0), ids["box_ids"][0]: (4, 0)})
    assert state.moves_count == 0


def test_player_at_edge_cannot_leave_grid() -> None:
    state, ids = make_board_state(player_positions=[(0, 2)])
    state = step(state, Action.LEFT)
    assert_entity_positions(state, {ids["player_ids"][0]: (0, 2)})
    assert state.moves_count == 0


def test_targets_never_block() -> None:
    state, ids = make_board_state(player_positions=[(0, 0)], target_positions=[(1, 0)])
    state = step(state, Action.RIGHT)
    assert_entity_positions(
        state, {ids["player_ids"][0]: (1, 0), ids["target_ids"][0]: (1, 0)}
    )


def test_non_directional_key_is_consumed_without_effect() -> None:
    state, ids = make_board_state(player_positions=[(1, 1)])
    state = tick(enqueue_key(state, "escape"))
    assert len(state.input_queue) == 0
    assert state.turn == 1
    assert state.moves_count == 0
    assert_entity_positions(state, {ids["player_ids"][0]: (1, 1)})


def test_one_key_per_tick() -> None:
    state, ids = make_board_state(player_positions=[(0, 0)])
    state = tick(enqueue_keys(state, ["right", "right", "right"]))
    assert_entity_positions(state, {ids["player_ids"][0]: (1, 0)})
    assert list(state.input_queue) == ["right", "right"]


@pytest.mark.parametrize(
    "policy, expected",
    [
        (QueuePolicy.FIFO, (2, 1)),
        (QueuePolicy.LIFO, (1, 2)),
    ],
)
def test_queue_policy_decides_which_key_runs(
    policy: QueuePolicy, expected: tuple[int, int]
) -> None:
    state, ids = make_board_state(player_positions=[(1, 1)], queue_policy=policy)
    state = tick(enqueue_keys(state, ["right", "down"]))
    assert_entity_positions(state, {ids["player_ids"][0]: expected})


def test_run_drains_queue() -> None:
    state, ids = make_board_state(player_positions=[(0, 0)])
    state = run(enqueue_keys(state, ["right", "down", "x", "right"]))
    assert_entity_positions(state, {ids["player_ids"][0]: (2, 1)})
    assert state.turn == 4
    assert state.moves_count == 3


def test_box_onto_single_target_wins_same_tick() -> None:
    state, ids = make_board_state(
        player_positions=[(0, 0)], box_positions=[(1, 0)], target_positions=[(2, 0)]
    )
    state = step(state, Action.RIGHT)
    assert state.phase == Phase.WON
    assert state.moves_count == 1


def test_moves_continue_after_win() -> None:
    state, ids = make_board_state(
        player_positions=[(0, 0)], box_positions=[(1, 0)], target_positions=[(2, 0)]
    )
    pid, bid = ids["player_ids"][0], ids["box_ids"][0]
    state = step(state, Action.RIGHT)
    assert state.phase == Phase.WON
    # Pushing the box back off its target does not revert the phase.
    state = step(state, Action.RIGHT)
    state = step(state, Action.DOWN)
    assert state.phase == Phase.WON
    assert state.moves_count == 3
    assert state.turn == 3
    assert_entity_positions(state, {pid: (2, 1), bid: (3, 0)})


def test_board_without_targets_keeps_moving() -> None:
    state, ids = make_board_state(player_positions=[(0, 0)])
    state = step(state, Action.RIGHT)
    assert state.phase == Phase.WON
    state = step(state, Action.DOWN)
    assert_entity_positions(state, {ids["player_ids"][0]: (1, 1)})
    assert state.moves_count == 2


def test_multiple_players_resolve_independently() -> None:
    state, ids = make_board_state(
        player_positions=[(0, 0), (0, 2)],
        box_positions=[(1, 2)],
        wall_positions=[(1, 3)],
    )
    p1, p2 = ids["player_ids"]
    state = step(state, Action.RIGHT)
    assert_entity_positions(state, {p1: (1, 0), p2: (1, 2), ids["box_ids"][0]: (2, 2)})
    assert state.moves_count == 1


def test_blocked_player_does_not_cancel_other_players() -> None:
    state, ids = make_board_state(
        player_positions=[(0, 0), (0, 1)],
        wall_positions=[(1, 1)],
    )
    p1, p2 = ids["player_ids"]
    state = step(state, Action.RIGHT)
    assert_entity_positions(state, {p1: (1, 0), p2: (0, 1)})
    assert state.moves_count == 1


def test_players_in_one_chain_share_a_single_plan() -> None:
    state, ids = make_board_state(player_positions=[(0, 0), (1, 0)])
    p1, p2 = ids["player_ids"]
    assert plan_moves(state, Action.RIGHT) == {(p1, Action.RIGHT), (p2, Action.RIGHT)}
    state = step(state, Action.RIGHT)
    assert_entity_positions(state, {p1: (1, 0), p2: (2, 0)})


def test_no_players_means_nothing_moves() -> None:
    state, ids = make_board_state(box_positions=[(1, 1)])
    state = step(state, Action.RIGHT)
    assert state.turn == 1
    assert state.moves_count == 0
    assert_entity_positions(state, {ids["box_ids"][0]: (1, 1)})


def test_corrupt_state_fails_fast() -> None:
    state, ids = make_board_state(player_positions=[(0, 0)], box_positions=[(3, 3)])
    bid = ids["box_ids"][0]
    state = replace(state, position=state.position.set(bid, Position(0, 0)))
    with pytest.raises(InvariantViolation):
        step(state, Action.RIGHT)


def test_random_walk_keeps_cells_exclusive() -> None:
    state, _ = make_board_state(
        player_positions=[(2, 2)],
        box_positions=[(1, 1), (2, 1), (3, 3), (1, 3)],
        wall_positions=[(0, 0), (4, 4), (2, 4)],
        target_positions=[(0, 4)],
    )
    keys = ["up", "left", "down", "down", "right", "right", "up", "up", "left"] * 4
    for key in keys:
        state = tick(enqueue_key(state, key))
        assert_no_shared_cells(state)
    assert state.turn == len(keys)


def test_tick_does_not_mutate_input_state() -> None:
    state, ids = make_board_state(player_positions=[(0, 0)], box_positions=[(1, 0)])
    queued = enqueue_key(state, "right")
    after = tick(queued)
    assert list(queued.input_queue) == ["right"]
    assert queued.moves_count == 0
    assert after.position != queued.position
    assert queued.position == state.position
    assert_entity_positions(queued, {ids["box_ids"][0]: (1, 0)})
