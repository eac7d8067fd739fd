import numpy as np
import pytest

from grid_sokoban.actions import GymAction
from grid_sokoban.gym_env import SokobanEnv
from tests.test_utils import DEFAULT_LEVEL_SOLUTION as SOLUTION


def make_env(**kwargs: object) -> SokobanEnv:
    return SokobanEnv(render_resolution=80, render_asset_root="/nonexistent-assets", **kwargs)


def test_reset_observation() -> None:
    env = make_env()
    obs, info = env.reset()
    assert info == {}
    assert obs["image"].shape == (90, 80, 4)
    assert obs["image"].dtype == np.uint8
    assert obs["info"]["status"] == {"phase": "playing", "moves_count": 0, "turn": 0}
    assert obs["info"]["config"]["width"] == 8
    assert obs["info"]["config"]["queue_policy"] == "fifo"
    assert env.observation_space["image"].shape == obs["image"].shape
    assert env.action_space.n == 4


def test_solution_terminates_with_reward() -> None:
    env = make_env()
    env.reset()
    rewards = []
    terminated = False
    for action in SOLUTION:
        _, reward, terminated, truncated, _ = env.step(np.int64(GymAction[action.name]))
        rewards.append(reward)
        assert not truncated
    assert terminated
    assert rewards[-1] == 1.0
    assert sum(rewards) == 1.0
    _, reward, terminated, _, _ = env.step(np.int64(GymAction.UP))
    assert terminated and reward == 0.0


def test_reset_restores_initial_level() -> None:
    env = make_env()
    env.reset()
    env.step(np.int64(GymAction.RIGHT))
    assert env.state.moves_count == 1
    env.reset()
    assert env.state.moves_count == 0


def test_custom_level_text() -> None:
    env = make_env(text="P . S\n. B .")
    obs, _ = env.reset()
    assert obs["info"]["config"]["width"] == 3
    assert env.render().size == (78, 52)


def test_invalid_action() -> None:
    env = make_env()
    env.reset()
    with pytest.raises(ValueError):
        env.step(np.int64(7))
