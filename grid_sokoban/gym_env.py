"""Gymnasium environment wrapper for grid_sokoban.

Provides a structured observation that pairs a rendered RGBA image of the
board with an info dictionary (session status and level config). Reward is
``1.0`` on the step that solves the level and ``0.0`` otherwise;
``terminated`` is ``True`` once the phase is ``WON``. Episodes are never
truncated by the environment; wrap with ``TimeLimit`` if needed.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"status": {...}, "config": {...}}}``

Usage:

``env = SokobanEnv(text=DEFAULT_LEVEL)``

Customization hooks:
    * ``initial_state_fn``: Provide a callable that returns a fully built ``State``.
    * ``render_texture_map`` / resolution let you swap assets or resolution.
"""

import logging
import string
from typing import Any, Callable, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from PIL.Image import Image as PILImage

from grid_sokoban.actions import Action, GymAction
from grid_sokoban.levels.text import load_level
from grid_sokoban.renderer.texture import (
    DEFAULT_ASSET_ROOT,
    DEFAULT_RESOLUTION,
    DEFAULT_TEXTURE_MAP,
    TextureMap,
    TextureRenderer,
    image_size,
)
from grid_sokoban.state import State
from grid_sokoban.step import step

logger = logging.getLogger(__name__)

ObsType = Dict[str, Any]

GYM_TO_ACTION: Dict[GymAction, Action] = {
    GymAction.UP: Action.UP,
    GymAction.DOWN: Action.DOWN,
    GymAction.LEFT: Action.LEFT,
    GymAction.RIGHT: Action.RIGHT,
}


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (phase, moves, turn)."""
    return {
        "phase": state.phase.value,
        "moves_count": int(state.moves_count),
        "turn": int(state.turn),
    }


def env_config_observation_dict(state: State) -> Dict[str, Any]:
    """Config portion of observation (objective name, queue policy, dimensions)."""
    objective_fn_name = getattr(state.objective_fn, "__name__", str(state.objective_fn))
    return {
        "objective_fn": objective_fn_name,
        "queue_policy": state.queue_policy.value,
        "width": state.width,
        "height": state.height,
    }


class SokobanEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for a single Sokoban level.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`grid_sokoban.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        render_resolution: int = DEFAULT_RESOLUTION,
        render_texture_map: TextureMap = DEFAULT_TEXTURE_MAP,
        render_asset_root: str = DEFAULT_ASSET_ROOT,
        initial_state_fn: Callable[..., State] = load_level,
        **kwargs: Any,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open window.
            render_resolution: Width (pixels) of rendered image; height is scaled.
            render_texture_map: Mapping of sprite names to asset paths.
            render_asset_root: Directory the texture map paths are relative to.
            initial_state_fn: Callable returning an initial ``State``.
            **kwargs: Forwarded to ``initial_state_fn`` (e.g. ``text``).
        """
        self._initial_state_fn = initial_state_fn
        self._initial_state_kwargs = kwargs
        self._render_mode = render_mode

        self.state: State = self._initial_state_fn(**self._initial_state_kwargs)
        self._texture_renderer = TextureRenderer(
            resolution=render_resolution,
            texture_map=render_texture_map,
            asset_root=render_asset_root,
            show_status=False,
        )

        cell_size = max(1, render_resolution // self.state.width)
        render_width, render_height = image_size(
            self.state.width, self.state.height, cell_size, show_status=False
        )
        text_space = spaces.Text(
            max_length=64, charset=string.ascii_letters + string.digits + "_"
        )

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(render_height, render_width, 4),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "status": spaces.Dict(
                            {
                                "phase": text_space,
                                "moves_count": int_box(0, 1_000_000_000),
                                "turn": int_box(0, 1_000_000_000),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "objective_fn": text_space,
                                "queue_policy": text_space,
                                "width": int_box(1, 10_000),
                                "height": int_box(1, 10_000),
                            }
                        ),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode by rebuilding the initial state.

        Arguments:
            seed: Forwarded to Gymnasium's RNG seeding; levels are deterministic.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        self.state = self._initial_state_fn(**self._initial_state_kwargs)
        logger.debug("Episode reset on a %dx%d level", self.state.width, self.state.height)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        step_action = GYM_TO_ACTION[GymAction(int(action))]

        was_won = self.state.won
        self.state = step(self.state, step_action)
        terminated = self.state.won
        reward = 1.0 if terminated and not was_won else 0.0
        return self._get_obs(), reward, terminated, False, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        img = self._texture_renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        return {
            "status": env_status_observation_dict(self.state),
            "config": env_config_observation_dict(self.state),
        }

    def _get_obs(self) -> ObsType:
        img = self._texture_renderer.render(self.state)
        return {"image": np.array(img), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        return {}

    def close(self) -> None:
        pass
