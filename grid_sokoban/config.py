"""Engine configuration.

:class:`EngineConfig` gathers the knobs a host needs to start a level: the
level text, the objective and queue policy, and rendering options. Values
come from keyword arguments or from ``GRID_SOKOBAN_*`` environment
variables via :meth:`EngineConfig.from_env`. Names are resolved through the
registries (``OBJECTIVE_FN_REGISTRY``, ``TEXTURE_MAP_REGISTRY``).

The library itself never configures logging; hosts call
:func:`configure_logging` once at startup.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from grid_sokoban.levels.text import DEFAULT_LEVEL, load_level
from grid_sokoban.objectives import OBJECTIVE_FN_REGISTRY
from grid_sokoban.renderer.texture import (
    DEFAULT_ASSET_ROOT,
    DEFAULT_RESOLUTION,
    TEXTURE_MAP_REGISTRY,
    TextureRenderer,
)
from grid_sokoban.state import State
from grid_sokoban.types import QueuePolicy

ENV_PREFIX = "GRID_SOKOBAN_"


@dataclass(frozen=True)
class EngineConfig:
    """Startup configuration.

    Attributes:
        level_text: Level in the text format (``DEFAULT_LEVEL`` by default).
        objective: Key into ``OBJECTIVE_FN_REGISTRY``.
        queue_policy: Input queue consumption order.
        texture_map: Key into ``TEXTURE_MAP_REGISTRY``.
        render_resolution: Rendered board width in pixels.
        asset_root: Directory holding sprite assets.
        log_level: Logging level name used by :func:`configure_logging`.
    """

    level_text: str = DEFAULT_LEVEL
    objective: str = "default"
    queue_policy: QueuePolicy = QueuePolicy.FIFO
    texture_map: str = "sokoban"
    render_resolution: int = DEFAULT_RESOLUTION
    asset_root: str = DEFAULT_ASSET_ROOT
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.objective not in OBJECTIVE_FN_REGISTRY:
            raise ValueError(
                f"Unknown objective {self.objective!r}; "
                f"expected one of {sorted(OBJECTIVE_FN_REGISTRY)}"
            )
        if self.texture_map not in TEXTURE_MAP_REGISTRY:
            raise ValueError(
                f"Unknown texture map {self.texture_map!r}; "
                f"expected one of {sorted(TEXTURE_MAP_REGISTRY)}"
            )
        if self.render_resolution <= 0:
            raise ValueError("render_resolution must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Build a config from ``GRID_SOKOBAN_*`` variables.

        ``GRID_SOKOBAN_LEVEL_FILE`` names a file holding the level text; the
        other variables (``OBJECTIVE``, ``QUEUE_POLICY``, ``TEXTURE_MAP``,
        ``RESOLUTION``, ``ASSET_ROOT``, ``LOG_LEVEL``) map onto fields of the
        same name. Unset variables keep the defaults.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            value = env.get(ENV_PREFIX + name)
            return value if value else None

        defaults = cls()
        level_text = defaults.level_text
        level_file = get("LEVEL_FILE")
        if level_file is not None:
            with open(level_file, encoding="utf-8") as f:
                level_text = f.read()

        resolution = get("RESOLUTION")
        queue_policy = get("QUEUE_POLICY")
        return cls(
            level_text=level_text,
            objective=get("OBJECTIVE") or defaults.objective,
            queue_policy=(
                QueuePolicy(queue_policy.lower())
                if queue_policy is not None
                else defaults.queue_policy
            ),
            texture_map=get("TEXTURE_MAP") or defaults.texture_map,
            render_resolution=(
                int(resolution) if resolution is not None else defaults.render_resolution
            ),
            asset_root=get("ASSET_ROOT") or defaults.asset_root,
            log_level=(get("LOG_LEVEL") or defaults.log_level).upper(),
        )


def make_state(config: EngineConfig) -> State:
    """Load the configured level into its initial ``State``."""
    return load_level(
        config.level_text,
        objective_fn=OBJECTIVE_FN_REGISTRY[config.objective],
        queue_policy=config.queue_policy,
    )


def make_renderer(config: EngineConfig) -> TextureRenderer:
    return TextureRenderer(
        resolution=config.render_resolution,
        texture_map=TEXTURE_MAP_REGISTRY[config.texture_map],
        asset_root=config.asset_root,
    )


def configure_logging(config: EngineConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
