"""grid_sokoban.components
=========================

Aggregate import surface for all ECS component dataclasses used by the engine.

All component classes are simple frozen ``@dataclass`` value objects; they
carry no behavior and are manipulated by systems during a tick, e.g.::

    from grid_sokoban.components import Position, Pushable, Target

"""

from .properties import Agent
from .properties import Appearance, AppearanceName
from .properties import Blocking
from .properties import Position
from .properties import Pushable
from .properties import Target

__all__ = [
    "Agent",
    "Appearance",
    "AppearanceName",
    "Blocking",
    "Position",
    "Pushable",
    "Target",
]
