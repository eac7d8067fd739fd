"""Property component aggregates.

This module re-exports the *property* components: stable attributes that
define an entity's capabilities (:class:`Agent`, :class:`Pushable`,
:class:`Blocking`, :class:`Target`) and placement (:class:`Position`,
:class:`Appearance`). Systems test membership in the matching ``State``
store to decide how an entity takes part in a push.
"""

from .agent import Agent
from .appearance import Appearance, AppearanceName
from .blocking import Blocking
from .position import Position
from .pushable import Pushable
from .target import Target

__all__ = [
    "Agent",
    "Appearance",
    "AppearanceName",
    "Blocking",
    "Position",
    "Pushable",
    "Target",
]
