"""Exception hierarchy.

Two failure classes exist:

* :class:`LevelLoadError` - the level text is structurally invalid. Raised
  at load time only; there is nothing to recover, the caller reports the
  message and stops.
* :class:`InvariantViolation` - engine state is corrupt (two blocking
  entities on one cell, a relocation leaving the grid). It derives from
  ``AssertionError`` and is never caught inside the engine.

Blocked moves are not errors; they resolve to an empty plan.
"""

from typing import Optional


class GridSokobanError(Exception):
    """Base class for all engine errors."""


class LevelLoadError(GridSokobanError, ValueError):
    """Level text could not be turned into a state.

    Attributes:
        token: Offending map token, if the error concerns one.
        x: Column of the offending token.
        y: Row of the offending token.
    """

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        x: Optional[int] = None,
        y: Optional[int] = None,
    ):
        if token is not None:
            message = f"{message}: {token!r} at (x={x}, y={y})"
        super().__init__(message)
        self.token = token
        self.x = x
        self.y = y


class InvariantViolation(GridSokobanError, AssertionError):
    """Engine state broke a structural invariant."""
