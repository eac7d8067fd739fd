from dataclasses import dataclass


@dataclass(frozen=True)
class Target:
    """Marks a scoring target cell.

    Targets never block and never move. The default objective is met when
    every target shares its cell with a pushable entity.
    """

    pass
