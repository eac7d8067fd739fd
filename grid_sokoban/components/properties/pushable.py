from dataclasses import dataclass


@dataclass(frozen=True)
class Pushable:
    """Marker indicating the entity can be displaced by a push.

    A pushable entity occupies its cell exclusively. When a player moves
    toward it, the entity joins the push chain and shifts with the player if
    the chain ends in an empty cell.
    """

    pass
