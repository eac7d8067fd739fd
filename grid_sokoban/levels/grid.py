from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from grid_sokoban.objectives import default_objective_fn
from grid_sokoban.types import ObjectiveFn, QueuePolicy
from .entity_spec import EntitySpec

# Grid coordinate alias (x, y)
Position = Tuple[int, int]


@dataclass
class Level:
    """
    Grid-centric, authoring-time level representation.
    - `grid[y][x]` is a list of `EntitySpec` instances at that cell.
    - Level stores configuration like objective_fn and queue_policy.
    - This module is State-agnostic. Use the converter (levels.convert.to_state)
      to bridge between Level and the immutable ECS State.
    """

    width: int
    height: int
    objective_fn: ObjectiveFn = default_objective_fn
    queue_policy: QueuePolicy = QueuePolicy.FIFO

    # 2D array of cells: each cell holds a list of EntitySpec
    grid: List[List[List[EntitySpec]]] = field(init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid grid size {self.width}x{self.height}")
        self.grid = [[[] for _ in range(self.width)] for _ in range(self.height)]

    # -------- Grid editing API (purely authoring-time) --------

    def add(self, pos: Position, obj: EntitySpec) -> None:
        """
        Place an EntitySpec into the cell at pos (x, y).
        Raises ValueError if obj and an existing object both claim the cell.
        """
        x, y = pos
        self._check_bounds(x, y)
        cell = self.grid[y][x]
        if obj.occupies and any(o.occupies for o in cell):
            raise ValueError(f"Cell {(x, y)} already has a blocking occupant")
        cell.append(obj)

    def objects_at(self, pos: Position) -> List[EntitySpec]:
        """
        Return a shallow copy of the list of objects at pos.
        """
        x, y = pos
        self._check_bounds(x, y)
        return list(self.grid[y][x])

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )
