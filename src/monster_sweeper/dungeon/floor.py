from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set

from ..game.entities import Enemy
from .grid import Coordinate, Grid

logger = logging.getLogger(__name__)


class Floor:
    """One dungeon level: its grid, its enemies and its fog of war.

    The unrevealed set starts as the full grid and only ever shrinks. A floor is
    cleared once its enemy collection is empty.
    """

    def __init__(self, index: int, grid: Grid, enemies: Iterable[Enemy] = ()) -> None:
        if index < 0:
            raise ValueError("floor index must be >= 0")
        self.index = index
        self.grid = grid
        self.enemies: List[Enemy] = []
        self._occupied: Set[Coordinate] = set()
        for enemy in enemies:
            self.add_enemy(enemy)
        self._unrevealed: Set[Coordinate] = set(grid.cells())
        logger.debug("Floor %d created: %r with %d enemies", index, grid, len(self.enemies))

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def is_cleared(self) -> bool:
        return not self.enemies

    @property
    def unrevealed(self) -> frozenset[Coordinate]:
        return frozenset(self._unrevealed)

    @property
    def revealed_count(self) -> int:
        return self.grid.area - len(self._unrevealed)

    # Enemies

    def add_enemy(self, enemy: Enemy) -> None:
        self.grid.require(enemy.position)
        if enemy.position in self._occupied:
            raise ValueError(f"Floor {self.index} already has an enemy at {enemy.position}")
        self.enemies.append(enemy)
        self._occupied.add(enemy.position)

    def enemy_at(self, coord: Coordinate) -> Optional[Enemy]:
        if coord not in self._occupied:
            return None
        for enemy in self.enemies:
            if enemy.position == coord:
                return enemy
        return None

    def remove_enemy(self, enemy: Enemy) -> None:
        self.enemies.remove(enemy)
        self._occupied.discard(enemy.position)
        logger.debug("Enemy at %s removed from floor %d; %d remain", enemy.position, self.index, len(self.enemies))

    # Fog of war

    def is_revealed(self, coord: Coordinate) -> bool:
        self.grid.require(coord)
        return coord not in self._unrevealed

    def reveal_cell(self, coord: Coordinate) -> bool:
        """Reveal one cell. Returns True if it was previously hidden."""
        self.grid.require(coord)
        if coord in self._unrevealed:
            self._unrevealed.remove(coord)
            return True
        return False

    def __repr__(self) -> str:
        return f"Floor(index={self.index}, {self.width}x{self.height}, enemies={len(self.enemies)})"
