from __future__ import annotations

import logging
from typing import List, Set

from ..core.rng import RandomSource
from ..game.entities import Enemy
from .grid import Coordinate, Grid

logger = logging.getLogger(__name__)

DEFAULT_MAX_NUDGES = 256


def max_enemy_count(floor_index: int, width: int, height: int) -> int:
    """Upper bound of the enemy count drawn for a floor (never below 1)."""
    return max(1, min(width * height, 1 + floor_index))


def max_enemy_strength(floor_index: int) -> int:
    return (1 + floor_index) ** 2


class EnemyPlacer:
    """Procedurally places non-overlapping enemies, scaled by floor depth.

    Each enemy gets a uniform starting cell. On a collision the cell is nudged by
    one step on x and one step on y, each direction picked by a coin flip and held
    at the grid edge, until it lands on a free cell. The nudge walk is bounded by
    ``max_nudges``; past that the enemy takes a uniform pick among free cells so
    thin grids (width or height of 1) always terminate.
    """

    def __init__(self, max_nudges: int = DEFAULT_MAX_NUDGES) -> None:
        if max_nudges < 0:
            raise ValueError("max_nudges must be >= 0")
        self.max_nudges = max_nudges

    def place(self, floor_index: int, grid: Grid, rng: RandomSource) -> List[Enemy]:
        count = rng.randint(1, max_enemy_count(floor_index, grid.width, grid.height))
        strength_cap = max_enemy_strength(floor_index)
        occupied: Set[Coordinate] = set()
        enemies: List[Enemy] = []

        for _ in range(count):
            pos = Coordinate(rng.randrange(grid.width), rng.randrange(grid.height))
            pos = self._settle(pos, occupied, grid, rng)
            occupied.add(pos)
            enemies.append(Enemy(position=pos, strength=rng.randint(1, strength_cap)))

        logger.info(
            "Placed %d enemies on floor %d (strength 1..%d)", len(enemies), floor_index, strength_cap
        )
        return enemies

    def _settle(self, pos: Coordinate, occupied: Set[Coordinate], grid: Grid, rng: RandomSource) -> Coordinate:
        nudges = 0
        while pos in occupied:
            if nudges >= self.max_nudges:
                free = [c for c in grid.cells() if c not in occupied]
                fallback = rng.choice(free)
                logger.warning(
                    "Nudge limit (%d) hit at %s on %r; falling back to free cell %s",
                    self.max_nudges,
                    pos,
                    grid,
                    fallback,
                )
                return fallback
            pos = self._nudge(pos, grid, rng)
            nudges += 1
        if nudges:
            logger.debug("Enemy settled at %s after %d nudges", pos, nudges)
        return pos

    @staticmethod
    def _nudge(pos: Coordinate, grid: Grid, rng: RandomSource) -> Coordinate:
        dx = 1 if rng.coin_flip() else -1
        dy = -1 if rng.coin_flip() else 1
        return grid.clamp(pos.x + dx, pos.y + dy)


def place_enemies(
    floor_index: int,
    width: int,
    height: int,
    rng: RandomSource,
    max_nudges: int = DEFAULT_MAX_NUDGES,
) -> List[Enemy]:
    """Convenience wrapper around :class:`EnemyPlacer` for a bare width/height."""
    return EnemyPlacer(max_nudges).place(floor_index, Grid(width, height), rng)


__all__ = ["EnemyPlacer", "place_enemies", "max_enemy_count", "max_enemy_strength"]
