from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from ..core.rng import RandomSource
from ..dungeon.floor import Floor
from ..dungeon.grid import Coordinate, Grid
from ..dungeon.placement import EnemyPlacer
from ..fov.visibility import reveal_spawn
from .entities import Player

logger = logging.getLogger(__name__)


class ProgressState(str, Enum):
    ACTIVE = "active"          # current floor still has enemies
    CLEARED = "cleared"        # last enemy removed; advance pending on next tick
    ADVANCING = "advancing"    # building the next floor
    COMPLETED = "completed"    # final floor cleared; run won


class Dungeon:
    """Ordered floors of a run plus the index of the current one.

    Floors are appended as the player descends. Completed floors are kept but the
    run only moves forward.
    """

    def __init__(self) -> None:
        self.floors: List[Floor] = []
        self.current_index: int = -1

    @property
    def current(self) -> Floor:
        if self.current_index < 0:
            raise RuntimeError("Dungeon has no floor yet")
        return self.floors[self.current_index]

    def append(self, floor: Floor) -> Floor:
        if floor.index != len(self.floors):
            raise ValueError(f"Expected floor index {len(self.floors)}, got {floor.index}")
        self.floors.append(floor)
        self.current_index = floor.index
        return floor

    def __len__(self) -> int:
        return len(self.floors)


class FloorProgression:
    """
    Floor lifecycle state machine.

    ACTIVE --(last enemy removed)--> CLEARED --(tick)--> ADVANCING --> ACTIVE
    CLEARED on the configured final floor becomes COMPLETED instead.
    """

    def __init__(
        self,
        grid: Grid,
        placer: Optional[EnemyPlacer] = None,
        *,
        max_floor: Optional[int] = None,
        floor_reward_hp: int = 1,
    ) -> None:
        self.grid = grid
        self.placer = placer or EnemyPlacer()
        self.max_floor = max_floor
        self.floor_reward_hp = floor_reward_hp
        self.state = ProgressState.ACTIVE

    def generate_floor(self, index: int, rng: RandomSource) -> Floor:
        enemies = self.placer.place(index, self.grid, rng)
        floor = Floor(index, self.grid, enemies)
        logger.info("Generated floor %d (%r) with %d enemies", index, self.grid, len(enemies))
        return floor

    def start(self, dungeon: Dungeon, player: Player, rng: RandomSource) -> Floor:
        """Generate floor 0 and reveal the player's starting cell."""
        floor = dungeon.append(self.generate_floor(0, rng))
        self.grid.require(player.position)
        reveal_spawn(floor, player.position)
        self.state = ProgressState.ACTIVE
        return floor

    def begin(self, dungeon: Dungeon, floor: Floor, player: Player) -> Floor:
        """Adopt an already built first floor (fixtures, replays)."""
        dungeon.append(floor)
        reveal_spawn(floor, player.position)
        self.state = ProgressState.ACTIVE
        self.check(floor)
        return floor

    def is_final(self, floor: Floor) -> bool:
        return self.max_floor is not None and floor.index >= self.max_floor

    def check(self, floor: Floor) -> ProgressState:
        """Move ACTIVE to CLEARED (or COMPLETED) once the floor has no enemies."""
        if self.state is ProgressState.ACTIVE and floor.is_cleared:
            if self.is_final(floor):
                self.state = ProgressState.COMPLETED
                logger.info("Final floor %d cleared; dungeon completed", floor.index)
            else:
                self.state = ProgressState.CLEARED
                logger.info("Floor %d cleared", floor.index)
        return self.state

    def tick(self, dungeon: Dungeon, player: Player, rng: RandomSource) -> Optional[Floor]:
        """Perform a pending advance. Returns the new floor, or None if nothing was pending."""
        if self.state is not ProgressState.CLEARED:
            return None

        self.state = ProgressState.ADVANCING
        next_index = dungeon.current.index + 1
        floor = dungeon.append(self.generate_floor(next_index, rng))

        spawn = Coordinate(rng.randrange(self.grid.width), rng.randrange(self.grid.height))
        player.move_to(spawn)
        player.hit_points += self.floor_reward_hp
        reveal_spawn(floor, spawn)

        self.state = ProgressState.ACTIVE
        logger.info(
            "Advanced to floor %d; player at %s with %d hp", floor.index, spawn, player.hit_points
        )
        return floor
