from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Tuple

from ..dungeon.grid import Coordinate
from .progression import ProgressState
from .results import SimulationStatus


@dataclass(frozen=True)
class EnemyView:
    position: Coordinate
    strength: int


@dataclass(frozen=True)
class PlayerView:
    position: Coordinate
    strength: int
    hit_points: int


@dataclass(frozen=True)
class SimulationView:
    """Read-only snapshot of everything a presentation layer may draw.

    Holds copies, so later turns never change a snapshot already handed out.
    """

    floor_index: int
    width: int
    height: int
    enemies: Tuple[EnemyView, ...]
    unrevealed: FrozenSet[Coordinate]
    player: PlayerView
    progress: ProgressState
    status: SimulationStatus

    @property
    def remaining_enemies(self) -> int:
        return len(self.enemies)

    def is_revealed(self, coord: Coordinate) -> bool:
        return coord not in self.unrevealed

    def enemy_at(self, coord: Coordinate) -> EnemyView | None:
        for enemy in self.enemies:
            if enemy.position == coord:
                return enemy
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "floor": self.floor_index,
            "width": self.width,
            "height": self.height,
            "player": {
                "position": list(self.player.position.as_tuple()),
                "strength": self.player.strength,
                "hit_points": self.player.hit_points,
            },
            "enemies": [
                {"position": list(e.position.as_tuple()), "strength": e.strength}
                for e in sorted(self.enemies, key=lambda e: e.position)
            ],
            "revealed_cells": self.width * self.height - len(self.unrevealed),
            "progress": self.progress.value,
            "status": self.status.value,
        }
