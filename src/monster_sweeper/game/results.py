from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..dungeon.grid import Coordinate


class SimulationStatus(str, Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"
    VICTORY = "victory"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self is not SimulationStatus.RUNNING


class MoveOutcome(str, Enum):
    MOVED = "moved"
    OUT_OF_BOUNDS = "out_of_bounds"
    ENEMY_ENCOUNTERED = "enemy_encountered"


class AttackOutcome(str, Enum):
    NO_TARGET = "no_target"
    VICTORY = "victory"
    DEFEAT = "defeat"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class MoveResult:
    """Result of a move command.

    enemy_strength and win_chance are only set for ENEMY_ENCOUNTERED and are
    informational; reporting them changes nothing.
    """

    outcome: MoveOutcome
    position: Coordinate
    cells_revealed: int = 0
    enemy_strength: Optional[int] = None
    win_chance: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "outcome": self.outcome.value,
            "position": list(self.position.as_tuple()),
            "cells_revealed": self.cells_revealed,
        }
        if self.outcome is MoveOutcome.ENEMY_ENCOUNTERED:
            data["enemy_strength"] = self.enemy_strength
            data["win_chance"] = self.win_chance
        return data


@dataclass(frozen=True)
class AttackResult:
    """Result of an attack command."""

    outcome: AttackOutcome
    strength_gained: int = 0
    remaining_hp: int = 0
    floor_cleared: bool = False
    dungeon_completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "strength_gained": self.strength_gained,
            "remaining_hp": self.remaining_hp,
            "floor_cleared": self.floor_cleared,
            "dungeon_completed": self.dungeon_completed,
        }
