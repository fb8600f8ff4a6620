from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

from ..core.rng import RandomSource
from ..dungeon.floor import Floor
from ..game.entities import Enemy, Player

logger = logging.getLogger(__name__)


class CombatOutcome(str, Enum):
    PLAYER_WINS = "player_wins"
    PLAYER_LOSES = "player_loses"


@dataclass(frozen=True)
class CombatResult:
    """Outcome of a single player-vs-enemy encounter.

    The resolver never mutates state; the caller applies strength_gain and removes
    the enemy on a win, or takes one hit point on a loss.
    """

    outcome: CombatOutcome
    enemy_strength: int
    strength_gain: int = 0

    @property
    def player_won(self) -> bool:
        return self.outcome is CombatOutcome.PLAYER_WINS


def win_chance(player_strength: int, enemy_strength: int) -> float:
    """Probability the player beats the enemy: p / (p + e)."""
    total = player_strength + enemy_strength
    if total <= 0:
        raise ValueError("combined strength must be positive")
    return player_strength / total


class CombatResolver:
    """Resolves encounters with a strength-weighted coin."""

    def find_target(self, floor: Floor, player: Player) -> Optional[Enemy]:
        """Return the enemy sharing the player's cell, or None when there is no target."""
        return floor.enemy_at(player.position)

    def resolve(self, player: Player, enemy: Enemy, rng: RandomSource) -> CombatResult:
        if player.position != enemy.position:
            raise ValueError(f"{player!r} is not on the same cell as enemy at {enemy.position}")

        won = rng.ratio(player.strength, player.strength + enemy.strength)
        if won:
            gain = rng.randint(1, enemy.strength)
            logger.debug(
                "Combat at %s: player str=%d beat enemy str=%d (+%d)",
                enemy.position,
                player.strength,
                enemy.strength,
                gain,
            )
            return CombatResult(CombatOutcome.PLAYER_WINS, enemy_strength=enemy.strength, strength_gain=gain)

        logger.debug(
            "Combat at %s: player str=%d lost to enemy str=%d",
            enemy.position,
            player.strength,
            enemy.strength,
        )
        return CombatResult(CombatOutcome.PLAYER_LOSES, enemy_strength=enemy.strength)
