from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..combat.resolver import CombatResolver, win_chance
from ..config import SimulationConfig
from ..core.rng import RandomSource
from ..dungeon.floor import Floor
from ..dungeon.grid import Coordinate, Grid
from ..dungeon.placement import EnemyPlacer
from ..exceptions import SimulationOverError
from ..fov.visibility import reveal
from .entities import Player
from .events import GameEvent
from .progression import Dungeon, FloorProgression, ProgressState
from .results import AttackOutcome, AttackResult, MoveOutcome, MoveResult, SimulationStatus
from .stats import RunStats
from .view import EnemyView, PlayerView, SimulationView

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent, "DungeonSimulation"], None]


class DungeonSimulation:
    """Owns the dungeon, the player and the RNG, and processes one command per turn.

    Commands are structured calls (:meth:`process_move`, :meth:`process_attack`,
    :meth:`quit`); the presentation layer only reads :meth:`current_view`.
    Every command starts with :meth:`tick`, so a floor cleared on the previous
    turn is replaced before the new command is handled.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        rng: Optional[RandomSource] = None,
        *,
        first_floor: Optional[Floor] = None,
        player: Optional[Player] = None,
    ) -> None:
        self.config = config or SimulationConfig()
        self.rng = rng or RandomSource(self.config.seed)
        self._listeners: List[Listener] = []

        if first_floor is not None:
            self.grid = first_floor.grid
        else:
            self.grid = Grid(self.config.floor.width, self.config.floor.height)

        self.player = player or Player(
            position=Coordinate(0, 0),
            strength=self.config.player.strength,
            hit_points=self.config.player.hit_points,
        )
        self.resolver = CombatResolver()
        self.progression = FloorProgression(
            self.grid,
            EnemyPlacer(self.config.placement.max_nudges),
            max_floor=self.config.floor.max_floor,
            floor_reward_hp=self.config.progression.floor_reward_hp,
        )
        self.dungeon = Dungeon()
        self.stats = RunStats()
        self.status = SimulationStatus.RUNNING

        if first_floor is not None:
            self.progression.begin(self.dungeon, first_floor, self.player)
        else:
            self.progression.start(self.dungeon, self.player, self.rng)
        if self.progression.state is ProgressState.COMPLETED:
            self.status = SimulationStatus.VICTORY
        logger.info("Initialized DungeonSimulation at floor %d, %r", self.floor.index, self.player)

    # Listeners

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to game events."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for l in list(self._listeners):
            try:
                l(event, self)
            except Exception as ex:
                logger.exception("Listener errored on %s: %s", event, ex)

    # State accessors

    @property
    def floor(self) -> Floor:
        return self.dungeon.current

    @property
    def floor_index(self) -> int:
        return self.floor.index

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    def _ensure_running(self) -> None:
        if self.is_over:
            raise SimulationOverError(f"Simulation already ended ({self.status.value})")

    # Turn processing

    def tick(self) -> Optional[Floor]:
        """Advance past a cleared floor if one is pending."""
        if self.is_over:
            return None
        floor = self.progression.tick(self.dungeon, self.player, self.rng)
        if floor is not None:
            self._emit(GameEvent.FLOOR_CHANGED)
        return floor

    def process_move(self, target: Coordinate) -> MoveResult:
        """Move the player to target, revealing the straight path walked.

        Out-of-bounds targets change nothing.
        """
        self._ensure_running()
        self.tick()
        if not self.grid.contains(target):
            logger.debug("Rejected move to %s: outside %r", target, self.grid)
            return MoveResult(MoveOutcome.OUT_OF_BOUNDS, position=self.player.position)

        origin = self.player.position
        revealed = reveal(self.floor, origin, target)
        self.player.move_to(target)
        self.stats.moves += 1
        self.stats.cells_revealed += revealed
        logger.info("Player moved from %s to %s", origin, target)
        self._emit(GameEvent.PLAYER_MOVED)

        enemy = self.floor.enemy_at(target)
        if enemy is None:
            return MoveResult(MoveOutcome.MOVED, position=target, cells_revealed=revealed)

        chance = win_chance(self.player.strength, enemy.strength)
        self.stats.encountered_strengths.append(enemy.strength)
        logger.info(
            "Player found enemy at %s with strength %d; win chance %.1f%%", target, enemy.strength, chance * 100.0
        )
        self._emit(GameEvent.ENEMY_ENCOUNTERED)
        return MoveResult(
            MoveOutcome.ENEMY_ENCOUNTERED,
            position=target,
            cells_revealed=revealed,
            enemy_strength=enemy.strength,
            win_chance=chance,
        )

    def process_attack(self) -> AttackResult:
        """Fight the enemy on the player's cell, if any."""
        self._ensure_running()
        self.tick()
        enemy = self.resolver.find_target(self.floor, self.player)
        if enemy is None:
            logger.info("No enemy found at %s", self.player.position)
            return AttackResult(AttackOutcome.NO_TARGET, remaining_hp=self.player.hit_points)

        result = self.resolver.resolve(self.player, enemy, self.rng)
        if result.player_won:
            self.player.strength += result.strength_gain
            self.floor.remove_enemy(enemy)
            self.stats.combats_won += 1
            logger.info("Player triumphed over enemy at %s! +%d strength", enemy.position, result.strength_gain)
            self._emit(GameEvent.ENEMY_DEFEATED)
            return self._after_victory(result.strength_gain)

        self.player.hit_points -= 1
        self.stats.combats_lost += 1
        if self.player.hit_points <= 0:
            self.player.hit_points = 0
            self.status = SimulationStatus.GAME_OVER
            logger.info("Player was defeated at %s; game over", enemy.position)
            self._emit(GameEvent.PLAYER_DEFEATED)
            self._emit(GameEvent.GAME_OVER)
            return AttackResult(AttackOutcome.GAME_OVER, remaining_hp=0)

        logger.info("Player was defeated by enemy at %s! -1 hp (%d left)", enemy.position, self.player.hit_points)
        self._emit(GameEvent.PLAYER_DEFEATED)
        return AttackResult(AttackOutcome.DEFEAT, remaining_hp=self.player.hit_points)

    def _after_victory(self, gained: int) -> AttackResult:
        state = self.progression.check(self.floor)
        cleared = state in (ProgressState.CLEARED, ProgressState.COMPLETED)
        completed = state is ProgressState.COMPLETED
        if cleared:
            self.stats.floors_cleared += 1
            self._emit(GameEvent.FLOOR_CLEARED)
        if completed:
            self.status = SimulationStatus.VICTORY
            self._emit(GameEvent.DUNGEON_COMPLETED)
        return AttackResult(
            AttackOutcome.VICTORY,
            strength_gained=gained,
            remaining_hp=self.player.hit_points,
            floor_cleared=cleared,
            dungeon_completed=completed,
        )

    def quit(self) -> None:
        """End the run at the player's request."""
        self._ensure_running()
        self.status = SimulationStatus.QUIT
        logger.info("Player quit at floor %d", self.floor.index)
        self._emit(GameEvent.QUIT)

    # View

    def current_view(self) -> SimulationView:
        floor = self.floor
        return SimulationView(
            floor_index=floor.index,
            width=floor.width,
            height=floor.height,
            enemies=tuple(EnemyView(e.position, e.strength) for e in floor.enemies),
            unrevealed=floor.unrevealed,
            player=PlayerView(self.player.position, self.player.strength, self.player.hit_points),
            progress=self.progression.state,
            status=self.status,
        )
