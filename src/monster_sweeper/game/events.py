from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by DungeonSimulation to notify presentation or tooling."""

    PLAYER_MOVED = auto()
    ENEMY_ENCOUNTERED = auto()
    ENEMY_DEFEATED = auto()
    PLAYER_DEFEATED = auto()
    FLOOR_CLEARED = auto()
    FLOOR_CHANGED = auto()
    GAME_OVER = auto()
    DUNGEON_COMPLETED = auto()
    QUIT = auto()
