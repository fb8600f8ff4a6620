from dataclasses import dataclass

from ..dungeon.grid import Coordinate


@dataclass
class Enemy:
    """A static enemy waiting on a floor cell until engaged."""
    position: Coordinate
    strength: int

    def __post_init__(self) -> None:
        if self.strength <= 0:
            raise ValueError("enemy strength must be positive")


@dataclass
class Player:
    """The single player of a run."""
    position: Coordinate
    strength: int
    hit_points: int

    @property
    def alive(self) -> bool:
        return self.hit_points > 0

    def move_to(self, position: Coordinate) -> None:
        self.position = position

    def __repr__(self) -> str:
        return f"Player(@{self.position.x},{self.position.y} str={self.strength} hp={self.hit_points})"
