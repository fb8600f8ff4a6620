from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Coordinate:
    """A 0-based (x, y) cell position. Compared and hashed by value."""

    x: int
    y: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Grid:
    """
    Bounded 2D coordinate space shared by floors, placement and visibility.

    Coordinate system is 0-based: x in [0, width), y in [0, height).
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Grid width/height must be > 0")
        self.width = width
        self.height = height

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, coord: Coordinate) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def require(self, coord: Coordinate) -> Coordinate:
        """Return coord unchanged, raising IndexError if it lies outside the grid.

        Producers clamp before building coordinates, so a failure here is a bug.
        """
        if not self.contains(coord):
            raise IndexError(f"Coordinate {coord} out of bounds for {self!r}")
        return coord

    def clamp(self, x: int, y: int) -> Coordinate:
        return Coordinate(min(max(x, 0), self.width - 1), min(max(y, 0), self.height - 1))

    def cells(self) -> Iterator[Coordinate]:
        """Yield every cell in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coordinate(x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height)

    def __hash__(self) -> int:
        return hash((self.width, self.height))

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
