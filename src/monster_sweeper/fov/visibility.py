from __future__ import annotations

import logging
import math
from typing import List

from ..dungeon.floor import Floor
from ..dungeon.grid import Coordinate

logger = logging.getLogger(__name__)


def _round_half_away(value: float) -> int:
    # round() is banker's rounding; 2.5 must land on 3 like -2.5 lands on -3
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def rasterize_line(start: Coordinate, end: Coordinate) -> List[Coordinate]:
    """
    DDA line rasterization. Returns the cells from start to end inclusive.

    Takes max(|dx|, |dy|) equal steps along the line, rounding the running
    floating position to the nearest cell at each step, so consecutive cells
    differ by at most one unit on each axis. Consecutive duplicates cannot occur
    because the major axis advances exactly one cell per step.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return [start]

    x_step = dx / steps
    y_step = dy / steps
    x, y = float(start.x), float(start.y)
    cells: List[Coordinate] = []
    for _ in range(steps + 1):
        cells.append(Coordinate(_round_half_away(x), _round_half_away(y)))
        x += x_step
        y += y_step
    return cells


def reveal(floor: Floor, start: Coordinate, end: Coordinate) -> int:
    """
    Reveal every cell on the straight path from start to end on the floor.

    Idempotent: cells already revealed stay revealed. Returns how many cells were
    newly revealed by this call.
    """
    floor.grid.require(start)
    floor.grid.require(end)
    newly = 0
    for cell in rasterize_line(start, end):
        if floor.reveal_cell(cell):
            newly += 1
    logger.debug("Revealed %d new cells on floor %d along %s -> %s", newly, floor.index, start, end)
    return newly


def reveal_spawn(floor: Floor, spawn: Coordinate) -> int:
    """Reveal the single cell the player enters a floor on."""
    return reveal(floor, spawn, spawn)
