from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class RunStats:
    """Counters accumulated over a run."""

    moves: int = 0
    cells_revealed: int = 0
    combats_won: int = 0
    combats_lost: int = 0
    floors_cleared: int = 0
    encountered_strengths: List[int] = field(default_factory=list)

    @property
    def average_encountered_strength(self) -> Optional[float]:
        """Mean strength of the enemies the player walked onto, or None if none yet."""
        if not self.encountered_strengths:
            return None
        return sum(self.encountered_strengths) / len(self.encountered_strengths)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "moves": self.moves,
            "cells_revealed": self.cells_revealed,
            "combats_won": self.combats_won,
            "combats_lost": self.combats_lost,
            "floors_cleared": self.floors_cleared,
            "average_encountered_strength": self.average_encountered_strength,
        }
