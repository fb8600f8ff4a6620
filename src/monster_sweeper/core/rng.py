from __future__ import annotations

import hashlib
import logging
import random
from typing import Any, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def derive_seed(source: str) -> int:
    """Derive a 32-bit integer seed from an arbitrary string using SHA256."""
    digest = hashlib.sha256(source.encode("utf-8")).digest()
    val = int.from_bytes(digest[:8], "big", signed=False)
    return val & 0xFFFFFFFF


class RandomSource:
    """
    A thin wrapper around random.Random to:
    - keep simulation randomness off the process-wide random state
    - support optional deterministic seeding for tests and replays
    - provide the few draws the dungeon needs (coin flips, exact ratios)
    """

    def __init__(self, seed: Optional[Any] = None) -> None:
        self._rng = random.Random()
        self._seed: Optional[int] = None
        if seed is not None:
            self.set_seed(seed)
        else:
            self._rng.seed()
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def set_seed(self, seed_or_str: Any) -> int:
        """
        Set the RNG seed. Accepts an int, a string, or any object convertible to string.
        Returns the effective integer seed used.
        """
        if isinstance(seed_or_str, int):
            seed = seed_or_str & 0xFFFFFFFF
        else:
            seed = derive_seed(str(seed_or_str))
        self._rng.seed(seed)
        self._seed = seed
        logger.debug("RandomSource seeded with %d", seed)
        return seed

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def randrange(self, stop: int) -> int:
        return self._rng.randrange(stop)

    def random(self) -> float:
        return self._rng.random()

    def coin_flip(self) -> bool:
        return self._rng.getrandbits(1) == 1

    def ratio(self, numerator: int, denominator: int) -> bool:
        """Return True with probability numerator/denominator.

        Uses an integer draw so the probability is exact.
        """
        if denominator <= 0:
            raise ValueError(f"denominator must be positive, got {denominator}")
        if not 0 <= numerator <= denominator:
            raise ValueError(f"numerator must be within [0, {denominator}], got {numerator}")
        return self._rng.randrange(denominator) < numerator

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("RandomSource.choice() received an empty sequence")
        return seq[self._rng.randrange(len(seq))]


__all__ = ["RandomSource", "derive_seed"]
