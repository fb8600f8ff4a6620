import sys
from collections import deque
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from monster_sweeper.core.rng import RandomSource  # noqa: E402


class ScriptedRandom(RandomSource):
    """RandomSource whose ratio/coin results can be queued up front.

    Queued values are consumed first; once a queue is empty the seeded stream
    takes over, so floor generation after a scripted fight stays random.
    """

    def __init__(self, seed=0, ratios=(), coins=()):
        super().__init__(seed)
        self.ratios = deque(ratios)
        self.coins = deque(coins)

    def ratio(self, numerator, denominator):
        if self.ratios:
            return self.ratios.popleft()
        return super().ratio(numerator, denominator)

    def coin_flip(self):
        if self.coins:
            return self.coins.popleft()
        return super().coin_flip()


@pytest.fixture
def rng():
    return RandomSource(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
