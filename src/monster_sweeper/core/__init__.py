from .rng import RandomSource

__all__ = ["RandomSource"]
