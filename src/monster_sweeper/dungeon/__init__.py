from .grid import Coordinate, Grid

__all__ = ["Coordinate", "Grid"]
