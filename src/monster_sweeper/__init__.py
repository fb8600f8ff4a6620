"""
Monster Sweeper package root.

A turn-based grid dungeon crawler engine: procedural enemy placement,
fog of war revealed along the player's path, probabilistic combat and
floor progression. Rendering and input handling live outside this package;
they read :class:`~monster_sweeper.game.view.SimulationView` snapshots and
feed structured commands to :class:`~monster_sweeper.game.simulation.DungeonSimulation`.
"""

__version__ = "0.5.0"

__all__ = [
    "__version__",
]
