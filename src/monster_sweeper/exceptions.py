class MonsterSweeperError(Exception):
    """Base exception for the Monster Sweeper project."""


class ConfigError(MonsterSweeperError):
    """Raised when configuration values are invalid or cannot be parsed."""


class SimulationOverError(MonsterSweeperError):
    """Raised when a command is issued after the run reached a terminal state."""


class CommandParseError(MonsterSweeperError):
    """Raised when raw text cannot be turned into a command."""
