import logging
import os

LOG_LEVEL_ENV = "MS_LOG_LEVEL"


def level_for_verbosity(verbosity: int) -> int:
    """Map a count of -v flags to a log level: none=WARNING, -v=INFO, -vv=DEBUG."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def resolve_level(default_level: int) -> int:
    """Return the level named by MS_LOG_LEVEL, or default_level when unset or unknown."""
    level_name = os.getenv(LOG_LEVEL_ENV)
    if not level_name:
        return default_level
    level = getattr(logging, level_name.upper(), None)
    return level if isinstance(level, int) else default_level


def configure_logging(default_level: int = logging.INFO) -> int:
    """Configure root logger; MS_LOG_LEVEL wins over default_level.

    Returns the level applied.
    """
    level = resolve_level(default_level)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
    return level
