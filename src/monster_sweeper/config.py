from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

Seed = Union[int, str, None]


@dataclass
class FloorSettings:
    """Floor dimensions and the optional final floor.

    max_floor is the 0-based index of the last floor; clearing it ends the run
    in victory. None means the dungeon never ends.
    """

    width: int = 16
    height: int = 16
    max_floor: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"floor size must be positive, got {self.width}x{self.height}")
        if self.max_floor is not None and self.max_floor < 0:
            raise ConfigError(f"max_floor must be >= 0, got {self.max_floor}")


@dataclass
class PlayerSettings:
    strength: int = 2
    hit_points: int = 3

    def __post_init__(self) -> None:
        if self.strength <= 0:
            raise ConfigError(f"player strength must be > 0, got {self.strength}")
        if self.hit_points <= 0:
            raise ConfigError(f"player hit_points must be > 0, got {self.hit_points}")


@dataclass
class ProgressionSettings:
    floor_reward_hp: int = 1

    def __post_init__(self) -> None:
        if self.floor_reward_hp < 0:
            raise ConfigError(f"floor_reward_hp must be >= 0, got {self.floor_reward_hp}")


@dataclass
class PlacementSettings:
    max_nudges: int = 256

    def __post_init__(self) -> None:
        if self.max_nudges < 0:
            raise ConfigError(f"max_nudges must be >= 0, got {self.max_nudges}")


@dataclass
class SimulationConfig:
    """Configuration for a dungeon run.

    Defaults ship as a YAML package resource; an optional user file is deep-merged
    on top of them by :meth:`load`.
    """

    seed: Seed = None
    floor: FloorSettings = field(default_factory=FloorSettings)
    player: PlayerSettings = field(default_factory=PlayerSettings)
    progression: ProgressionSettings = field(default_factory=ProgressionSettings)
    placement: PlacementSettings = field(default_factory=PlacementSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as ex:
            raise ConfigError(f"Malformed YAML in {path}: {ex}") from ex
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping at top level")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        try:
            return cls(
                seed=data.get("seed"),
                floor=FloorSettings(**(data.get("floor") or {})),
                player=PlayerSettings(**(data.get("player") or {})),
                progression=ProgressionSettings(**(data.get("progression") or {})),
                placement=PlacementSettings(**(data.get("placement") or {})),
            )
        except TypeError as ex:
            # Unknown keys in a section surface as unexpected keyword arguments
            raise ConfigError(f"Invalid configuration: {ex}") from ex

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "SimulationConfig":
        """Load config from built-in defaults and optional user override file.

        If user_path is provided and exists, overlay values onto defaults.
        """
        try:
            text = resources.files("monster_sweeper.data").joinpath("default_config.yaml").read_text(encoding="utf-8")
            default_data = yaml.safe_load(text) or {}
        except FileNotFoundError:
            logger.warning("Default config not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(SimulationConfig())

        user_data: dict = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user config from %s", user_path)
            else:
                logger.warning("User config file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        config = cls.from_dict(merged)
        logger.debug("Config merged: %s", config)
        return config

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)
        logger.info("Saved config to %s", path)
