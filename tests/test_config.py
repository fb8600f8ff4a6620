import logging

import pytest
import yaml

from monster_sweeper.config import FloorSettings, PlayerSettings, SimulationConfig
from monster_sweeper.exceptions import ConfigError


def test_builtin_defaults():
    cfg = SimulationConfig.load()
    assert (cfg.floor.width, cfg.floor.height) == (16, 16)
    assert cfg.floor.max_floor is None
    assert (cfg.player.strength, cfg.player.hit_points) == (2, 3)
    assert cfg.progression.floor_reward_hp == 1
    assert cfg.placement.max_nudges == 256
    assert cfg.seed is None


def test_user_file_overlays_defaults(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("seed: abc\nfloor:\n  width: 8\n  max_floor: 4\n", encoding="utf-8")
    cfg = SimulationConfig.load(path)
    assert cfg.seed == "abc"
    assert cfg.floor.width == 8
    assert cfg.floor.height == 16
    assert cfg.floor.max_floor == 4
    assert cfg.player.hit_points == 3


def test_missing_user_file_warns(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="monster_sweeper.config"):
        cfg = SimulationConfig.load(tmp_path / "nope.yaml")
    assert cfg.floor.width == 16
    assert any("not found" in r.getMessage() for r in caplog.records)


def test_malformed_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("floor: [1, 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        SimulationConfig.load(path)


def test_unknown_key_rejected():
    with pytest.raises(ConfigError):
        SimulationConfig.from_dict({"floor": {"depth": 3}})


@pytest.mark.parametrize(
    "factory",
    [
        lambda: FloorSettings(width=0),
        lambda: FloorSettings(max_floor=-1),
        lambda: PlayerSettings(strength=0),
        lambda: PlayerSettings(hit_points=0),
    ],
)
def test_invalid_values(factory):
    with pytest.raises(ConfigError):
        factory()


def test_save_writes_loadable_yaml(tmp_path):
    cfg = SimulationConfig(seed=5, floor=FloorSettings(width=10, height=6))
    path = tmp_path / "out" / "cfg.yaml"
    cfg.save(path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data["floor"]["width"] == 10
    assert SimulationConfig.load(path) == cfg
