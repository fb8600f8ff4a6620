import pytest

from monster_sweeper.commands import (
    AttackCommand,
    HelpCommand,
    MoveCommand,
    QuitCommand,
    execute,
    parse_command,
)
from monster_sweeper.config import SimulationConfig
from monster_sweeper.dungeon.grid import Coordinate
from monster_sweeper.exceptions import CommandParseError
from monster_sweeper.game.simulation import DungeonSimulation


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12 2", MoveCommand(12, 2)),
        ("0 0\n", MoveCommand(0, 0)),
        ("a", AttackCommand()),
        ("exit", QuitCommand()),
        ("quit", QuitCommand()),
        ("help", HelpCommand()),
    ],
)
def test_parse_valid(text, expected):
    assert parse_command(text) == expected


@pytest.mark.parametrize("text", ["", "-1 2", "1  2", "1,2", "attack", "3"])
def test_parse_invalid(text):
    with pytest.raises(CommandParseError):
        parse_command(text)


def test_move_command_target():
    assert MoveCommand(3, 9).target == Coordinate(3, 9)


def test_execute_records():
    sim = DungeonSimulation(SimulationConfig(seed=1))
    record = execute(sim, MoveCommand(20, 20))
    assert record["command"] == "move"
    assert record["outcome"] == "out_of_bounds"
    assert record["status"] == "running"

    record = execute(sim, HelpCommand())
    assert record["lines"]

    record = execute(sim, QuitCommand())
    assert record["status"] == "quit"
