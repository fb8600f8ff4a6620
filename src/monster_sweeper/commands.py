"""Text commands for driving a :class:`DungeonSimulation` without a UI.

``parse_command`` turns a raw line into a command object; ``execute`` runs it and
returns a JSON-safe record of what happened.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Union

from .dungeon.grid import Coordinate
from .exceptions import CommandParseError
from .game.simulation import DungeonSimulation

logger = logging.getLogger(__name__)

_MOVE_RE = re.compile(r"^(\d+) (\d+)$")

HELP_LINES = (
    'Enter "exit" to exit program',
    'Input "x y" of your destination (For example, "12 2" means go to (12, 2))',
    "Input 'a' to combat enemy",
    "Input 'help' to see this message",
)


@dataclass(frozen=True)
class MoveCommand:
    x: int
    y: int

    @property
    def target(self) -> Coordinate:
        return Coordinate(self.x, self.y)


@dataclass(frozen=True)
class AttackCommand:
    pass


@dataclass(frozen=True)
class QuitCommand:
    pass


@dataclass(frozen=True)
class HelpCommand:
    pass


Command = Union[MoveCommand, AttackCommand, QuitCommand, HelpCommand]


def parse_command(text: str) -> Command:
    line = text.strip()
    if line == "a":
        return AttackCommand()
    if line in ("exit", "quit"):
        return QuitCommand()
    if line == "help":
        return HelpCommand()
    match = _MOVE_RE.match(line)
    if match:
        return MoveCommand(int(match.group(1)), int(match.group(2)))
    raise CommandParseError(f"Unrecognised command: {text!r}")


def execute(simulation: DungeonSimulation, command: Command) -> Dict[str, Any]:
    """Run a parsed command against the simulation and describe the result."""
    if isinstance(command, MoveCommand):
        result = simulation.process_move(command.target)
        record: Dict[str, Any] = {"command": "move"}
        record.update(result.to_dict())
    elif isinstance(command, AttackCommand):
        attack = simulation.process_attack()
        record = {"command": "attack"}
        record.update(attack.to_dict())
    elif isinstance(command, QuitCommand):
        simulation.quit()
        record = {"command": "quit"}
    elif isinstance(command, HelpCommand):
        record = {"command": "help", "lines": list(HELP_LINES)}
    else:
        raise TypeError(f"Unsupported command type: {type(command).__name__}")

    record["floor"] = simulation.floor_index
    record["status"] = simulation.status.value
    logger.debug("Executed %s -> %s", command, record)
    return record
