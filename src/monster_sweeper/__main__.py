from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import IO, Iterable, List, Optional

from . import __version__
from .commands import execute, parse_command
from .config import SimulationConfig
from .exceptions import CommandParseError, ConfigError
from .game.simulation import DungeonSimulation
from .logging_config import configure_logging, level_for_verbosity

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monster-sweeper",
        description="Monster Sweeper - headless command runner. Reads one command per line "
        "and prints one JSON record per command.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, default=None, help="YAML file merged over the built-in defaults")
    parser.add_argument("--seed", default=None, help="Integer or string seed for a reproducible run")
    parser.add_argument("--width", type=int, default=None, help="Floor width override")
    parser.add_argument("--height", type=int, default=None, help="Floor height override")
    parser.add_argument("--max-floor", type=int, default=None, help="Index of the final floor")
    parser.add_argument("--script", type=Path, default=None, help="Command file (defaults to stdin)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser


def build_config(args: argparse.Namespace) -> SimulationConfig:
    config = SimulationConfig.load(args.config)
    overrides = config.to_dict()
    if args.seed is not None:
        try:
            overrides["seed"] = int(args.seed)
        except ValueError:
            overrides["seed"] = args.seed
    if args.width is not None:
        overrides["floor"]["width"] = args.width
    if args.height is not None:
        overrides["floor"]["height"] = args.height
    if args.max_floor is not None:
        overrides["floor"]["max_floor"] = args.max_floor
    return SimulationConfig.from_dict(overrides)


def run(simulation: DungeonSimulation, lines: Iterable[str], out: IO[str]) -> int:
    """Feed lines to the simulation until input ends or the run reaches a terminal state."""
    for raw in lines:
        if not raw.strip():
            continue
        try:
            command = parse_command(raw)
        except CommandParseError as ex:
            out.write(json.dumps({"error": str(ex)}) + "\n")
            continue
        out.write(json.dumps(execute(simulation, command), sort_keys=True) + "\n")
        if simulation.is_over:
            break

    summary = simulation.current_view().to_dict()
    summary["stats"] = simulation.stats.to_dict()
    out.write(json.dumps({"summary": summary}, sort_keys=True) + "\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level_for_verbosity(args.verbose))

    try:
        config = build_config(args)
    except ConfigError as ex:
        logger.error("Invalid configuration: %s", ex)
        return 2

    simulation = DungeonSimulation(config)
    if args.script is None:
        return run(simulation, sys.stdin, sys.stdout)
    try:
        f = args.script.open("r", encoding="utf-8")
    except OSError as ex:
        logger.error("Cannot read command script %s: %s", args.script, ex)
        return 2
    with f:
        return run(simulation, f, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
