#!/usr/bin/env python3
"""
orthopaths - Main Entry Point
Interior-disjoint shortest paths on a random obstacle grid
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

# Add the package directory to Python path
package_dir = Path(__file__).parent
if str(package_dir) not in sys.path:
    sys.path.insert(0, str(package_dir))

from orthopaths.application.services.routing_session import RoutingSession, SelectionOutcome
from orthopaths.domain.models.grid import GridPoint
from orthopaths.infrastructure.persistence.event_bus import EventBus
from orthopaths.presentation.console_reporter import ConsoleReporter
from orthopaths.presentation.grid_view import render_text
from orthopaths.shared.configuration import ConfigManager, initialize_config
from orthopaths.shared.exceptions import OrthoPathsException, ValidationError
from orthopaths.shared.utils.logging_utils import setup_logging, init_logging
from orthopaths.shared.utils.validation_utils import (
    parse_grid_point, parse_seed, validate_grid_point, validate_path_count
)

INTERACTIVE_HELP = """Commands:
  x y      select a cell (first start, then end; the end triggers routing)
  c        clear endpoints and paths, keep walls
  r [seed] regenerate walls
  p        print the grid
  h        show this help
  q        quit"""


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="orthopaths",
        description="Find several shortest paths between two cells that share no interior cell."
    )
    parser.add_argument("--config", help="Path to JSON configuration file")
    parser.add_argument("--log-level", help="Override log level (DEBUG, INFO, ...)")

    grid_options = argparse.ArgumentParser(add_help=False)
    grid_options.add_argument("--width", type=int, help="Grid width in cells")
    grid_options.add_argument("--height", type=int, help="Grid height in cells")
    grid_options.add_argument("--paths", type=int, help="Number of disjoint paths to find")
    grid_options.add_argument("--seed", type=int, help="Seed for the wall layout")
    grid_options.add_argument("--wall-probability", type=float,
                              help="Chance that a cell is a wall (0..1)")

    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", parents=[grid_options],
                                       help="Route once and print the result")
    run_parser.add_argument("--start", help="Start cell as x,y (default: first open cell)")
    run_parser.add_argument("--end", help="End cell as x,y (default: last open cell)")

    subparsers.add_parser("interactive", parents=[grid_options],
                          help="Select cells and reset from a text prompt")
    return parser


def setup_environment(config_path: Optional[str] = None,
                      log_level: Optional[str] = None) -> ConfigManager:
    """Setup the application environment."""
    init_logging()

    config = initialize_config(config_path)
    if log_level:
        config.update_logging_settings(level=log_level)
    config.require_valid()

    setup_logging(config.get_settings().logging)
    logging.debug(f"Configuration: {config.get_config_info()}")
    return config


def apply_overrides(config: ConfigManager, args: argparse.Namespace):
    """Copy command line grid options over configured values."""
    config.update_grid_settings(
        width=getattr(args, "width", None),
        height=getattr(args, "height", None),
        seed=getattr(args, "seed", None),
        wall_probability=getattr(args, "wall_probability", None),
    )
    config.update_routing_settings(path_count=getattr(args, "paths", None))
    validate_path_count(config.get_settings().routing.path_count)
    config.require_valid()


def create_session(config: ConfigManager, stream: TextIO) -> RoutingSession:
    """Create a session whose events are printed to stream."""
    event_bus = EventBus()
    ConsoleReporter(stream).attach(event_bus)
    return RoutingSession(settings=config.get_settings(), event_publisher=event_bus)


def default_endpoints(session: RoutingSession) -> Tuple[GridPoint, GridPoint]:
    """First and last non-wall cells in row-major order."""
    open_cells = [point for point in session.grid.iter_points() if not session.grid.is_wall(point)]
    if len(open_cells) < 2:
        raise ValidationError("Grid has fewer than two open cells", field="grid")
    return open_cells[0], open_cells[-1]


def _resolve_point(text: Optional[str], fallback: GridPoint, session: RoutingSession) -> GridPoint:
    if text is None:
        return fallback
    x, y = parse_grid_point(text)
    validate_grid_point(x, y, session.grid.width, session.grid.height)
    return GridPoint(x, y)


def run_cli(args: argparse.Namespace, stream: Optional[TextIO] = None) -> int:
    """Route once between two cells and print the outcome."""
    stream = stream or sys.stdout
    config = setup_environment(args.config, args.log_level)
    apply_overrides(config, args)

    session = create_session(config, stream)
    default_start, default_end = default_endpoints(session)
    start = _resolve_point(args.start, default_start, session)
    end = _resolve_point(args.end, default_end, session)

    for point, role, expected in ((start, "start", SelectionOutcome.START_SET),
                                  (end, "end", SelectionOutcome.END_SET)):
        outcome = session.select_cell(point)
        if outcome != expected:
            raise ValidationError(f"Cannot use {point} as {role}: {outcome.value}",
                                  field=role, value=point)

    print(render_text(session.grid), file=stream)
    logging.info(f"Found {session.result.found_count} of {session.path_count} paths")
    return 0


def run_interactive(args: argparse.Namespace, input_stream: Optional[TextIO] = None,
                    stream: Optional[TextIO] = None) -> int:
    """Text version of the click/reset loop."""
    input_stream = input_stream or sys.stdin
    stream = stream or sys.stdout
    config = setup_environment(args.config, args.log_level)
    apply_overrides(config, args)

    session = create_session(config, stream)
    print(INTERACTIVE_HELP, file=stream)
    print(render_text(session.grid), file=stream)

    for raw_line in input_stream:
        line = raw_line.strip()
        if not line:
            continue

        command, *rest = line.split()
        command = command.lower()

        if command == "q":
            break
        elif command == "h":
            print(INTERACTIVE_HELP, file=stream)
        elif command == "p":
            print(render_text(session.grid), file=stream)
        elif command == "c":
            session.clear()
        elif command == "r":
            try:
                seed = parse_seed(rest[0]) if rest else None
            except ValidationError as e:
                print(f"Invalid seed: {e}", file=stream)
                continue
            session.regenerate(seed)
            print(render_text(session.grid), file=stream)
        else:
            try:
                x, y = parse_grid_point(line)
            except ValidationError:
                print(f"Unknown command: {line}", file=stream)
                continue
            outcome = session.select_cell(GridPoint(x, y))
            if outcome == SelectionOutcome.END_SET:
                print(render_text(session.grid), file=stream)
            elif outcome in (SelectionOutcome.IGNORED_WALL,
                             SelectionOutcome.IGNORED_OUT_OF_BOUNDS,
                             SelectionOutcome.IGNORED_SAME_AS_START):
                logging.debug(f"Ignored selection ({x}, {y}): {outcome.value}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        args = parser.parse_args([*(argv if argv is not None else sys.argv[1:]), "run"])

    try:
        if args.command == "interactive":
            return run_interactive(args)
        return run_cli(args)
    except OrthoPathsException as e:
        logging.error(f"orthopaths failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
