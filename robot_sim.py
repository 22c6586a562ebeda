import argparse
import logging
from typing import List, Optional

import robot_mover
import robot_planner
from logging_config import setup_logging
from robot_command import parse_command
from robot_errors import CommandParseError
from robot_mover import GridMover, MoveStatus
from robot_planner import GridPathPlanner

# =============================================================================
# CONFIGURATION & CONSTANTS
# =============================================================================
DEFAULT_COMMANDS = [
    "M:-10,10,-10,10;S:-5,5;[W5,E5,N4,E3,S2,W1]",   # Stays inside
    "M:0,5,0,5;S:4,4;[N2]",                          # Leaves through maxY
    "M:0,3,0,3;S:0,0;[N2,E1,S2,E1,N2]",              # Covers every tile
]

EXIT_OK = 0
EXIT_OUT_OF_BOUNDS = 1
EXIT_PARSE_ERROR = 2


def run_command(text: str, run: bool = False) -> int:
    """Parse one command, print its plan and optionally drive the mover"""
    logger = logging.getLogger("robo_grid")
    try:
        command = parse_command(text)
    except CommandParseError as e:
        logger.error(str(e))
        print(f"ERROR: {e}")
        return EXIT_PARSE_ERROR

    print(command)
    planner = GridPathPlanner(command)
    result = planner.traverse()
    for line in planner.report():
        print(line)

    if run:
        mover = GridMover()
        mover.activate(command)
        status = mover.run()
        tiles = mover.tile_map
        print(f"Robot {status.value} at {mover.robot_state.position} "
              f"after {mover.robot_state.ticks} ticks")
        print(f"Tiles cleaned: {tiles.cleaned_count}/{tiles.total} ({tiles.coverage():.0%})")
        if status == MoveStatus.ABORTED:
            return EXIT_OUT_OF_BOUNDS

    return EXIT_OK if result.in_bounds else EXIT_OUT_OF_BOUNDS


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Grid robot command checker")
    parser.add_argument(
        "commands",
        nargs="*",
        help="Command strings, e.g. 'M:-10,10,-10,10;S:-5,5;[W5,E5]'",
    )
    parser.add_argument("--run", action="store_true",
                        help="Drive the robot one tick at a time and clean tiles")
    parser.add_argument("--debug", action="store_true", help="Enable debug tracing")
    parser.add_argument("--quiet", action="store_true", help="Suppress console logging")
    parser.add_argument("--log", default=None, help="Optional log file")
    args = parser.parse_args(argv)

    if args.debug:
        robot_planner.DEBUG_ENABLED = True
        robot_mover.DEBUG_ENABLED = True
    logger = setup_logging(log_file=args.log, quiet=args.quiet, debug=args.debug)

    commands = args.commands or DEFAULT_COMMANDS
    exit_code = EXIT_OK
    for text in commands:
        print(f"\n{'='*20} COMMAND: {text} {'='*20}")
        code = run_command(text, run=args.run)
        logger.debug(f"'{text}' finished with exit code {code}")
        exit_code = max(exit_code, code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
