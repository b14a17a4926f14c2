"""
Snappers Solver - Entry Point

Loads a board file, runs the selected search strategy and prints the taps.

Example:
    python main.py level.json --taps 2
    python main.py level.json --strategy all --first-tap 1,5
"""

import sys
import logging
import argparse
from typing import List, Optional, Tuple

from snappers.board_io import load_level
from snappers.settings import load_settings, save_settings
from snappers.solver import (
    SolutionContext,
    create_strategy,
    describe_strategies,
    get_strategy_names,
)
from snappers.solver.strategies import AllSolutionsStrategy

logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_NOT_SOLVED = 1
EXIT_INVALID_INPUT = 2


def configure_logging(debug: bool = False) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def parse_position(text: str) -> Tuple[int, int]:
    """Parse an "X,Y" coordinate."""
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}")
    return x, y


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Snappers Solver - Find taps that clear a Snappers board",
        epilog="strategies:\n" + describe_strategies(),
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("board", help="Path to a JSON board file")
    parser.add_argument(
        "--taps", "-t",
        type=int,
        help="Maximum number of taps (default: from board file or settings)"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Search strategy (default: from settings)"
    )
    parser.add_argument(
        "--first-tap", "-f",
        type=parse_position,
        help="Require the solution to start with this tap, as X,Y"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Give up after this many seconds"
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Store the chosen strategy and tap budget in config.json"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def run(args, settings) -> int:
    """
    Solve the board described by the parsed arguments.

    Returns:
        Exit code
    """
    try:
        level = load_level(args.board)
    except ValueError as e:
        logger.error(f"Invalid board: {e}")
        return EXIT_INVALID_INPUT

    strategy_name = args.strategy or settings["strategy_name"]
    if args.taps is not None:
        max_taps = args.taps
    elif level.taps is not None:
        max_taps = level.taps
    else:
        max_taps = settings["max_taps"]
    timeout_sec = args.timeout if args.timeout is not None else settings["timeout_sec"]

    try:
        strategy = create_strategy(strategy_name)
        context = SolutionContext(
            board=level.board,
            max_taps=max_taps,
            first_tap=args.first_tap,
            timeout_sec=timeout_sec
        )
    except ValueError as e:
        logger.error(str(e))
        return EXIT_INVALID_INPUT

    if args.save_defaults:
        settings["strategy_name"] = strategy_name
        settings["max_taps"] = max_taps
        save_settings(settings)

    logger.info(f"Solving with '{strategy_name}', up to {max_taps} taps:\n{level.board}")

    try:
        if isinstance(strategy, AllSolutionsStrategy):
            solutions = strategy.solve_all(context)
            for n, solution in enumerate(solutions, start=1):
                print(f"Solution {n}:")
                for line in solution.describe():
                    print(f"  {line}")
            if not solutions.solutions:
                print("The board was NOT solved.")
            return EXIT_SOLVED if solutions.solutions else EXIT_NOT_SOLVED

        solution = strategy.solve(context)
    except ValueError as e:
        logger.error(f"Invalid tap: {e}")
        return EXIT_INVALID_INPUT

    if not solution.is_solved:
        print("The board was NOT solved.")
        return EXIT_NOT_SOLVED

    print("The board was solved. Results:")
    for line in solution.describe():
        print(f"  {line}")
    return EXIT_SOLVED


def main(argv: Optional[List[str]] = None) -> int:
    """Run the Snappers Solver command line."""
    args = parse_args(argv)

    settings = load_settings()
    configure_logging(args.debug or settings.get("debug_enabled", False))

    return run(args, settings)


if __name__ == "__main__":
    sys.exit(main())
