"""Command-line display loop for the Game of Life grid engine."""

import argparse
import os
import sys
import time
from typing import Optional

import numpy as np

from ..core.errors import GridError
from ..core.game import GameOfLife
from ..core.grid import Grid


def clear_console() -> None:
    """Clear the terminal window."""
    os.system("cls" if os.name == "nt" else "clear")


class CLIGameOfLife:
    """Command-line interface that animates a random grid in the terminal."""

    def __init__(self, seed: Optional[int] = None):
        """Initialize CLI interface.

        Args:
            seed: Random seed for the initial population (OS entropy if None)
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def run_display_loop(
        self,
        rows: int,
        cols: int,
        delay_ms: int = 100,
        alive_char: str = "X",
        dead_char: str = " ",
        generations: int = 0,
        clear_screen: bool = True,
        verbose: bool = False,
    ) -> int:
        """Render, wait and advance a randomly populated grid.

        Args:
            rows: Grid height
            cols: Grid width
            delay_ms: Pause between frames in milliseconds
            alive_char: Character for living cells
            dead_char: Character for dead cells
            generations: Number of generations to advance (0 runs until interrupted)
            clear_screen: Clear the console between frames
            verbose: Print a status line under each frame

        Returns:
            Number of generations advanced

        Raises:
            GridError: If the engine reports a failure
        """
        grid = Grid(rows, cols)
        game = GameOfLife(grid)

        try:
            if verbose:
                print(f"Initializing {rows}x{cols} grid (seed: {self.seed})")
            grid.randomize(self.rng)

            while True:
                print(grid.render(alive_char, dead_char))
                if verbose:
                    print(f"Generation {game.generation}, population {game.population}")

                if generations and game.generation >= generations:
                    break

                time.sleep(delay_ms / 1000)
                game.step()

                if clear_screen:
                    clear_console()
        finally:
            grid.release()

        return game.generation


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Animate Conway's Game of Life on a bounded grid in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the default 30x120 random grid until interrupted
  lifegrid-cli

  # Small grid, custom characters, reproducible start
  lifegrid-cli -r 20 -c 40 --alive "#" --dead "." --seed 42

  # Run 50 generations without clearing the console
  lifegrid-cli -n 50 --no-clear --verbose
        """,
    )

    parser.add_argument("-r", "--rows", type=int, default=30, help="Grid height (default: 30)")

    parser.add_argument("-c", "--cols", type=int, default=120, help="Grid width (default: 120)")

    parser.add_argument(
        "-d",
        "--delay",
        type=int,
        default=100,
        help="Delay between generations in milliseconds (default: 100)",
    )

    parser.add_argument("--alive", type=str, default="X", help="Character for living cells (default: X)")

    parser.add_argument("--dead", type=str, default=" ", help="Character for dead cells (default: space)")

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=0,
        help="Number of generations to run, 0 runs until interrupted (default: 0)",
    )

    parser.add_argument("--seed", type=int, help="Random seed for a reproducible initial grid")

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the console between generations",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print generation and population under each frame",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.rows <= 0:
        errors.append("Rows must be positive")

    if args.cols <= 0:
        errors.append("Cols must be positive")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if len(args.alive) != 1:
        errors.append("Alive character must be exactly one character")

    if len(args.dead) != 1:
        errors.append("Dead character must be exactly one character")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    cli = CLIGameOfLife(seed=args.seed)

    try:
        cli.run_display_loop(
            rows=args.rows,
            cols=args.cols,
            delay_ms=args.delay,
            alive_char=args.alive,
            dead_char=args.dead,
            generations=args.generations,
            clear_screen=not args.no_clear,
            verbose=args.verbose,
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 0
    except GridError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
