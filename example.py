#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

import numpy as np

from lifegrid import Grid, GameOfLife


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    with Grid(5, 5) as grid:
        game = GameOfLife(grid)

        # Horizontal blinker in the middle row
        for x in (1, 2, 3):
            grid.set_cell(x, 2, True)

        print("Initial state:")
        print(grid.render("#", "."))
        print()

        for _ in range(2):
            game.step()
            print(f"Generation {game.generation}:")
            print(grid.render("#", "."))
            print()

        # Reproducible random start
        grid.initialize(10, 30)
        grid.randomize(np.random.default_rng(42))
        print("Random 10x30 grid:")
        print(grid.render("X", " "))
        print(f"Population: {game.population}")


if __name__ == "__main__":
    main()
