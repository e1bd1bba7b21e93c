"""Conway's Game of Life rule and generation advance."""

import numpy as np

from .grid import Grid


def next_cell_state(is_alive: bool, live_neighbors: int) -> bool:
    """Compute the next state of a single cell.

    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """
    survive = is_alive and 2 <= live_neighbors <= 3
    reproduce = not is_alive and live_neighbors == 3
    return bool(survive or reproduce)


def advance(grid: Grid) -> None:
    """Advance a grid by one generation in place.

    Every next state is computed from a snapshot of the current generation,
    so no cell sees a neighbor's already-updated state.

    Raises:
        NotInitializedError: If the grid has no storage
        NoMemoryError: If the snapshot cannot be allocated
    """
    snapshot = grid.duplicate()
    try:
        neighbor_counts = snapshot.count_all_neighbors().reshape(-1)
        current = snapshot.cells

        # Vectorized form of next_cell_state

        # Birth: dead cell with exactly 3 neighbors
        birth_mask = ~current & (neighbor_counts == 3)

        # Survival: live cell with 2 or 3 neighbors
        survive_mask = current & ((neighbor_counts == 2) | (neighbor_counts == 3))

        np.logical_or(birth_mask, survive_mask, out=grid.cells)
    finally:
        snapshot.release()


class GameOfLife:
    """Game of Life simulation over a bounded grid.

    Tracks the generation number while stepping the grid forward.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    def step(self) -> None:
        """Advance the simulation by one generation."""
        advance(self.grid)
        self._generation += 1
