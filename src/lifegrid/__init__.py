"""Bounded Conway's Game of Life grid engine with a text display driver."""

__version__ = "0.1.0"

from .core.errors import GridError, NotInitializedError, NoMemoryError
from .core.grid import Grid
from .core.game import GameOfLife, advance, next_cell_state

__all__ = [
    "Grid",
    "GameOfLife",
    "advance",
    "next_cell_state",
    "GridError",
    "NotInitializedError",
    "NoMemoryError",
]
