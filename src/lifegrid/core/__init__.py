"""Core grid engine logic."""

from .errors import GridError, NotInitializedError, NoMemoryError
from .grid import Grid
from .game import GameOfLife, advance, next_cell_state

__all__ = [
    "Grid",
    "GameOfLife",
    "advance",
    "next_cell_state",
    "GridError",
    "NotInitializedError",
    "NoMemoryError",
]
