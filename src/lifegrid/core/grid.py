"""Grid data structure for the bounded Game of Life engine."""

from typing import Iterable, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .errors import NoMemoryError, NotInitializedError

# Relative (dx, dy) positions of the Moore neighborhood
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

DEFAULT_ALIVE_CHAR = "X"
DEFAULT_DEAD_CHAR = "O"

_NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


class Grid:
    """Represents a fixed-size 2D grid of boolean cells.

    Cells are stored in a flat, row-major numpy array, so the cell at
    column ``x`` and row ``y`` lives at index ``y * cols + x``. A grid is
    either initialized (storage allocated for exactly ``rows * cols`` cells)
    or uninitialized (no storage at all). Edges are bounded: positions
    outside the grid are never read or wrapped.
    """

    def __init__(self, rows: Optional[int] = None, cols: Optional[int] = None) -> None:
        """Create a grid.

        Args:
            rows: Number of rows; together with ``cols`` allocates storage
            cols: Number of columns

        Raises:
            ValueError: If only one dimension is given, or a dimension is negative
            NoMemoryError: If cell storage cannot be allocated
        """
        self.rows = 0
        self.cols = 0
        self._cells: Optional[np.ndarray] = None

        if rows is None and cols is None:
            return
        if rows is None or cols is None:
            raise ValueError("Both rows and cols are required to initialize a grid")

        self.initialize(rows, cols)

    def initialize(self, rows: int, cols: int) -> None:
        """Allocate zeroed storage for a ``rows`` x ``cols`` grid.

        Any storage the grid already holds is dropped. On failure the grid
        is left exactly as it was.

        Raises:
            ValueError: If a dimension is negative
            NoMemoryError: If cell storage cannot be allocated
        """
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")

        # Sizes past the index range can never be allocated
        if rows * cols > np.iinfo(np.intp).max:
            raise NoMemoryError(f"Cannot allocate {rows}x{cols} grid")

        try:
            cells = np.zeros(rows * cols, dtype=np.bool_)
        except MemoryError as e:
            raise NoMemoryError(f"Cannot allocate {rows}x{cols} grid") from e

        self.release()
        self.rows = rows
        self.cols = cols
        self._cells = cells

    def release(self) -> None:
        """Drop cell storage and reset the grid to the uninitialized state.

        Safe to call any number of times.
        """
        self._cells = None
        self.rows = 0
        self.cols = 0

    def __enter__(self) -> "Grid":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.release()

    @property
    def is_initialized(self) -> bool:
        """Whether the grid currently owns cell storage."""
        return self._cells is not None

    @property
    def cells(self) -> np.ndarray:
        """Get the flat, row-major cell array.

        Raises:
            NotInitializedError: If the grid has no storage
        """
        return self._require_cells()

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._require_cells()))

    def _require_cells(self) -> np.ndarray:
        if self._cells is None:
            raise NotInitializedError("Grid has no cell storage")
        return self._cells

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")
        return y * self.cols + x

    def duplicate(self) -> "Grid":
        """Create an independent deep copy of this grid.

        Duplicating an uninitialized grid yields another uninitialized grid
        carrying the same dimensions.

        Returns:
            New grid owning its own copy of the cells

        Raises:
            NoMemoryError: If the copy's storage cannot be allocated
        """
        copy = Grid()
        copy.rows = self.rows
        copy.cols = self.cols

        if self._cells is not None:
            try:
                copy._cells = self._cells.copy()
            except MemoryError as e:
                raise NoMemoryError(f"Cannot allocate copy of {self.rows}x{self.cols} grid") from e

        return copy

    def randomize(self, rng: Optional[np.random.Generator] = None, probability: float = 0.5) -> None:
        """Randomly populate every cell.

        Args:
            rng: Source of randomness; a freshly seeded generator if omitted
            probability: Chance each cell will be alive (0.0 to 1.0)

        Raises:
            NotInitializedError: If the grid has no storage
            ValueError: If probability is outside [0, 1]
        """
        cells = self._require_cells()
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

        if rng is None:
            rng = np.random.default_rng()

        cells[:] = rng.random(cells.size) < probability

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            NotInitializedError: If the grid has no storage
            IndexError: If coordinates are out of bounds
        """
        cells = self._require_cells()
        return bool(cells[self._index(x, y)])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            NotInitializedError: If the grid has no storage
            IndexError: If coordinates are out of bounds
        """
        cells = self._require_cells()
        cells[self._index(x, y)] = bool(alive)

    def load(self, cells: Iterable) -> None:
        """Overwrite every cell from a row-major sequence of states.

        Args:
            cells: ``rows * cols`` truthy/falsy values (nested rows are flattened)

        Raises:
            NotInitializedError: If the grid has no storage
            ValueError: If the number of values doesn't match the grid
        """
        target = self._require_cells()
        data = np.asarray(list(cells), dtype=np.bool_).reshape(-1)
        if data.size != target.size:
            raise ValueError(f"Expected {target.size} cells for a {self.rows}x{self.cols} grid, got {data.size}")

        target[:] = data

    def count_live_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Neighbor positions that fall outside the grid are skipped.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)

        Raises:
            NotInitializedError: If the grid has no storage
        """
        cells = self._require_cells()

        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.cols and 0 <= ny < self.rows:
                count += int(cells[ny * self.cols + nx])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Returns:
            Array of shape (rows, cols) with the live neighbor count of each cell

        Raises:
            NotInitializedError: If the grid has no storage
        """
        cells = self._require_cells()
        if cells.size == 0:
            return np.zeros((self.rows, self.cols), dtype=np.int8)

        board = torch.from_numpy(cells.reshape(self.rows, self.cols).astype(np.float32))

        # Zero padding keeps the edges bounded
        neighbors = F.conv2d(board.unsqueeze(0).unsqueeze(0), _NEIGHBOR_KERNEL, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8)

    def render(self, alive_char: str = DEFAULT_ALIVE_CHAR, dead_char: str = DEFAULT_DEAD_CHAR) -> str:
        """Render the grid as text.

        Produces ``rows`` lines of ``cols`` characters separated by ``\\n``,
        with no leading or trailing line break.

        Args:
            alive_char: Character used for living cells
            dead_char: Character used for dead cells

        Raises:
            NotInitializedError: If the grid has no storage
            ValueError: If either display character is not a single character
            NoMemoryError: If the output text cannot be allocated
        """
        cells = self._require_cells()
        for name, char in (("alive_char", alive_char), ("dead_char", dead_char)):
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"{name} must be a single character, got {char!r}")

        try:
            chars = np.where(cells.reshape(self.rows, self.cols), alive_char, dead_char)
            return "\n".join("".join(row) for row in chars)
        except MemoryError as e:
            raise NoMemoryError(f"Cannot allocate text for {self.rows}x{self.cols} grid") from e

    def __eq__(self, other: object) -> bool:
        """Check if two grids have the same shape and cells."""
        if not isinstance(other, Grid):
            return False
        if self.shape != other.shape or self.is_initialized != other.is_initialized:
            return False
        if self._cells is None:
            return True
        return bool(np.array_equal(self._cells, other._cells))

    def __str__(self) -> str:
        """String representation using the default display characters."""
        if self._cells is None:
            return f"<uninitialized Grid {self.rows}x{self.cols}>"
        return self.render()
