"""Errors raised by the grid engine."""


class GridError(Exception):
    """Base class for grid engine failures.

    Attributes:
        code: Integer status for the failure kind (0 is reserved for success)
    """

    code = 0


class NotInitializedError(GridError):
    """An operation needed cell storage but the grid has none."""

    code = 1


class NoMemoryError(GridError, MemoryError):
    """Cell storage or an output buffer could not be allocated."""

    code = 2
