"""Frontend interfaces for the grid engine."""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
