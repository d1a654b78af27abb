"""File selection for tag scanning."""

from .selector import FileSelector

__all__ = ["FileSelector"]
