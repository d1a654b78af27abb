"""Services coordinating selection, extraction and filtering."""

from .scanning import TagScanner, find_missing_required

__all__ = ["TagScanner", "find_missing_required"]
