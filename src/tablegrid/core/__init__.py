"""Core value and error types."""

from .errors import IndexOutOfRange, LayoutError
from .point import O, Point

__all__ = ["Point", "O", "IndexOutOfRange", "LayoutError"]
