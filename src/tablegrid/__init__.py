"""Tablegrid - grid layouts of cell center points for 2D drawing."""

from .core import IndexOutOfRange, LayoutError, O, Point
from .layout import (
    Cell,
    CellAnchor,
    GridLayout,
    GridLoader,
    from_counts,
    from_sizes,
    resolve_anchor,
    tiler,
)

__all__ = [
    "Cell",
    "CellAnchor",
    "GridLayout",
    "GridLoader",
    "IndexOutOfRange",
    "LayoutError",
    "O",
    "Point",
    "from_counts",
    "from_sizes",
    "resolve_anchor",
    "tiler",
]
