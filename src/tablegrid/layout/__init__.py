"""Grid layout system for placing drawing content in cells."""

from .anchors import CellAnchor, resolve_anchor
from .builders import from_counts, from_sizes, tiler
from .grid import Cell, GridLayout
from .loader import GridLoader

__all__ = [
    "Cell",
    "CellAnchor",
    "GridLayout",
    "GridLoader",
    "from_counts",
    "from_sizes",
    "resolve_anchor",
    "tiler",
]
