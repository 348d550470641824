"""Convenience constructors for common grid shapes.

All of these normalize their arguments to explicit row heights and column
widths and hand them to GridLayout.

Examples:
    from_counts(4, 3)                       # 4 rows, 3 columns of 100x100 cells
    from_counts(4, 3, 80, 30)               # cells 80 wide, 30 high
    from_counts(4, 3, (80, 30))             # same, size as a (width, height) pair
    from_sizes([60, 40, 100], 50)           # 3 rows, 1 column 50 wide
    from_sizes(50, [60, 60, 60])            # 1 row 50 high, 3 columns
    from_sizes(range(15, 60, 5), [*range(5, 17, 2), *range(15, 3, -2)])
    tiler(1200, 1200, 8, 8, margin=20)      # 8x8 tiles filling a page
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable, Sequence

from ..core.errors import LayoutError
from ..core.point import O, Point
from .grid import GridLayout

DEFAULT_CELL_SIZE = 100.0


def _broadcast(value: float | Iterable[float]) -> Iterable[float]:
    """Wrap a scalar size in a one-element list; pass sequences through."""
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return [value]
    return value


def _size(value: Any, label: str) -> float:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise LayoutError(f"{label} must be a number, got {value!r}")
    return value


def _count(value: Any, label: str) -> int:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool) or value < 1:
        raise LayoutError(f"{label} must be a positive integer, got {value!r}")
    return int(value)


def from_counts(
    nrows: int,
    ncols: int,
    cell_width: float | Sequence[float] = DEFAULT_CELL_SIZE,
    cell_height: float | None = None,
    center: Point | tuple[float, float] = O,
) -> GridLayout:
    """Build a grid of identical cells.

    Args:
        nrows: Number of rows
        ncols: Number of columns
        cell_width: Width of every cell, or a (width, height) pair
        cell_height: Height of every cell. Defaults to 100 unless
            cell_width is a pair.
        center: Point the grid is centered on

    Returns:
        GridLayout with nrows x ncols cells
    """
    nrows = _count(nrows, "nrows")
    ncols = _count(ncols, "ncols")

    if isinstance(cell_width, Iterable) and not isinstance(cell_width, (str, bytes)):
        if cell_height is not None:
            raise LayoutError("pass either a (width, height) pair or cell_height, not both")
        pair = list(cell_width)
        if len(pair) != 2:
            raise LayoutError(f"cell size pair must be (width, height), got {cell_width!r}")
        cell_width, cell_height = pair
    elif cell_height is None:
        cell_height = DEFAULT_CELL_SIZE

    cell_width = _size(cell_width, "cell width")
    cell_height = _size(cell_height, "cell height")

    return GridLayout([cell_height] * nrows, [cell_width] * ncols, center)


def from_sizes(
    row_heights: float | Iterable[float],
    col_widths: float | Iterable[float],
    center: Point | tuple[float, float] = O,
) -> GridLayout:
    """Build a grid from row heights and column widths.

    Either argument may be a single number (one row or one column), a list,
    a nested list (flattened), a range, or any other iterable.
    """
    return GridLayout(_broadcast(row_heights), _broadcast(col_widths), center)


def tiler(
    area_width: float,
    area_height: float,
    nrows: int,
    ncols: int,
    margin: float = 0.0,
    center: Point | tuple[float, float] = O,
) -> GridLayout:
    """Divide a rectangular area into equal tiles.

    The area is centered on `center` and shrunk by `margin` on every side
    before being split.

    Raises:
        LayoutError: If the margins leave no room for tiles
    """
    nrows = _count(nrows, "nrows")
    ncols = _count(ncols, "ncols")
    area_width = _size(area_width, "area width")
    area_height = _size(area_height, "area height")
    margin = _size(margin, "margin")
    if margin < 0:
        raise LayoutError(f"margin must not be negative, got {margin!r}")

    inner_width = area_width - 2 * margin
    inner_height = area_height - 2 * margin
    if inner_width <= 0 or inner_height <= 0:
        raise LayoutError(
            f"margin {margin:g} leaves no room in a {area_width:g}x{area_height:g} area"
        )

    return from_counts(nrows, ncols, inner_width / ncols, inner_height / nrows, center)
