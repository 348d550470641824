"""GridLayout class mapping cell indices to cell center points."""

from __future__ import annotations

import logging
import numbers
from typing import Any, Iterable, Iterator, NamedTuple

import numpy as np
from numpy.typing import NDArray

from ..core.errors import IndexOutOfRange, LayoutError
from ..core.point import O, Point
from .anchors import CellAnchor, resolve_anchor

logger = logging.getLogger(__name__)


class Cell(NamedTuple):
    """One cell produced by GridLayout.cells()."""

    point: Point
    index: int
    row: int
    col: int
    width: float
    height: float


def _is_index(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_full_slice(value: Any) -> bool:
    return isinstance(value, slice) and value == slice(None)


def _flatten(values: Any, label: str) -> Iterator[Any]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise LayoutError(f"{label} must be a sequence of numbers, got {values!r}")
    for value in values:
        if isinstance(value, (str, bytes)):
            raise LayoutError(f"{label} must be numbers, got {value!r}")
        if isinstance(value, Iterable):
            yield from _flatten(value, label)
        else:
            yield value


def as_sizes(values: Iterable[Any], label: str = "sizes") -> NDArray[np.float64]:
    """Materialize a (possibly nested or lazy) sequence of sizes.

    Args:
        values: Sequence, range, generator or array of positive numbers
        label: Name used in error messages

    Returns:
        Read-only 1D float array

    Raises:
        LayoutError: If the sequence is empty or holds non-positive,
            non-finite or non-numeric values
    """
    try:
        sizes = np.array(list(_flatten(values, label)), dtype=np.float64)
    except LayoutError:
        raise
    except (TypeError, ValueError) as e:
        raise LayoutError(f"{label} must be numbers: {e}") from e

    if sizes.size == 0:
        raise LayoutError(f"{label} must not be empty")
    if not np.all(np.isfinite(sizes)) or np.any(sizes <= 0):
        raise LayoutError(f"{label} must be finite and positive, got {sizes.tolist()}")

    sizes.setflags(write=False)
    return sizes


class GridLayout:
    """A grid of cells with per-row heights and per-column widths.

    The grid is centered on `center`. Cells are numbered from 1, left to
    right then top to bottom; rows and columns are also numbered from 1.
    Row 1 sits on the negative-y side of the center, so with a top-down
    drawing backend it is the top row.

    Iterating yields (point, index) pairs for every cell:

        for pt, n in GridLayout([60, 40, 100], [100, 60, 40]):
            ...

    Random access uses the same numbering:

        layout[5]        # center of cell 5
        layout[2, 3]     # row 2, column 3
        layout[[1, 4]]   # list of centers, in the order given
        layout[2, :]     # every cell in row 2, left to right
        layout[:, 3]     # every cell in column 3, top to bottom

    A layout never changes after construction.
    """

    def __init__(
        self,
        row_heights: Iterable[float],
        col_widths: Iterable[float],
        center: Point | tuple[float, float] = O,
    ) -> None:
        self.row_heights = as_sizes(row_heights, "row heights")
        self.col_widths = as_sizes(col_widths, "column widths")
        self.center = Point.coerce(center)

        self.nrows = len(self.row_heights)
        self.ncols = len(self.col_widths)
        self.left_margin = -float(self.col_widths.sum()) / 2
        self.top_margin = -float(self.row_heights.sum()) / 2

        # Distance from the leading edge of the grid to each column/row center
        self._x_offsets = np.cumsum(self.col_widths) - self.col_widths / 2
        self._y_offsets = np.cumsum(self.row_heights) - self.row_heights / 2

        logger.debug(
            "Built %dx%d grid (%.6g x %.6g) centered on (%g, %g)",
            self.nrows, self.ncols, self.width, self.height, self.center.x, self.center.y,
        )

    def __repr__(self) -> str:
        return (
            f"GridLayout(row_heights={self.row_heights.tolist()}, "
            f"col_widths={self.col_widths.tolist()}, center=({self.center.x:g}, {self.center.y:g}))"
        )

    @property
    def shape(self) -> tuple[int, int]:
        """Number of rows and columns."""
        return (self.nrows, self.ncols)

    @property
    def width(self) -> float:
        """Total width of all columns."""
        return -2 * self.left_margin

    @property
    def height(self) -> float:
        """Total height of all rows."""
        return -2 * self.top_margin

    def __len__(self) -> int:
        return self.nrows * self.ncols

    def _cell_center(self, row: int, col: int) -> Point:
        # Callers check bounds; row and col are 1-based
        x = self.center.x + self.left_margin + self._x_offsets[col - 1]
        y = self.center.y + self.top_margin + self._y_offsets[row - 1]
        return Point(x, y)

    def _check_index(self, index: int) -> None:
        if not _is_index(index):
            raise TypeError(f"cell indices must be integers, got {index!r}")
        if not 1 <= index <= len(self):
            raise IndexOutOfRange(index, (1, len(self)))

    def _check_cell(self, row: int, col: int) -> None:
        if not (_is_index(row) and _is_index(col)):
            raise TypeError(f"row and column must be integers, got {(row, col)!r}")
        if not (1 <= row <= self.nrows and 1 <= col <= self.ncols):
            raise IndexOutOfRange((row, col), ((1, self.nrows), (1, self.ncols)))

    def position(self, index: int) -> tuple[int, int]:
        """Return the (row, col) of a linear cell index.

        Raises:
            IndexOutOfRange: If index is outside [1, nrows * ncols]
        """
        self._check_index(index)
        row, col = divmod(index - 1, self.ncols)
        return (row + 1, col + 1)

    def index_of(self, row: int, col: int) -> int:
        """Return the linear cell index of (row, col)."""
        self._check_cell(row, col)
        return (row - 1) * self.ncols + col

    def cell_size(self, *key: int) -> tuple[float, float]:
        """Return the (width, height) of a cell given by index or by (row, col)."""
        if len(key) == 1:
            row, col = self.position(key[0])
        elif len(key) == 2:
            row, col = key
            self._check_cell(row, col)
        else:
            raise TypeError(f"cell_size() takes an index or a (row, col) pair, got {key!r}")
        return (float(self.col_widths[col - 1]), float(self.row_heights[row - 1]))

    def anchor(self, index: int, anchor: CellAnchor | str = CellAnchor.CENTER) -> Point:
        """Return the point of a named anchor (corner, edge center) of a cell."""
        return self[index] + resolve_anchor(anchor, self.cell_size(index))

    def cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order with its position and size."""
        index = 1
        for row in range(1, self.nrows + 1):
            height = float(self.row_heights[row - 1])
            for col in range(1, self.ncols + 1):
                yield Cell(
                    point=self._cell_center(row, col),
                    index=index,
                    row=row,
                    col=col,
                    width=float(self.col_widths[col - 1]),
                    height=height,
                )
                index += 1

    def __iter__(self) -> Iterator[tuple[Point, int]]:
        for cell in self.cells():
            yield cell.point, cell.index

    def __getitem__(self, key: Any) -> Point | list[Point]:
        if isinstance(key, tuple):
            return self._getitem_pair(key)

        if _is_index(key):
            row, col = self.position(key)
            return self._cell_center(row, col)

        if isinstance(key, Iterable) and not isinstance(key, (str, bytes)):
            points = []
            for index in key:
                if not _is_index(index):
                    raise TypeError(f"cell indices must be integers, got {index!r}")
                points.append(self[index])
            return points

        raise TypeError(f"invalid cell key: {key!r}")

    def _getitem_pair(self, key: tuple) -> Point | list[Point]:
        if len(key) != 2:
            raise TypeError(f"expected a (row, col) pair, got {key!r}")
        row, col = key

        if _is_index(row) and _is_index(col):
            self._check_cell(row, col)
            return self._cell_center(row, col)

        # Full row: layout[r, :]
        if _is_index(row) and _is_full_slice(col):
            if not 1 <= row <= self.nrows:
                raise IndexOutOfRange(row, (1, self.nrows))
            return [self._cell_center(row, c) for c in range(1, self.ncols + 1)]

        # Full column: layout[:, c]
        if _is_full_slice(row) and _is_index(col):
            if not 1 <= col <= self.ncols:
                raise IndexOutOfRange(col, (1, self.ncols))
            return [self._cell_center(r, col) for r in range(1, self.nrows + 1)]

        raise TypeError(f"unsupported cell key: {key!r} (use ints or ':' for a whole row or column)")
