"""Exception types raised by grid layouts."""

from __future__ import annotations


class LayoutError(ValueError):
    """A grid layout could not be built from the given sizes or definition."""


class IndexOutOfRange(IndexError):
    """A cell, row or column index fell outside the grid.

    Attributes:
        index: The offending index, an int or a (row, col) pair
        bounds: The valid inclusive range, or a (row_range, col_range) pair
            for (row, col) lookups
    """

    def __init__(
        self,
        index: int | tuple[int, int],
        bounds: tuple[int, int] | tuple[tuple[int, int], tuple[int, int]],
    ) -> None:
        self.index = index
        self.bounds = bounds
        super().__init__(self._describe())

    def _describe(self) -> str:
        if isinstance(self.index, tuple):
            (r_lo, r_hi), (c_lo, c_hi) = self.bounds
            return (
                f"cell {self.index} out of range: rows must be in [{r_lo}, {r_hi}], "
                f"columns in [{c_lo}, {c_hi}]"
            )
        lo, hi = self.bounds
        return f"index {self.index} out of range [{lo}, {hi}]"
