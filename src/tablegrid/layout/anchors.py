"""Anchor point system for positioning content within a grid cell."""

from enum import Enum

import numpy as np

from ..core.point import Point


class CellAnchor(Enum):
    """Named anchor points within a cell's bounding box.

    Anchors are defined in normalized coordinates (0-1) where:
    - X: 0 = left, 1 = right
    - Y: 0 = top (the first-row side), 1 = bottom
    """
    CENTER = "center"

    # Corners
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"

    # Edge centers
    TOP_CENTER = "top_center"
    BOTTOM_CENTER = "bottom_center"
    LEFT_CENTER = "left_center"
    RIGHT_CENTER = "right_center"


# X: 0=left, 1=right | Y: 0=top, 1=bottom
ANCHOR_POSITIONS: dict[CellAnchor, tuple[float, float]] = {
    CellAnchor.CENTER: (0.5, 0.5),

    CellAnchor.TOP_LEFT: (0.0, 0.0),
    CellAnchor.TOP_RIGHT: (1.0, 0.0),
    CellAnchor.BOTTOM_LEFT: (0.0, 1.0),
    CellAnchor.BOTTOM_RIGHT: (1.0, 1.0),

    CellAnchor.TOP_CENTER: (0.5, 0.0),
    CellAnchor.BOTTOM_CENTER: (0.5, 1.0),
    CellAnchor.LEFT_CENTER: (0.0, 0.5),
    CellAnchor.RIGHT_CENTER: (1.0, 0.5),
}


def resolve_anchor(anchor: CellAnchor | str, cell_size: tuple[float, float]) -> Point:
    """Convert an anchor to an offset from the cell center.

    Args:
        anchor: The anchor point (enum or string name)
        cell_size: The size of the cell (width, height)

    Returns:
        Offset (dx, dy) to add to the cell center point

    Raises:
        ValueError: If a string does not name a known anchor
    """
    if isinstance(anchor, str):
        anchor = CellAnchor(anchor)

    norm_pos = np.array(ANCHOR_POSITIONS[anchor])

    # Cell origin is its center, so normalized 0->1 maps to -0.5->+0.5 of size
    offset = (norm_pos - 0.5) * np.asarray(cell_size, dtype=np.float64)
    return Point(offset[0], offset[1])
