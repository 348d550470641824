"""Tests for cell anchor points."""

import pytest

from tablegrid import CellAnchor, GridLayout, Point, resolve_anchor


@pytest.mark.parametrize(
    "anchor,offset",
    [
        (CellAnchor.CENTER, (0, 0)),
        (CellAnchor.TOP_LEFT, (-20, -5)),
        (CellAnchor.TOP_RIGHT, (20, -5)),
        (CellAnchor.BOTTOM_LEFT, (-20, 5)),
        (CellAnchor.BOTTOM_RIGHT, (20, 5)),
        (CellAnchor.TOP_CENTER, (0, -5)),
        (CellAnchor.BOTTOM_CENTER, (0, 5)),
        (CellAnchor.LEFT_CENTER, (-20, 0)),
        (CellAnchor.RIGHT_CENTER, (20, 0)),
    ],
)
def test_resolve_anchor_offsets(anchor, offset):
    assert resolve_anchor(anchor, (40, 10)) == Point(*offset)


def test_resolve_anchor_accepts_names():
    assert resolve_anchor("bottom_right", (4, 6)) == Point(2, 3)


def test_resolve_anchor_unknown_name():
    with pytest.raises(ValueError):
        resolve_anchor("middle", (1, 1))


def test_adjacent_cells_share_edges():
    t = GridLayout([60, 40, 100], [100, 60, 40])
    assert t.anchor(1, CellAnchor.RIGHT_CENTER) == t.anchor(2, CellAnchor.LEFT_CENTER)
    assert t.anchor(2, "bottom_left") == t.anchor(5, "top_left")


def test_anchor_defaults_to_center():
    t = GridLayout([60, 40, 100], [100, 60, 40])
    assert t.anchor(4) == t[4]
