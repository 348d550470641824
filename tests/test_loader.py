"""Tests for loading grid layouts from YAML."""

from pathlib import Path

import pytest

from tablegrid import GridLoader, LayoutError, Point

ASSETS_GRIDS = Path(__file__).parent.parent / "assets" / "grids"


def write_grid(directory: Path, name: str, text: str) -> Path:
    path = directory / f"{name}.yaml"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def loader(tmp_path):
    return GridLoader([tmp_path])


def test_uniform_definition(tmp_path, loader):
    write_grid(tmp_path, "sheet", "rows: 4\ncols: 3\ncell_size: [80, 30]\ncenter: [10, 20]\n")
    t = loader.load("sheet")
    assert t.shape == (4, 3)
    assert t.cell_size(1) == (80, 30)
    assert t.center == Point(10, 20)


def test_uniform_definition_default_size(tmp_path, loader):
    write_grid(tmp_path, "plain", "rows: 2\ncols: 2\n")
    assert loader.load("plain").cell_size(4) == (100, 100)


def test_ragged_definition_with_range(tmp_path, loader):
    write_grid(
        tmp_path,
        "ragged",
        "row_heights: {start: 15, stop: 60, step: 5}\ncol_widths: 50\n",
    )
    t = loader.load("ragged")
    assert t.row_heights.tolist() == [15, 20, 25, 30, 35, 40, 45, 50, 55]
    assert t.shape == (9, 1)


def test_tiler_definition(tmp_path, loader):
    write_grid(
        tmp_path,
        "tiles",
        "tiler: {width: 1200, height: 1200, rows: 8, cols: 8, margin: 20}\n",
    )
    t = loader.load("tiles")
    assert t.shape == (8, 8)
    assert t.cell_size(1) == (145, 145)


def test_load_is_cached(tmp_path, loader):
    write_grid(tmp_path, "sheet", "rows: 1\ncols: 1\n")
    first = loader.load("sheet")
    assert loader.load("sheet") is first
    loader.clear_cache()
    assert loader.load("sheet") is not first


def test_missing_grid(loader):
    with pytest.raises(FileNotFoundError):
        loader.load("nope")


@pytest.mark.parametrize(
    "text",
    [
        "- 1\n- 2\n",
        "name: empty\n",
        "rows: 2\ncols: 2\nrow_heights: [1, 2]\ncol_widths: [1]\n",
        "rows: 2\n",
        "row_heights: [1, 2]\n",
        "rows: 2\ncols: 2\ncell_size: [1]\n",
        "rows: 2\ncols: 2\ncenter: [a, b]\n",
        "row_heights: {start: 1}\ncol_widths: [1]\n",
        "row_heights: {stop: 5, step: 0}\ncol_widths: [1]\n",
        "row_heights: [1, -2]\ncol_widths: [1]\n",
        "tiler: {width: 100, height: 100, rows: 2}\n",
        "tiler: [1, 2]\n",
        "rows: [\n",
        "tiler: {width: abc, height: 100, rows: 2, cols: 2}\n",
        "tiler: {width: 100, height: 100, rows: 2, cols: 2, margin: [1]}\n",
        "row_heights: {stop: abc}\ncol_widths: [1]\n",
        "row_heights: {start: x, stop: 10}\ncol_widths: [1]\n",
        "row_heights: [\"10\"]\ncol_widths: [1]\n",
        "rows: 2\ncols: 2\ncell_size: [a, 1]\n",
    ],
)
def test_invalid_definitions(tmp_path, loader, text):
    write_grid(tmp_path, "bad", text)
    with pytest.raises(LayoutError):
        loader.load("bad")


def test_list_grids(tmp_path, loader):
    write_grid(tmp_path, "b", "rows: 1\ncols: 1\n")
    write_grid(tmp_path, "a", "rows: 1\ncols: 1\n")
    assert loader.list_grids() == ["a", "b"]


def test_from_dict():
    t = GridLoader([]).from_dict({"row_heights": [60, 40, 100], "col_widths": [100, 60, 40]})
    assert t[1] == Point(-50, -70)


@pytest.mark.parametrize("name", ["contact_sheet", "ragged", "pyramid", "page_tiles"])
def test_bundled_grids_load(name):
    t = GridLoader([ASSETS_GRIDS]).load(name)
    assert len(t) == t.nrows * t.ncols > 0

