"""Main entry point for tablegrid."""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from .core.errors import LayoutError
from .layout import GridLayout, GridLoader, from_counts
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def _parse_pair(text: str, sep: str, label: str) -> tuple[float, float]:
    """Parse 'AxB' style arguments into two floats."""
    parts = text.split(sep)
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"{label} must look like A{sep}B, got {text!r}")
    try:
        return (float(parts[0]), float(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"{label} must hold numbers, got {text!r}") from None


def _cell_size(text: str) -> tuple[float, float]:
    return _parse_pair(text, "x", "cell size")


def _center(text: str) -> tuple[float, float]:
    return _parse_pair(text, ",", "center")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tablegrid",
        description="Tablegrid - list the cell centers of a grid layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-g", "--grid",
        metavar="NAME",
        help="Load a named grid definition from the grid search paths",
    )
    source.add_argument(
        "-f", "--file",
        metavar="PATH",
        type=Path,
        help="Load a grid definition from a YAML file",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=4,
        help="Number of rows (default: 4)",
    )
    parser.add_argument(
        "--cols",
        type=int,
        default=3,
        help="Number of columns (default: 3)",
    )
    parser.add_argument(
        "--cell-size",
        metavar="WxH",
        type=_cell_size,
        default=(100.0, 100.0),
        help="Cell width and height (default: 100x100)",
    )
    parser.add_argument(
        "--center",
        metavar="X,Y",
        type=_center,
        default=(0.0, 0.0),
        help="Point the grid is centered on (default: 0,0)",
    )
    parser.add_argument(
        "--search-path",
        metavar="DIR",
        type=Path,
        action="append",
        help="Directory holding grid YAML files (repeatable)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "csv", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def build_layout(args: argparse.Namespace) -> GridLayout:
    """Build the layout selected by the command line arguments."""
    if args.grid or args.file:
        loader = GridLoader(args.search_path)
        if args.file:
            return loader.load_file(args.file)
        return loader.load(args.grid)

    width, height = args.cell_size
    return from_counts(args.rows, args.cols, width, height, args.center)


def write_cells(layout: GridLayout, fmt: str, out: TextIO) -> None:
    """Write one record per cell (index, row, col, x, y) to `out`."""
    fields = ["index", "row", "col", "x", "y"]
    rows = [
        {"index": c.index, "row": c.row, "col": c.col, "x": c.point.x, "y": c.point.y}
        for c in layout.cells()
    ]

    if fmt == "json":
        json.dump({"shape": list(layout.shape), "cells": rows}, out, indent=2)
        out.write("\n")
    elif fmt == "csv":
        writer = csv.DictWriter(out, fieldnames=fields, lineterminator="\n")
        writer.writeheader()
        writer.writerows(rows)
    else:
        out.write(f"{layout.nrows} rows x {layout.ncols} cols, {len(layout)} cells\n")
        for row in rows:
            out.write(f"{row['index']:>5} {row['row']:>4} {row['col']:>4} {row['x']:>10.3f} {row['y']:>10.3f}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tablegrid command line tool."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        layout = build_layout(args)
    except (LayoutError, FileNotFoundError) as e:
        logger.debug("Could not build layout", exc_info=True)
        print(f"tablegrid: {e}", file=sys.stderr)
        return 1

    write_cells(layout, args.format, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
