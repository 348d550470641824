"""Load grid layouts from YAML definition files."""

from __future__ import annotations

import logging
import numbers
from pathlib import Path
from typing import Any

import numpy as np
import yaml

from ..core.errors import LayoutError
from .builders import from_counts, from_sizes, tiler
from .grid import GridLayout

logger = logging.getLogger(__name__)

# Keys selecting each sizing form; a definition must use exactly one
SIZING_FORMS = {
    "uniform": ("rows", "cols"),
    "ragged": ("row_heights", "col_widths"),
    "tiler": ("tiler",),
}


def _parse_sizes(value: Any, label: str) -> Any:
    """Expand a {start, stop, step} mapping into a list; pass other values through."""
    if isinstance(value, dict):
        try:
            start = value.get("start", 0)
            stop = value["stop"]
            step = value.get("step", 1)
        except KeyError as e:
            raise LayoutError(f"{label} range needs a 'stop' value") from e
        for bound in (start, stop, step):
            if not isinstance(bound, numbers.Real) or isinstance(bound, bool):
                raise LayoutError(f"{label} range bounds must be numbers, got {value!r}")
        if step == 0:
            raise LayoutError(f"{label} range step must not be zero")
        return np.arange(start, stop, step, dtype=np.float64).tolist()
    return value


def _parse_point(value: Any, label: str) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise LayoutError(f"{label} must be a [x, y] pair, got {value!r}")
    try:
        return (float(value[0]), float(value[1]))
    except (TypeError, ValueError) as e:
        raise LayoutError(f"{label} must hold numbers, got {value!r}") from e


class GridLoader:
    """Loads grid layout definitions from YAML files.

    YAML format:
    ```yaml
    name: contact_sheet
    center: [0, 0]

    # Uniform cells
    rows: 4
    cols: 3
    cell_size: [80, 30]   # width, height

    # ...or explicit row heights and column widths
    row_heights: [60, 40, 100]
    col_widths: {start: 20, stop: 80, step: 20}

    # ...or tiles filling an area
    tiler: {width: 1200, height: 1200, rows: 8, cols: 8, margin: 20}
    ```
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories to search for grid YAML files.
                         Defaults to ['assets/grids/'] relative to project root.
        """
        if search_paths is None:
            project_root = Path(__file__).parent.parent.parent.parent
            self.search_paths = [project_root / "assets" / "grids"]
        else:
            self.search_paths = [Path(p) for p in search_paths]

        self._cache: dict[str, GridLayout] = {}

    def load(self, name: str) -> GridLayout:
        """Load a grid definition by name.

        Searches for {name}.yaml in search paths.

        Args:
            name: Grid name (without .yaml extension)

        Returns:
            GridLayout instance

        Raises:
            FileNotFoundError: If grid YAML not found
            LayoutError: If YAML format is invalid
        """
        if name in self._cache:
            return self._cache[name]

        yaml_path = self._find_yaml(name)
        if yaml_path is None:
            raise FileNotFoundError(
                f"Grid '{name}' not found in search paths: {self.search_paths}"
            )

        layout = self.load_file(yaml_path)
        self._cache[name] = layout
        return layout

    def load_file(self, path: Path | str) -> GridLayout:
        """Load a grid definition from an explicit file path."""
        path = Path(path)
        logger.debug("Loading grid definition from %s", path)
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise LayoutError(f"{path}: invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise LayoutError(f"{path}: grid definition must be a mapping")
        return self.from_dict(data, source=str(path))

    def from_dict(self, data: dict[str, Any], source: str = "<dict>") -> GridLayout:
        """Build a grid from an already-parsed definition.

        Args:
            data: Definition mapping (see class docstring)
            source: Name used in error messages

        Returns:
            GridLayout instance
        """
        forms = [form for form, keys in SIZING_FORMS.items() if any(k in data for k in keys)]
        if len(forms) != 1:
            found = ", ".join(forms) or "none"
            raise LayoutError(
                f"{source}: expected exactly one of rows/cols, row_heights/col_widths "
                f"or tiler (found: {found})"
            )
        form = forms[0]
        missing = [k for k in SIZING_FORMS[form] if k not in data]
        if missing:
            raise LayoutError(f"{source}: missing {', '.join(missing)}")

        center = _parse_point(data.get("center", [0, 0]), f"{source}: center")

        if form == "uniform":
            width, height = _parse_point(data.get("cell_size", [100, 100]), f"{source}: cell_size")
            layout = from_counts(data["rows"], data["cols"], width, height, center)
        elif form == "ragged":
            layout = from_sizes(
                _parse_sizes(data["row_heights"], f"{source}: row_heights"),
                _parse_sizes(data["col_widths"], f"{source}: col_widths"),
                center,
            )
        else:
            params = data["tiler"]
            if not isinstance(params, dict):
                raise LayoutError(f"{source}: tiler must be a mapping")
            try:
                layout = tiler(
                    params["width"],
                    params["height"],
                    params["rows"],
                    params["cols"],
                    margin=params.get("margin", 0),
                    center=center,
                )
            except KeyError as e:
                raise LayoutError(f"{source}: tiler is missing {e}") from e

        logger.debug("Loaded grid '%s' (%dx%d)", data.get("name", source), *layout.shape)
        return layout

    def _find_yaml(self, name: str) -> Path | None:
        """Find YAML file in search paths."""
        for search_path in self.search_paths:
            yaml_path = search_path / f"{name}.yaml"
            if yaml_path.exists():
                return yaml_path
        return None

    def list_grids(self) -> list[str]:
        """List all available grid definition names."""
        names = set()
        for search_path in self.search_paths:
            if search_path.exists():
                for yaml_file in search_path.glob("*.yaml"):
                    names.add(yaml_file.stem)
        return sorted(names)

    def clear_cache(self) -> None:
        """Clear the grid cache."""
        self._cache.clear()
