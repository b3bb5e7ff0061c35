"""Geometry reader for loading JSON input documents.

A clip document holds a convex clip region and the polygons to clip::

    {"clip": [[0, 0], [4, 0], [4, 4], [0, 4]],
     "polygons": [[[[1, 1], [5, 1], [5, 5], [1, 5]]]]}

A discretization document holds one primitive and optional sizes::

    {"primitive": {"type": "sphere", "center": [0, 0, 0], "radius": 1},
     "sizes": [8, 16]}
"""

import json
from pathlib import Path
from typing import Any

from clipmesh.domain import Polygon, Primitive, Ring
from clipmesh.exceptions import ClipMeshError, GeometryLoadError
from clipmesh.io.converter import (
    clip_region_from_data,
    polygon_from_coords,
    primitive_from_dict,
)


class GeometryReader:
    """Loads JSON geometry documents into domain models.

    Example:
        reader = GeometryReader(Path("clip.json"))
        reader.load()
        for polygon in reader.polygons:
            print(polygon.area())
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the JSON document
        """
        self._path = path
        self._data: dict[str, Any] | None = None

    def load(self) -> None:
        """Load and parse the document.

        Raises:
            FileNotFoundError: If the file does not exist
            GeometryLoadError: If the file is not a JSON object
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Geometry file not found: {self._path}")

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise GeometryLoadError(str(self._path), f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise GeometryLoadError(str(self._path), "top-level value must be an object")
        self._data = data

    def _require(self, key: str) -> Any:
        if self._data is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        if key not in self._data:
            raise GeometryLoadError(str(self._path), f"missing '{key}'")
        return self._data[key]

    @property
    def polygons(self) -> list[Polygon]:
        """Polygons to clip.

        Raises:
            RuntimeError: If the document has not been loaded yet
            GeometryLoadError: If the polygons are missing or malformed
        """
        raw = self._require("polygons")
        try:
            return [polygon_from_coords(rings) for rings in raw]
        except (TypeError, ValueError, IndexError) as e:
            raise GeometryLoadError(str(self._path), f"malformed polygon: {e}") from e

    @property
    def clip_region(self) -> Ring | Primitive:
        """Clip region as a ring or a primitive with a ring boundary."""
        raw = self._require("clip")
        try:
            return clip_region_from_data(raw)
        except ClipMeshError as e:
            raise GeometryLoadError(str(self._path), str(e)) from e
        except (TypeError, ValueError, IndexError) as e:
            raise GeometryLoadError(str(self._path), f"malformed clip region: {e}") from e

    @property
    def primitive(self) -> Primitive:
        """Primitive to discretize."""
        raw = self._require("primitive")
        try:
            return primitive_from_dict(raw)
        except ClipMeshError as e:
            raise GeometryLoadError(str(self._path), str(e)) from e
        except (TypeError, ValueError, AttributeError) as e:
            raise GeometryLoadError(str(self._path), f"malformed primitive: {e}") from e

    @property
    def sizes(self) -> tuple[int, ...]:
        """Sample sizes, empty when the document does not specify any."""
        if self._data is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return tuple(int(n) for n in self._data.get("sizes", ()))

    def __enter__(self) -> "GeometryReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self._data = None
