"""Writers for clip results and meshes."""

import json
from pathlib import Path

from clipmesh.domain import Mesh, Polygon
from clipmesh.exceptions import GeometrySaveError
from clipmesh.io.converter import mesh_to_obj, polygon_to_coords

MESH_FORMATS = (".json", ".obj")


def output_path_for(input_path: Path, suffix: str, extension: str) -> Path:
    """Derive an output path next to the input.

    Example: ``shapes.json`` -> ``shapes-clipped.json``
    """
    return input_path.with_name(f"{input_path.stem}-{suffix}{extension}")


class MeshWriter:
    """Saves meshes as JSON or Wavefront OBJ, chosen by file extension."""

    def save(self, mesh: Mesh, path: Path) -> None:
        """Write a mesh.

        Raises:
            GeometrySaveError: On unsupported extensions or write failures
        """
        extension = path.suffix.lower()
        if extension not in MESH_FORMATS:
            raise GeometrySaveError(
                str(path), f"unsupported mesh format '{extension}', use one of {MESH_FORMATS}"
            )

        if extension == ".obj":
            text = mesh_to_obj(mesh)
        else:
            text = json.dumps(mesh.to_dict(), indent=2)

        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise GeometrySaveError(str(path), str(e)) from e


class PolygonWriter:
    """Saves clip results as JSON; clipped-away polygons are written as null."""

    def save(self, polygons: list[Polygon | None], path: Path) -> None:
        """Write clip results.

        Raises:
            GeometrySaveError: On write failures
        """
        data = {
            "polygons": [polygon_to_coords(p) if p is not None else None for p in polygons],
        }
        try:
            path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            raise GeometrySaveError(str(path), str(e)) from e
