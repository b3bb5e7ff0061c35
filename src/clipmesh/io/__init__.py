"""Geometry I/O layer for clipmesh.

This module handles reading JSON geometry documents and writing clip
results and meshes. It keeps file formats out of the domain models.

Key classes:
- GeometryReader: Load polygons, clip regions and primitives
- MeshWriter: Save meshes as JSON or OBJ
- PolygonWriter: Save clip results as JSON
"""

from clipmesh.io.reader import GeometryReader
from clipmesh.io.writer import MeshWriter, PolygonWriter, output_path_for

__all__ = [
    "GeometryReader",
    "MeshWriter",
    "PolygonWriter",
    "output_path_for",
]
