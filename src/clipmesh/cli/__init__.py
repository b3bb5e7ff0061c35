"""Command-line interface for clipmesh.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Batch clipping with a progress bar
- Discretization to OBJ or JSON meshes
- Quiet mode and optional log files
"""

from clipmesh.cli.app import cli

__all__ = ["cli"]
