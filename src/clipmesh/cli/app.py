"""CLI application entry point for clipmesh.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from clipmesh import __version__
from clipmesh.cli.output import (
    console,
    create_progress,
    print_clip_info,
    print_clip_success,
    print_error,
    print_header,
    print_mesh_success,
    print_primitive_info,
    print_step,
)
from clipmesh.config import (
    ClipMeshSettings,
    LoggingConfig,
    ProcessingConfig,
)
from clipmesh.core import BatchClipper, RegularDiscretization, SutherlandHodgmanClipper, fit_dims
from clipmesh.exceptions import (
    ClipMeshError,
    GeometryLoadError,
    GeometrySaveError,
)
from clipmesh.io import GeometryReader, MeshWriter, PolygonWriter, output_path_for
from clipmesh.utils import OperationLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="clipmesh",
    help="Clip polygons against convex regions and mesh parametric primitives.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]clipmesh[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Clip polygons against convex regions and mesh parametric primitives."""


LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def _check_input(path: Path) -> None:
    if not path.exists():
        print_error(
            f"Input file not found: {path}",
            details=f"The file '{path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not path.is_file():
        print_error(
            f"Input path is not a file: {path}",
            details="Please provide a path to a JSON geometry document.",
        )
        raise typer.Exit(code=1)


@app.command()
def clip(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="JSON document with a 'clip' region and 'polygons'",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-clipped.json)",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Clip every polygon of a document against its convex clip region.

    Example:
        clipmesh clip shapes.json

    This will create shapes-clipped.json. Polygons that lie entirely outside
    the clip region are written as null.
    """
    _check_input(input_file)

    if not quiet:
        print_header(__version__)

    settings = ClipMeshSettings(
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        if not quiet:
            print_step("Loading geometry")

        with GeometryReader(input_file) as reader:
            polygons = reader.polygons
            clip_region = reader.clip_region

        clip_ring = SutherlandHodgmanClipper(settings.geometry).prepare_clip_ring(clip_region)
        if not quiet:
            print_clip_info(str(input_file), len(polygons), len(clip_ring))
            print_step("Clipping")

        output_path = output or output_path_for(input_file, "clipped", ".json")
        clipper = BatchClipper(settings, logger=logger)

        if not quiet and polygons:
            with create_progress() as progress:
                task_id = progress.add_task(f"Clipping {len(polygons)} polygons", total=len(polygons))

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                results, stats = clipper.clip_all(
                    polygons, clip_ring, max_workers=workers, progress_callback=update_progress
                )
        else:
            results, stats = clipper.clip_all(polygons, clip_ring, max_workers=workers)

        PolygonWriter().save(results, output_path)

        if not quiet:
            print_clip_success(
                output_path=str(output_path),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                empty=stats.empty_count,
                errors=stats.error_count,
            )

        if stats.error_count:
            raise typer.Exit(code=1)

    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except GeometryLoadError as e:
        print_error(f"Could not load geometry: {e.reason}")
        raise typer.Exit(code=1)
    except GeometrySaveError as e:
        print_error(f"Could not save result: {e.reason}")
        raise typer.Exit(code=1)
    except ClipMeshError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def discretize(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="JSON document with a 'primitive' and optional 'sizes'",
            show_default=False,
        ),
    ],
    sizes: Annotated[
        list[int] | None,
        typer.Option(
            "--size",
            "-n",
            help="Samples per parametric axis; repeat for each axis (overrides the document)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path, .obj or .json (default: {name}-mesh.obj)",
        ),
    ] = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Discretize a parametric primitive into a mesh.

    Example:
        clipmesh discretize sphere.json -n 8 -n 16 -o sphere.obj
    """
    _check_input(input_file)

    if not quiet:
        print_header(__version__)

    settings = ClipMeshSettings(logging=LoggingConfig(log_file=log_file, log_level=log_level))
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    operation_logger = OperationLogger(logger)

    try:
        if not quiet:
            print_step("Loading primitive")

        with GeometryReader(input_file) as reader:
            primitive = reader.primitive
            doc_sizes = reader.sizes

        chosen = tuple(sizes) if sizes else doc_sizes
        method = RegularDiscretization(*chosen, config=settings.discretization)
        if not quiet:
            target = primitive.boundary() if primitive.paramdim == 3 else primitive
            print_primitive_info(
                str(input_file), type(primitive).__name__, fit_dims(method.sizes, target.paramdim)
            )
            print_step("Discretizing")

        start = time.time()
        mesh = method.discretize(primitive)
        duration_s = time.time() - start
        operation_logger.log_discretize_complete(
            type(primitive).__name__,
            vertices=mesh.n_vertices,
            elements=mesh.n_elements,
            duration_ms=duration_s * 1000,
        )

        output_path = output or output_path_for(input_file, "mesh", ".obj")
        MeshWriter().save(mesh, output_path)

        if not quiet:
            print_mesh_success(
                output_path=str(output_path),
                total_time_s=duration_s,
                vertices=mesh.n_vertices,
                quads=mesh.n_quads,
                triangles=mesh.n_triangles,
            )

    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except GeometryLoadError as e:
        print_error(f"Could not load primitive: {e.reason}")
        raise typer.Exit(code=1)
    except GeometrySaveError as e:
        print_error(f"Could not save mesh: {e.reason}")
        raise typer.Exit(code=1)
    except ClipMeshError as e:
        operation_logger.log_error(str(input_file), e)
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
