"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for batch clipping.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]clipmesh[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_clip_info(input_path: str, polygons: int, clip_vertices: int) -> None:
    """Print what is about to be clipped.

    Args:
        input_path: Path to the input document
        polygons: Number of polygons in the document
        clip_vertices: Vertex count of the validated clip ring
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(input_path)
    console.print(line)
    console.print(f"  {polygons:,} polygons {SYM_DOT} clip region with {clip_vertices} vertices")


def print_primitive_info(input_path: str, primitive: str, sizes: tuple[int, ...]) -> None:
    """Print the primitive about to be discretized."""
    line = Text("  ")
    line.append(input_path)
    line.append(f" ({primitive})")
    console.print(line)
    console.print(f"  sizes {' x '.join(str(n) for n in sizes)}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_clip_success(
    output_path: str,
    total_time_s: float,
    processed: int,
    empty: int,
    errors: int,
) -> None:
    """Print clip summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        processed: Number of polygons clipped
        empty: Number of polygons clipped away entirely
        errors: Number of polygons that failed
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} polygons {SYM_DOT} {empty} empty {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )


def print_mesh_success(
    output_path: str,
    total_time_s: float,
    vertices: int,
    quads: int,
    triangles: int,
) -> None:
    """Print mesh summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        vertices: Number of mesh vertices
        quads: Number of quadrangles
        triangles: Number of triangles
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)
    console.print(f"  {vertices} vertices {SYM_DOT} {quads} quads {SYM_DOT} {triangles} triangles")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
