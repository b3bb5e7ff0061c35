"""Parallel batch clipping.

Clips many polygons against one convex region. Each polygon is an
independent pure computation, so polygons are fanned out to worker
processes with ProcessPoolExecutor.

Key components:
- clip_polygon_task: Top-level picklable function for parallel execution
- BatchClipper: Orchestrates a batch and collects statistics
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any

import structlog

from clipmesh.config import ClipMeshSettings, GeometryConfig
from clipmesh.core.clipping import SutherlandHodgmanClipper
from clipmesh.domain import Polygon, Ring
from clipmesh.utils import OperationLogger, OperationStats


def clip_polygon_task(
    index: int,
    polygon_dict: dict[str, Any],
    clip_ring_dict: dict[str, Any],
    config_dict: dict[str, Any],
) -> dict[str, Any]:
    """Clip a single serialized polygon.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    The clip ring must already be validated and counter-clockwise.

    Args:
        index: Position of the polygon in the batch
        polygon_dict: Serialized polygon (from Polygon.to_dict())
        clip_ring_dict: Serialized clip ring (from Ring.to_dict())
        config_dict: Serialized geometry configuration

    Returns:
        Dictionary containing either:
        - Success: {"index": int, "polygon": dict | None, "rings_in": int,
          "duration_ms": float}
        - Error: {"index": int, "error": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        polygon = Polygon.from_dict(polygon_dict)
        clip_ring = Ring.from_dict(clip_ring_dict)
        clipper = SutherlandHodgmanClipper(GeometryConfig(**config_dict))

        clipped = clipper.clip_polygon_against_ring(polygon, clip_ring)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "index": index,
            "polygon": clipped.to_dict() if clipped is not None else None,
            "rings_in": len(polygon.rings),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "index": index,
            "error": str(e),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class BatchClipper:
    """Clips a batch of polygons against one convex region.

    The clip region is validated once, before any polygon is processed; a
    non-convex or degenerate region aborts the whole batch. Failures of
    individual polygons are recorded and yield None in the results.

    Example:
        clipper = BatchClipper(ClipMeshSettings())
        results, stats = clipper.clip_all(polygons, Box(Point(0, 0), Point(1, 1)))
    """

    def __init__(
        self,
        settings: ClipMeshSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the batch clipper.

        Args:
            settings: Application settings (geometry tolerances, worker count)
            logger: Structured logger; defaults to the "clipmesh" logger
        """
        self.settings = settings or ClipMeshSettings()
        self.logger = logger or structlog.get_logger("clipmesh")
        self.clipper = SutherlandHodgmanClipper(self.settings.geometry)

    def clip_all(
        self,
        polygons: Sequence[Polygon],
        clip_region: object,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> tuple[list[Polygon | None], OperationStats]:
        """Clip every polygon against ``clip_region``.

        Args:
            polygons: Polygons to clip
            clip_region: Convex clip geometry (Ring, Polygon or 2-D Box)
            max_workers: Worker processes; 1 clips in-process, None uses the
                configured value (or the executor default)
            progress_callback: Called with (completed, total) after each polygon

        Returns:
            Tuple of (results in input order, statistics)

        Raises:
            GeometryPreconditionError: If the clip region is invalid
        """
        clip_ring = self.clipper.prepare_clip_ring(clip_region)
        workers = max_workers if max_workers is not None else self.settings.processing.max_workers

        operation_logger = OperationLogger(self.logger)
        stats = operation_logger.stats
        stats.start_time = time.time()

        total = len(polygons)
        results: list[Polygon | None] = [None] * total

        self.logger.info(
            "Starting batch clip",
            polygons=total,
            clip_vertices=len(clip_ring),
            workers=workers,
        )

        ring_dict = clip_ring.to_dict()
        config_dict = self.settings.geometry.model_dump()

        def handle(result: dict[str, Any], completed: int) -> None:
            idx = result["index"]
            if "error" in result:
                operation_logger.log_error(
                    f"polygon[{idx}]", result["error"], traceback=result.get("traceback")
                )
            else:
                polygon_dict = result["polygon"]
                clipped = Polygon.from_dict(polygon_dict) if polygon_dict is not None else None
                results[idx] = clipped
                operation_logger.log_clip_complete(
                    idx,
                    rings_in=result["rings_in"],
                    rings_out=len(clipped.rings) if clipped is not None else 0,
                    duration_ms=result["duration_ms"],
                )
            if progress_callback:
                progress_callback(completed, total)

        if workers == 1 or total <= 1:
            for idx, polygon in enumerate(polygons):
                handle(clip_polygon_task(idx, polygon.to_dict(), ring_dict, config_dict), idx + 1)
        else:
            with ProcessPoolExecutor(max_workers=workers) as executor:
                futures = [
                    executor.submit(clip_polygon_task, idx, polygon.to_dict(), ring_dict, config_dict)
                    for idx, polygon in enumerate(polygons)
                ]
                for completed, future in enumerate(as_completed(futures), start=1):
                    handle(future.result(), completed)

        stats.end_time = time.time()
        self.logger.info(
            "Batch clip complete",
            processed=stats.processed_count,
            empty=stats.empty_count,
            errors=stats.error_count,
            duration_s=round(stats.duration_seconds, 3),
        )
        return results, stats
