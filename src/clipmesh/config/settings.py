"""Configuration settings for clipmesh."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for geometric predicates and deduplication.

    Tolerances are absolute distances in the units of the input coordinates,
    except ``parallel_epsilon`` which is relative to the product of the two
    direction lengths.
    """

    tolerance: float = Field(
        default=1e-9,
        ge=0.0,
        le=1.0,
        description="Distance below which a point is classified as on a line",
    )
    dedup_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Distance below which consecutive ring points are merged (0 = exact)",
    )
    parallel_epsilon: float = Field(
        default=1e-12,
        ge=0.0,
        le=1e-3,
        description="Relative determinant threshold for treating two lines as parallel",
    )
    check_convexity: bool = Field(
        default=True,
        description="Reject non-convex clip boundaries before clipping",
    )


class DiscretizationConfig(BaseModel):
    """Configuration for regular discretization."""

    default_samples: int = Field(
        default=16,
        ge=2,
        le=4096,
        description="Samples per parametric axis when no sizes are given",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ClipMeshSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    discretization: DiscretizationConfig = Field(default_factory=DiscretizationConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ClipMeshSettings:
    """Get default application settings."""
    return ClipMeshSettings()
