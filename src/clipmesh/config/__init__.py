"""Configuration management for clipmesh.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Tolerances for predicates and deduplication
- DiscretizationConfig: Regular discretization defaults
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- ClipMeshSettings: Main application settings
"""

from clipmesh.config.settings import (
    ClipMeshSettings,
    DiscretizationConfig,
    GeometryConfig,
    LoggingConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "ClipMeshSettings",
    "DiscretizationConfig",
    "GeometryConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "get_default_settings",
]
