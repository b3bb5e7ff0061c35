"""Exception hierarchy for clipmesh."""


class ClipMeshError(Exception):
    """Base exception for all clipmesh errors."""

    pass


class GeometryError(ClipMeshError):
    """Errors in geometric calculations."""

    pass


class GeometryPreconditionError(GeometryError):
    """Input geometry violates a precondition of the requested operation.

    Raised eagerly (before any work is done) for non-convex or degenerate
    clip boundaries and for primitives constructed from invalid parameters.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class IntersectionError(GeometryError):
    """Error calculating intersections."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class DomainError(GeometryError):
    """Parametric evaluation requested outside the normalized domain."""

    def __init__(self, primitive: str, params: tuple[float, ...]) -> None:
        self.primitive = primitive
        self.params = params
        dims = len(params)
        super().__init__(
            f"{primitive}{params} is not defined for parameters outside [0, 1]^{dims}"
        )


class DiscretizationError(ClipMeshError):
    """Errors related to mesh generation."""

    pass


class InvalidResolutionError(DiscretizationError):
    """Sample grid is too coarse along a parametric axis."""

    def __init__(self, axis: int, samples: int, minimum: int) -> None:
        self.axis = axis
        self.samples = samples
        self.minimum = minimum
        super().__init__(
            f"Parametric axis {axis} has {samples} samples, at least {minimum} required"
        )


class IndexOutOfRangeError(DiscretizationError):
    """Connectivity references a point outside the assembled point array."""

    def __init__(self, element_idx: int, reason: str) -> None:
        self.element_idx = element_idx
        self.reason = reason
        super().__init__(f"Invalid connectivity in element {element_idx}: {reason}")


class GeometryIOError(ClipMeshError):
    """Errors related to reading or writing geometry files."""

    pass


class GeometryLoadError(GeometryIOError):
    """Error loading a geometry file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load geometry '{path}': {reason}")


class GeometrySaveError(GeometryIOError):
    """Error saving a geometry file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save geometry '{path}': {reason}")
