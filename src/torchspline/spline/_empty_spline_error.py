from ._spline_error import SplineError


class EmptySplineError(SplineError):
    """Raised when a spline with no segments is evaluated."""

    pass
