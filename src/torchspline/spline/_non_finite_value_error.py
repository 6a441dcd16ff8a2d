from ._spline_error import SplineError


class NonFiniteValueError(SplineError):
    """Raised when a knot coordinate or segment value is NaN or infinite."""

    pass
