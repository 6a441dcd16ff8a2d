from ._spline_error import SplineError


class SingularSystemError(SplineError):
    """Raised when the spline constraint matrix cannot be inverted."""

    pass
