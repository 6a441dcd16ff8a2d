from ._spline_error import SplineError


class OutOfRangeError(SplineError):
    """Raised when a query point lies outside the interval it is evaluated on."""

    pass
