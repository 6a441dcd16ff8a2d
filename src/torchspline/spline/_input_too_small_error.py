from ._spline_error import SplineError


class InputTooSmallError(SplineError):
    """Raised when fewer than two knots are supplied to the fitter."""

    pass
