from ..spline import SplineError


class TableError(SplineError):
    """Raised when a CSV table is missing columns or holds unparsable cells."""

    pass
