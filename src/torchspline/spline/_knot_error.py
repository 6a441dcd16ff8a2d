from ._spline_error import SplineError


class KnotError(SplineError):
    """Raised for malformed knots or segment tables.

    This occurs when:
    - Knot coordinates are not 1-D tensors of equal length
    - Knot x positions passed to the fitter are not in increasing order
    - A knot table contains duplicate x positions
    - A segment table is unordered or has gaps or overlaps
    """

    pass
