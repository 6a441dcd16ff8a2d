"""Natural cubic spline interpolation for PyTorch tensors.

Convenience Functions
---------------------
natural_cubic_spline
    Create a natural cubic spline interpolator from data (fit + callable).

Natural Cubic Splines
---------------------
natural_cubic_spline_fit
    Fit a natural cubic spline to knots by a dense linear solve.
natural_cubic_spline_system
    Assemble the constraint matrix and right-hand side of the fit.
natural_cubic_spline_locate
    Find the segment containing a query point by binary search.
natural_cubic_spline_evaluate
    Evaluate a natural cubic spline at query points.
spline_segment_evaluate
    Evaluate one segment, checking the query lies on it.
natural_cubic_spline_derivative
    Compute derivatives of a natural cubic spline.
natural_cubic_spline_from_segments
    Rebuild and revalidate a spline from segment records.

Data Types
----------
NaturalCubicSpline
    Ordered segments of a piecewise cubic interpolant.
SplineSegment
    One segment as a plain record of floats.

Exceptions
----------
SplineError
    Base exception for spline operations.
InputTooSmallError
    Fewer than two knots.
NonFiniteValueError
    NaN or infinite knot or segment value.
SingularSystemError
    Constraint matrix is not invertible.
OutOfRangeError
    Query point outside the spline or segment domain.
EmptySplineError
    Spline has no segments.
KnotError
    Malformed knots or segment table.
"""

# Import base exception first
from ._spline_error import SplineError

# Import exception subclasses
from ._empty_spline_error import EmptySplineError
from ._input_too_small_error import InputTooSmallError
from ._knot_error import KnotError
from ._non_finite_value_error import NonFiniteValueError
from ._out_of_range_error import OutOfRangeError
from ._singular_system_error import SingularSystemError

# Import spline implementations
from ._natural_cubic_spline import (
    NaturalCubicSpline,
    SplineSegment,
    natural_cubic_spline,
    natural_cubic_spline_derivative,
    natural_cubic_spline_evaluate,
    natural_cubic_spline_fit,
    natural_cubic_spline_from_segments,
    natural_cubic_spline_locate,
    natural_cubic_spline_system,
    spline_segment_evaluate,
)

__all__ = [
    "EmptySplineError",
    "InputTooSmallError",
    "KnotError",
    "NaturalCubicSpline",
    "NonFiniteValueError",
    "OutOfRangeError",
    "SingularSystemError",
    "SplineError",
    "SplineSegment",
    "natural_cubic_spline",
    "natural_cubic_spline_derivative",
    "natural_cubic_spline_evaluate",
    "natural_cubic_spline_fit",
    "natural_cubic_spline_from_segments",
    "natural_cubic_spline_locate",
    "natural_cubic_spline_system",
    "spline_segment_evaluate",
]
