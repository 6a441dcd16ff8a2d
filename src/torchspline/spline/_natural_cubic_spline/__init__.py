from ._natural_cubic_spline import (
    NaturalCubicSpline,
    natural_cubic_spline,
)
from ._natural_cubic_spline_derivative import natural_cubic_spline_derivative
from ._natural_cubic_spline_evaluate import (
    natural_cubic_spline_evaluate,
    spline_segment_evaluate,
)
from ._natural_cubic_spline_fit import natural_cubic_spline_fit
from ._natural_cubic_spline_from_segments import (
    natural_cubic_spline_from_segments,
)
from ._natural_cubic_spline_locate import natural_cubic_spline_locate
from ._natural_cubic_spline_system import natural_cubic_spline_system
from ._spline_segment import SplineSegment

__all__ = [
    "NaturalCubicSpline",
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
