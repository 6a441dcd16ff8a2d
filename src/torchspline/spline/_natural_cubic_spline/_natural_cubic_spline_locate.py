from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._empty_spline_error import EmptySplineError
from .._out_of_range_error import OutOfRangeError

if TYPE_CHECKING:
    from ._natural_cubic_spline import NaturalCubicSpline


def natural_cubic_spline_locate(
    spline: NaturalCubicSpline,
    x: Union[float, Tensor],
) -> int:
    """
    Find the segment whose closed interval contains ``x``.

    Binary search over the ordered, gap-free segments. When ``x`` sits
    exactly on a knot shared by two segments either one may be returned;
    both evaluate to the same value.

    Parameters
    ----------
    spline : NaturalCubicSpline
        Spline with ``batch_size == (n_segments,)``.
    x : float or Tensor
        Scalar query point.

    Returns
    -------
    int
        Index i with ``spline.knot0[i] <= x <= spline.knot1[i]``.

    Raises
    ------
    EmptySplineError
        If the spline has no segments.
    OutOfRangeError
        If x lies outside ``[spline.knot0[0], spline.knot1[-1]]`` or is NaN.
    """
    knot0 = spline.knot0
    knot1 = spline.knot1

    if knot0.shape[0] == 0:
        raise EmptySplineError("Cannot evaluate a spline with no segments")

    lo = 0
    hi = knot0.shape[0] - 1

    if not (x >= knot0[lo] and x <= knot1[hi]):
        raise OutOfRangeError(
            f"{float(x)} is outside the spline range "
            f"[{knot0[lo].item()}, {knot1[hi].item()}]"
        )

    while lo < hi:
        mid = (lo + hi) // 2

        if knot1[mid] < x:
            lo = mid + 1
        elif knot0[mid] > x:
            hi = mid - 1
        else:
            return mid

    return lo
