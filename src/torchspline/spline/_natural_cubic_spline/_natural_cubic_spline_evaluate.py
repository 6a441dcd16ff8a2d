from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._empty_spline_error import EmptySplineError
from .._out_of_range_error import OutOfRangeError
from ._natural_cubic_spline_locate import natural_cubic_spline_locate

if TYPE_CHECKING:
    from ._natural_cubic_spline import NaturalCubicSpline


def spline_segment_evaluate(
    segment: NaturalCubicSpline,
    x: Tensor,
) -> Tensor:
    """
    Evaluate a single segment ``a*x^3 + b*x^2 + c*x + d``.

    Raises
    ------
    OutOfRangeError
        If x is not within the segment's ``[knot0, knot1]``.
    """
    if not (x >= segment.knot0 and x <= segment.knot1):
        raise OutOfRangeError(
            f"{float(x)} is outside the segment range "
            f"[{segment.knot0.item()}, {segment.knot1.item()}]"
        )

    return segment.a * x**3 + segment.b * x**2 + segment.c * x + segment.d


def natural_cubic_spline_evaluate(
    spline: NaturalCubicSpline,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a natural cubic spline at query points.

    Every query is located and evaluated on its own, in input order.

    Parameters
    ----------
    spline : NaturalCubicSpline
        Fitted spline from natural_cubic_spline_fit or read_spline.
    t : float or Tensor
        Query points, shape (*query_shape) or scalar.

    Returns
    -------
    y : Tensor
        Spline values, shape (*query_shape).

    Raises
    ------
    EmptySplineError
        If the spline has no segments.
    OutOfRangeError
        If any query point is outside the spline domain.
    """
    if spline.knot0.shape[0] == 0:
        raise EmptySplineError("Cannot evaluate a spline with no segments")

    t = torch.as_tensor(t, dtype=spline.a.dtype, device=spline.a.device)

    query_shape = t.shape
    t_flat = t.flatten()

    values = []
    for x in t_flat:
        index = natural_cubic_spline_locate(spline, x)
        values.append(spline_segment_evaluate(spline[index], x))

    if not values:
        return t_flat.new_empty(query_shape)

    return torch.stack(values).view(query_shape)
