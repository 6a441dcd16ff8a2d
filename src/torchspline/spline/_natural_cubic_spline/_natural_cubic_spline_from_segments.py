from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import torch

from .._knot_error import KnotError
from .._non_finite_value_error import NonFiniteValueError
from ._spline_segment import SplineSegment

if TYPE_CHECKING:
    from ._natural_cubic_spline import NaturalCubicSpline


def natural_cubic_spline_from_segments(
    segments: Sequence[SplineSegment],
    atol: float = 0.0,
    dtype: torch.dtype = torch.float64,
) -> NaturalCubicSpline:
    """
    Build a spline from segment records, checking that they form one.

    Segment tables read back from disk are not trusted: every value must be
    finite, every interval non-empty, and consecutive intervals must share
    their end points.

    Parameters
    ----------
    segments : Sequence[SplineSegment]
        Segments in increasing ``knot0`` order. May be empty.
    atol : float
        Largest allowed gap or overlap between ``knot1[i]`` and
        ``knot0[i + 1]``. Default is 0 (exact).
    dtype : torch.dtype
        Floating point type of the resulting tensors.

    Returns
    -------
    NaturalCubicSpline
        Spline with ``batch_size == (len(segments),)``.

    Raises
    ------
    NonFiniteValueError
        If any value is NaN or infinite.
    KnotError
        If a segment has ``knot0 >= knot1`` or two neighbours do not meet.
    """
    columns = torch.tensor(
        [
            [s.a, s.b, s.c, s.d, s.knot0, s.knot1]
            for s in segments
        ],
        dtype=dtype,
    ).reshape(-1, 6)

    if not torch.all(torch.isfinite(columns)):
        raise NonFiniteValueError("Segment values must be finite")

    a, b, c, d, knot0, knot1 = columns.unbind(dim=1)

    empty = ~(knot0 < knot1)
    if torch.any(empty):
        i = int(torch.nonzero(empty)[0])
        raise KnotError(
            f"Segment {i} has an empty interval [{knot0[i].item()}, {knot1[i].item()}]"
        )

    gaps = torch.abs(knot0[1:] - knot1[:-1]) > atol
    if torch.any(gaps):
        i = int(torch.nonzero(gaps)[0])
        raise KnotError(
            f"Segments {i} and {i + 1} are not adjacent: "
            f"knot1 = {knot1[i].item()}, knot0 = {knot0[i + 1].item()}"
        )

    # Lazy import to avoid circular dependency
    from ._natural_cubic_spline import NaturalCubicSpline

    return NaturalCubicSpline(
        a=a.clone(),
        b=b.clone(),
        c=c.clone(),
        d=d.clone(),
        knot0=knot0.clone(),
        knot1=knot1.clone(),
        batch_size=[columns.shape[0]],
    )
