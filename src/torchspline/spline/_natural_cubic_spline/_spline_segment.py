from dataclasses import dataclass


@dataclass(frozen=True)
class SplineSegment:
    """One row of a segment table.

    The polynomial ``a*t^3 + b*t^2 + c*t + d`` is valid on the closed
    interval ``[knot0, knot1]``.
    """

    a: float
    b: float
    c: float
    d: float
    knot0: float
    knot1: float
