"""Natural cubic spline interpolation."""

from typing import Callable, List

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._natural_cubic_spline_evaluate import natural_cubic_spline_evaluate
from ._natural_cubic_spline_fit import natural_cubic_spline_fit
from ._spline_segment import SplineSegment


@tensorclass
class NaturalCubicSpline:
    """Piecewise cubic polynomial interpolant with natural boundaries.

    A spline of ``n_segments`` segments has ``batch_size == (n_segments,)``
    and every field has shape ``(n_segments,)``. Indexing ``spline[i]``
    yields the i-th segment as a ``NaturalCubicSpline`` with
    ``batch_size == ()``.

    Attributes
    ----------
    a, b, c, d : Tensor
        Polynomial coefficients in global power form. On segment i the
        spline is ``a[i]*t^3 + b[i]*t^2 + c[i]*t + d[i]``.
    knot0 : Tensor
        Left end of each segment's closed interval.
    knot1 : Tensor
        Right end of each segment's closed interval. Segments are ordered
        and adjacent: ``knot1[i] == knot0[i + 1]``.
    """

    a: Tensor
    b: Tensor
    c: Tensor
    d: Tensor
    knot0: Tensor
    knot1: Tensor

    def segments(self) -> List[SplineSegment]:
        """Return the segments as plain records, in order."""
        columns = zip(
            self.a.tolist(),
            self.b.tolist(),
            self.c.tolist(),
            self.d.tolist(),
            self.knot0.tolist(),
            self.knot1.tolist(),
        )
        return [SplineSegment(*row) for row in columns]


def natural_cubic_spline(
    x: torch.Tensor,
    y: torch.Tensor,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a natural cubic spline interpolator from data.

    This is a convenience function that fits a natural cubic spline and
    returns a callable that evaluates it.

    Parameters
    ----------
    x : Tensor
        Knot x-coordinates, shape (n_knots,). Must be sorted and distinct.
    y : Tensor
        Knot y-values, shape (n_knots,).

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given points.

    Examples
    --------
    >>> import torch
    >>> x = torch.tensor([0.0, 0.5, 0.8, 1.0], dtype=torch.float64)
    >>> y = torch.tensor([10.0, 8.0, 5.0, 6.0], dtype=torch.float64)
    >>> f = natural_cubic_spline(x, y)
    >>> f(torch.tensor([0.6], dtype=torch.float64))
    """
    fitted = natural_cubic_spline_fit(x, y)
    return lambda t: natural_cubic_spline_evaluate(fitted, t)
