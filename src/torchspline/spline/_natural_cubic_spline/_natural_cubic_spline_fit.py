from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._input_too_small_error import InputTooSmallError
from .._knot_error import KnotError
from .._non_finite_value_error import NonFiniteValueError
from .._singular_system_error import SingularSystemError
from ._natural_cubic_spline_system import (
    PARAMETERS_PER_SEGMENT,
    natural_cubic_spline_system,
)

if TYPE_CHECKING:
    from ._natural_cubic_spline import NaturalCubicSpline


def natural_cubic_spline_fit(
    x: Tensor,
    y: Tensor,
) -> NaturalCubicSpline:
    """
    Fit a natural cubic spline to data points.

    Plain sequences are converted to float64 tensors.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n_points,). Must be sorted ascending with
        no repeated values. The fitter does not sort them.
    y : Tensor
        Values at knots, shape (n_points,). Cast to the dtype of x.

    Returns
    -------
    NaturalCubicSpline
        Fitted spline with ``n_points - 1`` segments.

    Raises
    ------
    KnotError
        If x and y are not 1-D with the same length, or x decreases
        anywhere.
    InputTooSmallError
        If fewer than 2 points are given.
    NonFiniteValueError
        If any coordinate is NaN or infinite.
    SingularSystemError
        If the constraint matrix is numerically singular, e.g. for
        repeated x or for knots far from the origin relative to their
        spacing.

    Warns
    -----
    RuntimeWarning
        If the constraint matrix is ill-conditioned.
    """
    if not isinstance(x, Tensor):
        x = torch.as_tensor(x, dtype=torch.float64)
    if not isinstance(y, Tensor):
        y = torch.as_tensor(y, dtype=torch.float64)

    if not x.is_floating_point():
        x = x.to(torch.get_default_dtype())
    y = y.to(dtype=x.dtype, device=x.device)

    if x.dim() != 1 or y.dim() != 1:
        raise KnotError(
            f"x and y must be 1-D, got shapes {tuple(x.shape)} and {tuple(y.shape)}"
        )
    if x.shape[0] != y.shape[0]:
        raise KnotError(
            f"x and y must have the same length, got {x.shape[0]} and {y.shape[0]}"
        )

    n = x.shape[0]

    if n < 2:
        raise InputTooSmallError(f"Need at least 2 points, got {n}")
    if not (torch.all(torch.isfinite(x)) and torch.all(torch.isfinite(y))):
        raise NonFiniteValueError("Knot coordinates must be finite")
    # Repeated x is left to the rank test below
    if not torch.all(x[1:] >= x[:-1]):
        raise KnotError("Knots must be sorted in increasing order of x")

    A, rhs = natural_cubic_spline_system(x, y)

    # Same rank tolerance as torch.linalg.matrix_rank
    singular_values = torch.linalg.svdvals(A)
    largest = singular_values[0]
    smallest = singular_values[-1]
    eps = torch.finfo(A.dtype).eps

    if smallest <= largest * A.shape[0] * eps:
        raise SingularSystemError(
            "Spline constraint matrix is numerically singular; check for repeated "
            "x positions, or shift and rescale x towards the origin"
        )

    condition = largest / smallest
    if condition > 1 / (A.shape[0] * eps**0.75):
        warnings.warn(
            f"Spline constraint matrix is ill-conditioned (cond = {condition.item():.2e}); "
            "coefficients may be inaccurate",
            RuntimeWarning,
            stacklevel=2,
        )

    solution, info = torch.linalg.solve_ex(A, rhs.unsqueeze(-1))

    if info.item() != 0 or not torch.all(torch.isfinite(solution)):
        raise SingularSystemError("Failed to solve the spline constraint matrix")

    coeffs = solution.squeeze(-1).view(n - 1, PARAMETERS_PER_SEGMENT)

    # Lazy import to avoid circular dependency
    from ._natural_cubic_spline import NaturalCubicSpline

    return NaturalCubicSpline(
        a=coeffs[:, 0],
        b=coeffs[:, 1],
        c=coeffs[:, 2],
        d=coeffs[:, 3],
        knot0=x[:-1].clone(),
        knot1=x[1:].clone(),
        batch_size=[n - 1],
    )
