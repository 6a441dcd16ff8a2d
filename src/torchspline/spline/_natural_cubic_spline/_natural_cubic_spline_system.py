from typing import Tuple

import torch
from torch import Tensor

CONSTRAINTS_PER_SEGMENT = 4
PARAMETERS_PER_SEGMENT = 4


def natural_cubic_spline_system(x: Tensor, y: Tensor) -> Tuple[Tensor, Tensor]:
    """
    Assemble the dense linear system for a natural cubic spline.

    The unknowns are the coefficients ``[a, b, c, d]`` of every segment,
    stacked in segment order, so the system has size ``4 * (n - 1)``.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n,). Sorted, distinct, n >= 2.
    y : Tensor
        Knot values, shape (n,).

    Returns
    -------
    A : Tensor
        Constraint matrix, shape (4 * (n - 1), 4 * (n - 1)).
    rhs : Tensor
        Right-hand side, shape (4 * (n - 1),).

    Notes
    -----
    For segment i spanning (x0, y0) to (x1, y1) the rows are::

        a*x0^3 + b*x0^2 + c*x0 + d = y0
        a*x1^3 + b*x1^2 + c*x1 + d = y1
        S_i'(x1) - S_{i+1}'(x1) = 0      (all but the last segment)
        S_i''(x1) - S_{i+1}''(x1) = 0    (all but the last segment)

    The last segment's two free rows hold the natural boundary conditions
    ``S''(x[0]) = 0`` and ``S''(x[-1]) = 0``.
    """
    n_segments = x.shape[0] - 1
    n_rows = n_segments * CONSTRAINTS_PER_SEGMENT
    n_cols = n_segments * PARAMETERS_PER_SEGMENT

    A = torch.zeros(n_rows, n_cols, dtype=x.dtype, device=x.device)
    rhs = torch.zeros(n_rows, dtype=y.dtype, device=y.device)

    for i in range(n_segments):
        x0, x1 = x[i], x[i + 1]
        row = i * CONSTRAINTS_PER_SEGMENT
        col = i * PARAMETERS_PER_SEGMENT

        # S_i(x0) = y0
        A[row, col] = x0**3
        A[row, col + 1] = x0**2
        A[row, col + 2] = x0
        A[row, col + 3] = 1.0
        rhs[row] = y[i]

        # S_i(x1) = y1
        A[row + 1, col] = x1**3
        A[row + 1, col + 1] = x1**2
        A[row + 1, col + 2] = x1
        A[row + 1, col + 3] = 1.0
        rhs[row + 1] = y[i + 1]

        if i < n_segments - 1:
            col_next = col + PARAMETERS_PER_SEGMENT

            # S_i'(x1) - S_{i+1}'(x1) = 0
            A[row + 2, col] = 3 * x1**2
            A[row + 2, col + 1] = 2 * x1
            A[row + 2, col + 2] = 1.0
            A[row + 2, col_next] = -3 * x1**2
            A[row + 2, col_next + 1] = -2 * x1
            A[row + 2, col_next + 2] = -1.0

            # S_i''(x1) - S_{i+1}''(x1) = 0
            A[row + 3, col] = 6 * x1
            A[row + 3, col + 1] = 2.0
            A[row + 3, col_next] = -6 * x1
            A[row + 3, col_next + 1] = -2.0

    # S_0''(x[0]) = 0
    A[n_rows - 2, 0] = 6 * x[0]
    A[n_rows - 2, 1] = 2.0

    # S_{n-2}''(x[-1]) = 0
    A[n_rows - 1, n_cols - 4] = 6 * x[-1]
    A[n_rows - 1, n_cols - 3] = 2.0

    return A, rhs
