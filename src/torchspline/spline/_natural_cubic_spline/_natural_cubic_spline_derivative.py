import torch

from ._natural_cubic_spline import NaturalCubicSpline


def natural_cubic_spline_derivative(
    spline: NaturalCubicSpline,
    order: int = 1,
) -> NaturalCubicSpline:
    """
    Compute the derivative of a natural cubic spline.

    Parameters
    ----------
    spline : NaturalCubicSpline
        Input spline
    order : int
        Order of derivative (1, 2, or 3). Default is 1.

    Returns
    -------
    derivative : NaturalCubicSpline
        A new spline over the same segments holding the derivative
        polynomial in the same global power form.

    Raises
    ------
    ValueError
        If order is not 1, 2, or 3.

    Notes
    -----
    For y = a*t^3 + b*t^2 + c*t + d:
    - First derivative: 3a*t^2 + 2b*t + c  (coefficients: [0, 3a, 2b, c])
    - Second derivative: 6a*t + 2b  (coefficients: [0, 0, 6a, 2b])
    - Third derivative: 6a  (coefficients: [0, 0, 0, 6a])
    """
    if order < 1 or order > 3:
        raise ValueError(f"Derivative order must be 1, 2, or 3, got {order}")

    a = spline.a
    b = spline.b
    c = spline.c
    zero = torch.zeros_like(a)

    if order == 1:
        new_a, new_b, new_c, new_d = zero, 3 * a, 2 * b, c
    elif order == 2:
        new_a, new_b, new_c, new_d = zero, zero, 6 * a, 2 * b
    else:  # order == 3
        new_a, new_b, new_c, new_d = zero, zero, zero, 6 * a

    return NaturalCubicSpline(
        a=new_a,
        b=new_b,
        c=new_c,
        d=new_d,
        knot0=spline.knot0.clone(),
        knot1=spline.knot1.clone(),
        batch_size=spline.batch_size,
    )
