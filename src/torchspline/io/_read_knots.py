from pathlib import Path
from typing import Tuple, Union

import torch
from torch import Tensor

from ..spline import KnotError, NonFiniteValueError
from ._read_table import read_table

COLUMNS = ["x", "y"]


def read_knots(
    path: Union[str, Path],
    dtype: torch.dtype = torch.float64,
) -> Tuple[Tensor, Tensor]:
    """
    Read knots from a CSV file with an ``x,y`` header.

    The knots are returned sorted by x, ready for natural_cubic_spline_fit.

    Parameters
    ----------
    path : str or Path
        CSV file to read.
    dtype : torch.dtype
        Floating point type of the returned tensors.

    Returns
    -------
    x, y : Tensor
        Knot coordinates, shape (n_knots,), sorted ascending by x.

    Raises
    ------
    TableError
        If the file lacks a column or holds a non-numeric cell.
    NonFiniteValueError
        If a coordinate is NaN or infinite.
    KnotError
        If two knots share an x position.
    """
    frame = read_table(path, COLUMNS)

    x = torch.tensor(frame["x"].to_numpy(), dtype=dtype)
    y = torch.tensor(frame["y"].to_numpy(), dtype=dtype)

    if not (torch.all(torch.isfinite(x)) and torch.all(torch.isfinite(y))):
        raise NonFiniteValueError(f"{path} holds a NaN or infinite knot coordinate")

    order = torch.argsort(x)
    x = x[order]
    y = y[order]

    duplicate = x[1:] == x[:-1]
    if torch.any(duplicate):
        i = int(torch.nonzero(duplicate)[0])
        raise KnotError(f"{path} has duplicate knot x position {x[i].item()}")

    return x, y
