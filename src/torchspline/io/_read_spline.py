from pathlib import Path
from typing import Union

import torch

from ..spline import (
    NaturalCubicSpline,
    SplineSegment,
    natural_cubic_spline_from_segments,
)
from ._read_table import read_table

COLUMNS = ["a", "b", "c", "d", "knot0", "knot1"]


def read_spline(
    path: Union[str, Path],
    atol: float = 0.0,
    dtype: torch.dtype = torch.float64,
) -> NaturalCubicSpline:
    """
    Read a segment table written by write_spline.

    Rows are kept in file order and the result is revalidated with
    natural_cubic_spline_from_segments, so a table that was edited into
    something other than a contiguous spline is rejected here rather than
    mis-evaluated later.

    Raises
    ------
    TableError
        If the file lacks a column or holds a non-numeric cell.
    NonFiniteValueError
        If a value is NaN or infinite.
    KnotError
        If the segments are unordered, empty, or not adjacent.
    """
    frame = read_table(path, COLUMNS)

    segments = [
        SplineSegment(*row) for row in frame.itertuples(index=False, name=None)
    ]

    return natural_cubic_spline_from_segments(segments, atol=atol, dtype=dtype)
