from pathlib import Path
from typing import Union

from pandas import DataFrame

from ..spline import NaturalCubicSpline
from ._read_spline import COLUMNS


def write_spline(path: Union[str, Path], spline: NaturalCubicSpline) -> None:
    """Write one ``a,b,c,d,knot0,knot1`` row per segment, in order."""
    frame = DataFrame(
        {column: getattr(spline, column).tolist() for column in COLUMNS},
        columns=COLUMNS,
    )
    # %.17g keeps every double exact across a write/read round trip
    frame.to_csv(path, index=False, float_format="%.17g")
