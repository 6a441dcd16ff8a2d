"""CSV tables of knots and spline segments.

Functions
---------
read_knots
    Read ``x,y`` knots, sorted and checked for duplicates.
read_spline
    Read and revalidate an ``a,b,c,d,knot0,knot1`` segment table.
write_spline
    Write a segment table.

Exceptions
----------
TableError
    Missing column or unparsable cell.
"""

from ._read_knots import read_knots
from ._read_spline import read_spline
from ._table_error import TableError
from ._write_spline import write_spline

__all__ = [
    "TableError",
    "read_knots",
    "read_spline",
    "write_spline",
]
