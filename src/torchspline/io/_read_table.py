from pathlib import Path
from typing import Sequence, Union

import pandas
from pandas import DataFrame

from ._table_error import TableError


def read_table(path: Union[str, Path], columns: Sequence[str]) -> DataFrame:
    """Read the named float columns of a CSV file, in file order."""
    try:
        frame = pandas.read_csv(path, sep=",", float_precision="round_trip")
    except pandas.errors.EmptyDataError:
        frame = DataFrame(columns=list(columns))
    except pandas.errors.ParserError as e:
        raise TableError(f"Failed to parse {path}: {e}") from e

    missing = [column for column in columns if column not in frame.columns]
    if missing:
        raise TableError(f"{path} is missing column(s): {', '.join(missing)}")

    try:
        return frame[list(columns)].astype(float)
    except ValueError as e:
        raise TableError(f"{path} holds a value that is not a number: {e}") from e
