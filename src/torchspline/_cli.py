"""Command line interface: ``torchspline interpolate`` and ``torchspline evaluate``."""

import argparse
import sys
from typing import List, Optional

import torch

from .io import read_knots, read_spline, write_spline
from .spline import (
    SplineError,
    natural_cubic_spline_evaluate,
    natural_cubic_spline_fit,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="torchspline",
        description="Fit natural cubic splines to CSV knots and evaluate them.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    interpolate = commands.add_parser(
        "interpolate", help="fit a spline to an x,y knot table"
    )
    interpolate.add_argument("input_path", type=str, help="CSV knots with an x,y header")
    interpolate.add_argument("output_path", type=str, help="where to write the segment table")
    interpolate.add_argument(
        "--verbose", action="store_true", help="print the fitted segments to stderr"
    )

    evaluate = commands.add_parser(
        "evaluate", help="evaluate a segment table at query values"
    )
    evaluate.add_argument("input_path", type=str, help="segment table written by interpolate")
    evaluate.add_argument("values", type=float, nargs="+", help="query values")

    return parser


def run_interpolate(args: argparse.Namespace) -> None:
    x, y = read_knots(args.input_path)
    spline = natural_cubic_spline_fit(x, y)

    if args.verbose:
        for segment in spline.segments():
            print(segment, file=sys.stderr)

    write_spline(args.output_path, spline)


def run_evaluate(args: argparse.Namespace) -> None:
    spline = read_spline(args.input_path)
    values = torch.tensor(args.values, dtype=spline.a.dtype)
    results = natural_cubic_spline_evaluate(spline, values)

    for x, y in zip(values.tolist(), results.tolist()):
        print(f"S({x}) = {y}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "interpolate":
            run_interpolate(args)
        else:
            run_evaluate(args)
    except (SplineError, OSError) as e:
        parser.exit(1, f"{parser.prog}: error: {e}\n")

    return 0
