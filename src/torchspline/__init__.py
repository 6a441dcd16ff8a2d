"""torchspline: natural cubic spline fitting and evaluation on PyTorch tensors."""

from . import (
    io,
    spline,
)

__all__ = [
    "io",
    "spline",
]

__version__ = "0.1.0"
