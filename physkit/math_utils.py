"""Small numeric helpers: invalid-value checks and C/Fortran layout transposes."""

from __future__ import annotations

import enum
import math

import numpy as np


class TransposeDirection(enum.Enum):
    """C2F makes the column index fastest; F2C makes the level index fastest."""

    C2F = "c2f"
    F2C = "f2c"


def is_invalid(a):
    """True where a floating point value is NaN (the invalid marker for floats)."""
    if isinstance(a, np.ndarray) and np.issubdtype(a.dtype, np.floating):
        return np.isnan(a)
    if isinstance(a, (float, np.floating)):
        return bool(math.isnan(a))
    raise TypeError(f"no invalid value is defined for {type(a).__name__}")


def rel_diff(a, b):
    """Relative difference |b - a| / |a|."""
    return abs(b - a) / abs(a)


def transpose(values, direction: TransposeDirection, ni: int, nk: int, nj: int | None = None):
    """Reorder flat data between C order and Fortran order.

    The logical shape is (ni, nk) or (ni, nk, nj). C2F reads C-ordered data
    and returns it Fortran-ordered; F2C does the reverse. Returns a new
    one-dimensional array.
    """
    if not isinstance(direction, TransposeDirection):
        raise TypeError("direction must be a TransposeDirection")
    shape = (ni, nk) if nj is None else (ni, nk, nj)
    flat = np.asarray(values).reshape(-1)
    if flat.size != math.prod(shape):
        raise ValueError(f"cannot arrange {flat.size} values as shape {shape}")
    if direction is TransposeDirection.C2F:
        result = flat.reshape(shape).ravel(order="F")
    else:
        result = flat.reshape(shape, order="F").ravel()
    return result.copy()