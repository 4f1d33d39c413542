"""Thomas algorithm for diagonally dominant tridiagonal systems."""

from __future__ import annotations

import numpy as np


def _float_array(a) -> np.ndarray:
    """Return a as an inexact ndarray, reusing a when it already is one."""
    arr = np.asarray(a)
    if not np.issubdtype(arr.dtype, np.inexact):
        arr = arr.astype(float)
    return arr


def _prepare(dl, d, du, x):
    """Convert and check the three diagonals and the right-hand sides.

    The diagonals are 1-D (one matrix) or 2-D (one matrix per column of x).
    x is 1-D (one right-hand side) or 2-D (one right-hand side per column).
    """
    dl, d, du, x = (_float_array(a) for a in (dl, d, du, x))
    if d.ndim not in (1, 2):
        raise ValueError(f"diagonals must be 1-D or 2-D, got {d.ndim}-D")
    if dl.shape != d.shape or du.shape != d.shape:
        raise ValueError(
            f"diagonal shapes differ: dl {dl.shape}, d {d.shape}, du {du.shape}"
        )
    nrow = d.shape[0]
    if nrow == 0:
        raise ValueError("the system must have at least one row")
    if x.ndim not in (1, 2):
        raise ValueError(f"right-hand side must be 1-D or 2-D, got {x.ndim}-D")
    if x.shape[0] != nrow:
        raise ValueError(f"right-hand side has {x.shape[0]} rows, matrix has {nrow}")
    if d.ndim == 2:
        if x.ndim != 2:
            raise ValueError("several matrices need a 2-D right-hand side")
        if x.shape[1] != d.shape[1]:
            raise ValueError(
                f"{d.shape[1]} matrices but {x.shape[1]} right-hand sides"
            )
    return dl, d, du, x


def thomas(dl, d, du, x):
    """Solve A x = b with the Thomas algorithm and return the solution.

    A is given by its lower diagonal dl[1:], diagonal d and upper diagonal
    du[:-1]. On input x holds b. Three layouts are accepted: one matrix and
    one right-hand side (all 1-D); one matrix and several right-hand sides
    (1-D diagonals, x of shape (nrow, nrhs)); several matrices, matrix j
    solving column j (diagonals and x all of shape (nrow, nrhs)).

    Inexact ndarrays are worked on in place: x receives the solution and d is
    overwritten by the factorization. Other inputs are converted to float copies.
    """
    dl, d, du, x = _prepare(dl, d, du, x)
    nrow = d.shape[0]
    for i in range(1, nrow):
        factor = dl[i] / d[i - 1]
        d[i] -= factor * du[i - 1]
        x[i] -= factor * x[i - 1]
    x[nrow - 1] /= d[nrow - 1]
    for i in range(nrow - 1, 0, -1):
        x[i - 1] = (x[i - 1] - du[i - 1] * x[i]) / d[i - 1]
    return x