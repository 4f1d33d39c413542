"""Tridiagonal solver whose answers do not depend on how the work is split."""

from __future__ import annotations

import numpy as np

from .tridiag_thomas import _float_array, _prepare


def _factorize(dl: np.ndarray, d: np.ndarray, du: np.ndarray) -> None:
    for i in range(1, d.shape[0]):
        dl[i] /= d[i - 1]
        d[i] -= dl[i] * du[i - 1]


def _solve(dl: np.ndarray, d: np.ndarray, du: np.ndarray, x: np.ndarray) -> None:
    nrow = d.shape[0]
    if x.ndim > dl.ndim:
        dl, d, du = (a.reshape(a.shape + (1,) * (x.ndim - a.ndim)) for a in (dl, d, du))
    for i in range(1, nrow):
        x[i] -= dl[i] * x[i - 1]
    x[nrow - 1] /= d[nrow - 1]
    for i in range(nrow - 1, 0, -1):
        x[i - 1] = (x[i - 1] - du[i - 1] * x[i]) / d[i - 1]


def bfb(dl, d, du, x):
    """Solve A x = b so that every right-hand side gets bit-identical answers.

    Each right-hand side is solved by exactly the same sequence of operations
    as it would be on its own, so the result does not depend on how many
    columns are solved together. The layouts are those of thomas; in addition,
    2-D diagonals with a single column are used as one matrix for every
    column of a 2-D x. Inexact ndarrays are worked on in place: x receives the
    solution and dl and d are overwritten by the factorization.
    """
    dl, d, du, x = (_float_array(a) for a in (dl, d, du, x))
    if d.ndim == 2 and d.shape[1] == 1 and x.ndim == 2 and x.shape[1] > 1:
        if dl.shape != d.shape or du.shape != d.shape:
            raise ValueError(
                f"diagonal shapes differ: dl {dl.shape}, d {d.shape}, du {du.shape}"
            )
        dl, d, du = dl[:, 0], d[:, 0], du[:, 0]
    dl, d, du, x = _prepare(dl, d, du, x)
    _factorize(dl, d, du)
    _solve(dl, d, du, x)
    return x