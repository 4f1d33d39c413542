"""Cyclic reduction for diagonally dominant tridiagonal systems."""

from __future__ import annotations

import numbers

import numpy as np

from .tridiag_thomas import _prepare


def _lift(a: np.ndarray, x: np.ndarray) -> np.ndarray:
    """Add trailing axes to a so it broadcasts against rows of x."""
    return a.reshape(a.shape + (1,) * (x.ndim - a.ndim))


def _reduce_rows(dl, d, du, x, rows, offset):
    """Eliminate the neighbours at distance offset from the given rows."""
    nrow = d.shape[0]
    im = rows - offset
    ip = rows + offset
    im_ok = im >= 0
    ip_ok = ip < nrow
    im = np.where(im_ok, im, rows)
    ip = np.where(ip_ok, ip, rows)

    f1 = np.zeros_like(d[rows])
    f2 = np.zeros_like(d[rows])
    f1[im_ok] = -dl[rows[im_ok]] / d[im[im_ok]]
    f2[ip_ok] = -du[rows[ip_ok]] / d[ip[ip_ok]]

    new_dl = f1 * dl[im]
    new_du = f2 * du[ip]
    new_d = d[rows] + f1 * du[im] + f2 * dl[ip]
    new_x = x[rows] + _lift(f1, x) * x[im] + _lift(f2, x) * x[ip]

    dl[rows] = new_dl
    du[rows] = new_du
    d[rows] = new_d
    x[rows] = new_x


def _substitute_rows(dl, d, du, x, rows, offset):
    """Recover the given rows from the already solved rows offset away."""
    nrow = d.shape[0]
    im = rows - offset
    ip = rows + offset
    ip_ok = ip < nrow
    f = _lift(dl[rows], x) * x[im]
    f[ip_ok] += _lift(du[rows[ip_ok]], x) * x[ip[ip_ok]]
    x[rows] = (x[rows] - f) / _lift(d[rows], x)


def cr(dl, d, du, x, nthreads=1):
    """Solve A x = b by cyclic reduction and return the solution.

    The layouts are those of thomas: 1-D diagonals with a 1-D or 2-D x, or
    2-D diagonals (one matrix per column) with a 2-D x. The rows of each
    reduction level are shared out among nthreads workers, grouped into teams
    over the right-hand sides as a thread team would; the result does not
    depend on nthreads. Inexact ndarrays are worked on in place: x receives
    the solution and the diagonals are overwritten.
    """
    if (
        isinstance(nthreads, bool)
        or not isinstance(nthreads, numbers.Integral)
        or nthreads < 1
    ):
        raise ValueError(f"nthreads must be a positive integer, got {nthreads!r}")
    dl, d, du, x = _prepare(dl, d, du, x)
    nrow = d.shape[0]

    if x.ndim == 1:
        nteam = int(nthreads)
    else:
        team_size = max(1, min(x.shape[1], int(nthreads)))
        nteam = int(nthreads) // team_size

    # Go down the reduction; each level only after the previous is complete.
    offset = 1
    while 2 * offset < nrow:
        stride = 2 * offset
        for team in range(nteam):
            rows = np.arange(stride * team, nrow, stride * nteam)
            if rows.size:
                _reduce_rows(dl, d, du, x, rows, offset)
        offset *= 2

    # Bottom of the reduction: one row, or a 2x2 system of rows 0 and offset.
    if offset >= nrow:
        x[0] /= d[0]
    else:
        det = d[0] * d[offset] - du[0] * dl[offset]
        x0 = np.copy(x[0])
        x1 = np.copy(x[offset])
        x[0] = (d[offset] * x0 - du[0] * x1) / det
        x[offset] = (d[0] * x1 - dl[offset] * x0) / det

    # Go back up, filling in the rows eliminated at each level.
    offset //= 2
    while offset:
        stride = 2 * offset
        for team in range(nteam):
            rows = np.arange(stride * team + offset, nrow, stride * nteam)
            if rows.size:
                _substitute_rows(dl, d, du, x, rows, offset)
        offset //= 2

    return x