"""Linear interpolation of column data between two coordinate sets."""

from __future__ import annotations

import bisect
from typing import Sequence

import numpy as np


def upper_bound(values: Sequence, value) -> int:
    """Index of the first element of the sorted values greater than value."""
    return bisect.bisect_right(values, value)


class LinInterp:
    """Interpolates many fields from coordinates x1 onto coordinates x2.

    Each of ncol columns has km1 source points and km2 target points. Call
    setup once per column to build the index map, then lin_interp any number
    of times with the same coordinates. Targets outside the source range are
    extrapolated from the nearest pair of points.
    """

    def __init__(self, ncol: int, km1: int, km2: int):
        if ncol < 1:
            raise ValueError(f"ncol must be positive, got {ncol}")
        if km1 < 2:
            raise ValueError(f"km1 must be at least 2, got {km1}")
        if km2 < 1:
            raise ValueError(f"km2 must be positive, got {km2}")
        self._ncol = ncol
        self._km1 = km1
        self._km2 = km2
        self._indx_map = np.zeros((ncol, km2), dtype=int)

    @property
    def ncol(self) -> int:
        return self._ncol

    @property
    def km1(self) -> int:
        return self._km1

    @property
    def km2(self) -> int:
        return self._km2

    @property
    def index_map(self) -> np.ndarray:
        """For every column and target point, the source index at or below it."""
        return self._indx_map.copy()

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self._ncol:
            raise IndexError(f"column {col} out of range [0, {self._ncol})")

    def _take(self, values, count: int, what: str) -> np.ndarray:
        arr = np.asarray(values, dtype=float).reshape(-1)
        if arr.size < count:
            raise ValueError(f"{what} has {arr.size} values, at least {count} needed")
        return arr[:count]

    def setup(self, col: int, x1, x2) -> None:
        """Build the index map of column col; x1 must be sorted ascending."""
        self._check_col(col)
        x1 = self._take(x1, self._km1, "x1")
        x2 = self._take(x2, self._km2, "x2")
        idx = np.searchsorted(x1, x2, side="right")
        self._indx_map[col] = np.where(idx > 0, idx - 1, idx)

    def lin_interp(self, col: int, x1, x2, y1) -> np.ndarray:
        """Interpolate y1(x1) onto x2 for column col and return y2."""
        self._check_col(col)
        x1 = self._take(x1, self._km1, "x1")
        x2 = self._take(x2, self._km2, "x2")
        y1 = self._take(y1, self._km1, "y1")
        k1 = self._indx_map[col]
        # Step forward to the next point, or backward from the last one.
        k1ph = np.where(k1 == self._km1 - 1, k1 - 1, k1 + 1)
        x1_k1 = x1[k1]
        y1_k1 = y1[k1]
        y2 = y1[k1ph] - y1_k1
        y2 *= x2 - x1_k1
        y2 /= x1[k1ph] - x1_k1
        y2 += y1_k1
        return y2