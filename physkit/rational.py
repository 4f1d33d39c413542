"""Exact rational constants reduced to lowest terms."""

from __future__ import annotations

import enum
import math
import numbers


class Format(enum.Enum):
    """How a rational value is rendered as text."""

    FLOAT = "float"
    RAT = "rat"


def _as_int(value, what: str) -> int:
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{what} must be an integer, got {type(value).__name__}")


def _coerce(value) -> RationalConstant | None:
    if isinstance(value, RationalConstant):
        return value
    if isinstance(value, numbers.Integral):
        return RationalConstant(int(value))
    return None


class RationalConstant:
    """A fraction num/den with den > 0, always kept in lowest terms.

    Only integers may be used to build one; floating point values are refused.
    """

    __slots__ = ("_num", "_den")

    def __init__(self, num, den=1):
        n = _as_int(num, "numerator")
        d = _as_int(den, "denominator")
        if d == 0:
            raise ZeroDivisionError("RationalConstant denominator must be non-zero")
        if d < 0:
            n, d = -n, -d
        g = math.gcd(n, d)
        self._num = n // g
        self._den = d // g

    @property
    def num(self) -> int:
        return self._num

    @property
    def den(self) -> int:
        return self._den

    @classmethod
    def one(cls) -> RationalConstant:
        return cls(1)

    @classmethod
    def zero(cls) -> RationalConstant:
        return cls(0)

    def to_string(self, fmt: Format = Format.RAT) -> str:
        """Render as 'num/den' (or 'num' when den is 1), or as a float."""
        if fmt is Format.FLOAT:
            return f"{self._num / self._den:g}"
        if fmt is Format.RAT:
            if self._den == 1:
                return str(self._num)
            return f"{self._num}/{self._den}"
        raise ValueError(f"Unrecognized format for printing RationalConstant: {fmt!r}")

    def __neg__(self) -> RationalConstant:
        return RationalConstant(-self._num, self._den)

    def __pos__(self) -> RationalConstant:
        return self

    def __add__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return RationalConstant(self._num * o._den + self._den * o._num, self._den * o._den)

    __radd__ = __add__

    def __sub__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return RationalConstant(self._num * o._den - self._den * o._num, self._den * o._den)

    def __rsub__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return RationalConstant(self._num * o._num, self._den * o._den)

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return RationalConstant(self._num * o._den, self._den * o._num)

    def __rtruediv__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __pow__(self, p):
        if not isinstance(p, numbers.Integral):
            return NotImplemented
        return power(self, p)

    def __eq__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._num * o._den == self._den * o._num

    def __hash__(self) -> int:
        return hash((self._num, self._den))

    def __float__(self) -> float:
        return self._num / self._den

    def __repr__(self) -> str:
        return f"RationalConstant({self._num}, {self._den})"

    def __str__(self) -> str:
        return self.to_string()


def power(x, p) -> RationalConstant:
    """Raise x to the integer power p; 0^0 is refused."""
    base = _coerce(x)
    if base is None:
        raise TypeError(f"cannot raise {type(x).__name__} as a RationalConstant")
    exponent = _as_int(p, "exponent")
    if exponent < 0:
        return power(1 / base, -exponent)
    if exponent == 0:
        if base.num == 0:
            raise ValueError("0^0 is undefined")
        return RationalConstant.one()
    result = RationalConstant.one()
    while exponent:
        if exponent & 1:
            result = result * base
        base = base * base
        exponent >>= 1
    return result