"""Scaling factors of the form base^exp with rational base and exponent."""

from __future__ import annotations

import numbers

from .rational import Format, RationalConstant
from .rational import power as _rational_power


def _to_rational(value) -> RationalConstant:
    if isinstance(value, RationalConstant):
        return value
    if isinstance(value, numbers.Integral):
        return RationalConstant(int(value))
    raise TypeError(f"expected an integer or RationalConstant, got {type(value).__name__}")


def _coerce(value) -> ScalingFactor | None:
    if isinstance(value, ScalingFactor):
        return value
    if isinstance(value, (RationalConstant, numbers.Integral)):
        return ScalingFactor(value)
    return None


class ScalingFactor:
    """An exact value base^exp, with base and exp rational.

    0^0 and even roots of negative bases are refused; any x^0 is stored as 1^1.
    """

    __slots__ = ("_base", "_exp")

    def __init__(self, base, exp=1):
        b = _to_rational(base)
        e = _to_rational(exp)
        if b == 0 and e == 0:
            raise ValueError("ScalingFactor cannot represent 0^0")
        if b.num < 0 and e.den % 2 == 0:
            raise ValueError("ScalingFactor cannot take an even root of a negative base")
        if e == 0:
            b = e = RationalConstant.one()
        self._base = b
        self._exp = e

    @property
    def base(self) -> RationalConstant:
        return self._base

    @property
    def exp(self) -> RationalConstant:
        return self._exp

    @classmethod
    def one(cls) -> ScalingFactor:
        return cls(1)

    @classmethod
    def zero(cls) -> ScalingFactor:
        return cls(0)

    def to_string(self, fmt: Format = Format.RAT) -> str:
        text = self._base.to_string(fmt)
        if self._exp != RationalConstant.one():
            wrap = self._exp.den != 1 and fmt is Format.RAT
            exp_text = self._exp.to_string(fmt)
            text += f"^({exp_text})" if wrap else f"^{exp_text}"
        return text

    def __eq__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        # (a/b)^(c/d) == (x/y)^(w/z)  <=>  (a/b)^(cz) == (x/y)^(wd)
        return _rational_power(self._base, self._exp.num * o._exp.den) == _rational_power(
            o._base, o._exp.num * self._exp.den
        )

    __hash__ = None

    def __mul__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        if self._base == o._base:
            return ScalingFactor(self._base, self._exp + o._exp)
        if self._exp == o._exp:
            return ScalingFactor(self._base * o._base, self._exp)
        return ScalingFactor(
            _rational_power(self._base, self._exp.num * o._exp.den)
            * _rational_power(o._base, o._exp.num * self._exp.den),
            RationalConstant(1, self._exp.den * o._exp.den),
        )

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        if self._base == o._base:
            return ScalingFactor(self._base, self._exp - o._exp)
        if self._exp == o._exp:
            return ScalingFactor(self._base / o._base, self._exp)
        return ScalingFactor(
            _rational_power(self._base, self._exp.num * o._exp.den)
            / _rational_power(o._base, o._exp.num * self._exp.den),
            RationalConstant(1, self._exp.den * o._exp.den),
        )

    def __rtruediv__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __pow__(self, p):
        if not isinstance(p, (numbers.Integral, RationalConstant)):
            return NotImplemented
        return power(self, p)

    def __repr__(self) -> str:
        return f"ScalingFactor({self._base!r}, {self._exp!r})"

    def __str__(self) -> str:
        return self.to_string()


def power(x: ScalingFactor, p) -> ScalingFactor:
    """Raise a scaling factor to an integer or rational power."""
    return ScalingFactor(x.base, x.exp * _to_rational(p))


def sqrt(x: ScalingFactor) -> ScalingFactor:
    """Square root of a scaling factor."""
    return ScalingFactor(x.base, x.exp / 2)


NANO = ScalingFactor(10, -9)
MICRO = ScalingFactor(10, -6)
MILLI = ScalingFactor(10, -3)
CENTI = ScalingFactor(10, -2)
HECTO = ScalingFactor(10, 2)
KILO = ScalingFactor(10, 3)
MEGA = ScalingFactor(10, 6)
GIGA = ScalingFactor(10, 9)