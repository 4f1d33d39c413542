"""Rational constants, scaling factors, string helpers, tridiagonal solvers and linear interpolation."""

__version__ = "0.1.0"