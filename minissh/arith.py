"""Signed arbitrary-precision integer arithmetic.

Comparisons return -1, 0 or 1. Every other function returns a new integer
and leaves its arguments unchanged.
"""

from __future__ import annotations

__all__ = [
    "sgn",
    "cmp",
    "cmpabs",
    "add",
    "sub",
    "mul",
    "mul_2exp",
    "addmul",
    "submul",
    "absolute",
    "neg",
]


def _integer(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    return value


def _sign_of(value: int) -> int:
    return (value > 0) - (value < 0)


def sgn(u: int) -> int:
    """Return 1, 0 or -1 according to the sign of ``u``."""
    return _sign_of(_integer(u, "u"))


def cmp(a: int, b: int) -> int:
    """Compare ``a`` with ``b``: -1 if less, 0 if equal, 1 if greater."""
    a = _integer(a, "a")
    b = _integer(b, "b")
    return (a > b) - (a < b)


def cmpabs(u: int, v: int) -> int:
    """Compare the absolute values of ``u`` and ``v``."""
    mu = abs(_integer(u, "u"))
    mv = abs(_integer(v, "v"))
    return (mu > mv) - (mu < mv)


def absolute(u: int) -> int:
    """Return the absolute value of ``u``."""
    return abs(_integer(u, "u"))


def neg(u: int) -> int:
    """Return ``-u``."""
    return -_integer(u, "u")


def add(a: int, b: int) -> int:
    """Return ``a + b``."""
    return _integer(a, "a") + _integer(b, "b")


def sub(a: int, b: int) -> int:
    """Return ``a - b``."""
    return _integer(a, "a") - _integer(b, "b")


def mul(u: int, v: int) -> int:
    """Return ``u * v``."""
    u = _integer(u, "u")
    v = _integer(v, "v")
    if u == 0 or v == 0:
        return 0
    return u * v


def mul_2exp(u: int, bits: int) -> int:
    """Return ``u`` multiplied by two raised to ``bits``.

    ``bits`` is a bit count and must not be negative.
    """
    u = _integer(u, "u")
    bits = _integer(bits, "bits")
    if bits < 0:
        raise ValueError("bit count must not be negative")
    if u == 0:
        return 0
    magnitude = abs(u) << bits
    return -magnitude if u < 0 else magnitude


def addmul(r: int, u: int, v: int) -> int:
    """Return ``r + u * v``."""
    return add(r, mul(u, v))


def submul(r: int, u: int, v: int) -> int:
    """Return ``r - u * v``."""
    return sub(r, mul(u, v))