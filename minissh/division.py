"""Integer division with a choice of rounding.

Every quotient ``q`` and remainder ``r`` satisfy ``n == q * d + r``. The
rounding mode decides the direction of ``q`` and hence the sign of ``r``:
ceiling division leaves a remainder of the opposite sign to ``d``, floor
division one of the same sign, and truncating division one of the sign of
``n``.
"""

from __future__ import annotations

import enum

__all__ = [
    "RoundMode",
    "div_qr",
    "cdiv_qr",
    "fdiv_qr",
    "tdiv_qr",
    "cdiv_q",
    "fdiv_q",
    "tdiv_q",
    "cdiv_r",
    "fdiv_r",
    "tdiv_r",
    "mod",
    "div_q_2exp",
    "div_r_2exp",
    "divexact",
    "divisible_p",
    "congruent_p",
]


class RoundMode(enum.Enum):
    """Direction in which a quotient is rounded."""

    FLOOR = "floor"
    CEIL = "ceil"
    TRUNC = "trunc"


def _integer(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    return value


def _mode(value: object) -> RoundMode:
    if not isinstance(value, RoundMode):
        raise TypeError(f"mode must be a RoundMode, not {type(value).__name__}")
    return value


def _bit_count(value: object) -> int:
    bits = _integer(value, "bits")
    if bits < 0:
        raise ValueError("bit count must not be negative")
    return bits


def _quotient(n: int, d: int, mode: RoundMode) -> int:
    if mode is RoundMode.FLOOR:
        return n // d
    if mode is RoundMode.CEIL:
        return -((-n) // d)
    magnitude = abs(n) // abs(d)
    return -magnitude if (n < 0) != (d < 0) else magnitude


def div_qr(n: int, d: int, mode: RoundMode) -> tuple[int, int]:
    """Divide ``n`` by ``d`` rounding as ``mode`` says; return ``(q, r)``.

    Raises ZeroDivisionError when ``d`` is zero.
    """
    n = _integer(n, "n")
    d = _integer(d, "d")
    mode = _mode(mode)
    if d == 0:
        raise ZeroDivisionError("division by zero")
    q = _quotient(n, d, mode)
    return q, n - q * d


def cdiv_qr(n: int, d: int) -> tuple[int, int]:
    """Quotient rounded towards plus infinity, and the remainder."""
    return div_qr(n, d, RoundMode.CEIL)


def fdiv_qr(n: int, d: int) -> tuple[int, int]:
    """Quotient rounded towards minus infinity, and the remainder."""
    return div_qr(n, d, RoundMode.FLOOR)


def tdiv_qr(n: int, d: int) -> tuple[int, int]:
    """Quotient rounded towards zero, and the remainder."""
    return div_qr(n, d, RoundMode.TRUNC)


def cdiv_q(n: int, d: int) -> int:
    """Quotient of ``n / d`` rounded towards plus infinity."""
    return div_qr(n, d, RoundMode.CEIL)[0]


def fdiv_q(n: int, d: int) -> int:
    """Quotient of ``n / d`` rounded towards minus infinity."""
    return div_qr(n, d, RoundMode.FLOOR)[0]


def tdiv_q(n: int, d: int) -> int:
    """Quotient of ``n / d`` rounded towards zero."""
    return div_qr(n, d, RoundMode.TRUNC)[0]


def cdiv_r(n: int, d: int) -> int:
    """Remainder of ceiling division of ``n`` by ``d``."""
    return div_qr(n, d, RoundMode.CEIL)[1]


def fdiv_r(n: int, d: int) -> int:
    """Remainder of floor division of ``n`` by ``d``."""
    return div_qr(n, d, RoundMode.FLOOR)[1]


def tdiv_r(n: int, d: int) -> int:
    """Remainder of truncating division of ``n`` by ``d``."""
    return div_qr(n, d, RoundMode.TRUNC)[1]


def mod(n: int, d: int) -> int:
    """Return ``n`` modulo ``d``; the result is never negative."""
    d = _integer(d, "d")
    mode = RoundMode.FLOOR if d >= 0 else RoundMode.CEIL
    return div_qr(n, d, mode)[1]


def div_q_2exp(u: int, bits: int, mode: RoundMode) -> int:
    """Divide ``u`` by two raised to ``bits``, rounding as ``mode`` says."""
    u = _integer(u, "u")
    bits = _bit_count(bits)
    mode = _mode(mode)
    return _quotient(u, 1 << bits, mode)


def div_r_2exp(u: int, bits: int, mode: RoundMode) -> int:
    """Remainder of dividing ``u`` by two raised to ``bits``."""
    u = _integer(u, "u")
    bits = _bit_count(bits)
    mode = _mode(mode)
    divisor = 1 << bits
    return u - _quotient(u, divisor, mode) * divisor


def divexact(n: int, d: int) -> int:
    """Return ``n / d`` where ``d`` is known to divide ``n``.

    Raises ValueError when the division leaves a remainder and
    ZeroDivisionError when ``d`` is zero.
    """
    q, r = div_qr(n, d, RoundMode.TRUNC)
    if r != 0:
        raise ValueError("division is not exact")
    return q


def divisible_p(n: int, d: int) -> bool:
    """Return True if ``d`` divides ``n``; ``d`` must not be zero."""
    return div_qr(n, d, RoundMode.TRUNC)[1] == 0


def congruent_p(a: int, b: int, m: int) -> bool:
    """Return True if ``a`` and ``b`` are congruent modulo ``m``.

    With ``m`` zero this holds only when ``a`` equals ``b``.
    """
    a = _integer(a, "a")
    b = _integer(b, "b")
    m = _integer(m, "m")
    if m == 0:
        return a == b
    return divisible_p(a - b, m)