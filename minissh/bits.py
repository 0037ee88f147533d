"""Bit operations on signed integers.

Negative numbers behave as two's complement with an infinite run of sign
bits. Where that leaves infinitely many bits to count, or no bit to find,
the functions return None.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "tstbit",
    "setbit",
    "clrbit",
    "combit",
    "com",
    "popcount",
    "hamdist",
    "scan0",
    "scan1",
]


def _integer(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    return value


def _bit_index(value: object, name: str) -> int:
    index = _integer(value, name)
    if index < 0:
        raise ValueError(f"{name} must not be negative")
    return index


def _lowest_set_bit(x: int) -> int:
    return (x & -x).bit_length() - 1


def tstbit(d: int, bit_index: int) -> int:
    """Return bit ``bit_index`` of ``d`` as 0 or 1."""
    d = _integer(d, "d")
    bit_index = _bit_index(bit_index, "bit_index")
    return (d >> bit_index) & 1


def setbit(d: int, bit_index: int) -> int:
    """Return ``d`` with bit ``bit_index`` set to one."""
    d = _integer(d, "d")
    bit_index = _bit_index(bit_index, "bit_index")
    return d | (1 << bit_index)


def clrbit(d: int, bit_index: int) -> int:
    """Return ``d`` with bit ``bit_index`` cleared to zero."""
    d = _integer(d, "d")
    bit_index = _bit_index(bit_index, "bit_index")
    return d & ~(1 << bit_index)


def combit(d: int, bit_index: int) -> int:
    """Return ``d`` with bit ``bit_index`` complemented."""
    d = _integer(d, "d")
    bit_index = _bit_index(bit_index, "bit_index")
    return d ^ (1 << bit_index)


def com(u: int) -> int:
    """Return the one's complement of ``u``, that is ``-(u + 1)``."""
    return ~_integer(u, "u")


def popcount(u: int) -> Optional[int]:
    """Count the one bits of ``u``; None when ``u`` is negative."""
    u = _integer(u, "u")
    if u < 0:
        return None
    return bin(u).count("1")


def hamdist(u: int, v: int) -> Optional[int]:
    """Count the bit positions where ``u`` and ``v`` differ.

    Returns None when the two have different signs, as they then differ in
    infinitely many positions.
    """
    u = _integer(u, "u")
    v = _integer(v, "v")
    if (u < 0) != (v < 0):
        return None
    return bin(u ^ v).count("1")


def scan1(u: int, starting_bit: int) -> Optional[int]:
    """Index of the first one bit at or above ``starting_bit``, or None."""
    u = _integer(u, "u")
    starting_bit = _bit_index(starting_bit, "starting_bit")
    rest = u >> starting_bit
    if rest == 0:
        return None
    return starting_bit + _lowest_set_bit(rest)


def scan0(u: int, starting_bit: int) -> Optional[int]:
    """Index of the first zero bit at or above ``starting_bit``, or None."""
    u = _integer(u, "u")
    starting_bit = _bit_index(starting_bit, "starting_bit")
    rest = ~u >> starting_bit
    if rest == 0:
        return None
    return starting_bit + _lowest_set_bit(rest)