"""Conversions between integers and strings, byte strings and floats.

It also has the checks and conversions for the machine-word range. A
machine word here is 64 bits wide, so ``unsigned long`` covers
``[0, 2**64)`` and ``long`` covers ``[-2**63, 2**63)``.
"""

from __future__ import annotations

import math
import sys

__all__ = [
    "sizeinbase",
    "get_str",
    "set_str",
    "import_bytes",
    "export_bytes",
    "get_d",
    "set_d",
    "cmpabs_d",
    "cmp_d",
    "get_ui",
    "get_si",
    "fits_ulong_p",
    "fits_slong_p",
]

_ULONG_BITS = 64
_ULONG_MAX = (1 << _ULONG_BITS) - 1
_LONG_MAX = (1 << (_ULONG_BITS - 1)) - 1
_LONG_MIN = -(1 << (_ULONG_BITS - 1))
_DBL_MANT_BITS = 53

_LOWER_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_MIXED_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_SPACE = " \t\n\v\f\r"


def _integer(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    return value


def _real(value: object, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a float, not {type(value).__name__}")
    return float(value)


def _digit_values(magnitude: int, base: int) -> list[int]:
    """Digits of a non-negative integer, most significant first."""
    if magnitude == 0:
        return [0]
    if base & (base - 1) == 0:
        width = base.bit_length() - 1
        count = -(-magnitude.bit_length() // width)
        mask = base - 1
        return [(magnitude >> (width * k)) & mask for k in reversed(range(count))]
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, base)
        digits.append(digit)
    digits.reverse()
    return digits


def sizeinbase(u: int, base: int) -> int:
    """Number of digits of ``|u|`` written in ``base`` (2 to 62).

    Zero has one digit.
    """
    u = _integer(u, "u")
    base = _integer(base, "base")
    if not 2 <= base <= 62:
        raise ValueError("base must be between 2 and 62")
    magnitude = abs(u)
    if magnitude == 0:
        return 1
    if base & (base - 1) == 0:
        width = base.bit_length() - 1
        return -(-magnitude.bit_length() // width)
    count = 0
    while magnitude:
        magnitude //= base
        count += 1
    return count


def get_str(u: int, base: int) -> str:
    """Write ``u`` in ``base``.

    Bases 2 to 36 use lower-case letters and bases 37 to 62 use upper case
    before lower case. A base from -2 to -36 uses upper-case letters, and a
    base from -1 to 1 means ten. Other bases raise ValueError.
    """
    u = _integer(u, "u")
    base = _integer(base, "base")
    alphabet = _MIXED_DIGITS
    if base > 1:
        if base <= 36:
            alphabet = _LOWER_DIGITS
        elif base > 62:
            raise ValueError("base must not exceed 62")
    elif base >= -1:
        base = 10
    else:
        base = -base
        if base > 36:
            raise ValueError("negative base must not be below -36")
    if u == 0:
        return "0"
    text = "".join(alphabet[digit] for digit in _digit_values(abs(u), base))
    return "-" + text if u < 0 else text


def _digit_of(char: str, base: int) -> int:
    value_of_a = 36 if base > 36 else 10
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "z":
        return ord(char) - ord("a") + value_of_a
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    return base


def set_str(s: str, base: int) -> int:
    """Parse ``s`` as an integer in ``base`` (0 or 2 to 62).

    Leading white space and a single minus sign are allowed; white space
    between digits is ignored. With base 0 the prefix picks the base:
    ``0x`` hexadecimal, ``0b`` binary, a leading ``0`` octal, and decimal
    otherwise. Raises ValueError for a string with no digits or with a digit
    that is not valid in the base.
    """
    if not isinstance(s, str):
        raise TypeError(f"s must be a str, not {type(s).__name__}")
    base = _integer(base, "base")
    if base != 0 and not 2 <= base <= 62:
        raise ValueError("base must be 0 or between 2 and 62")

    text = s.lstrip(_SPACE)
    negative = text.startswith("-")
    if negative:
        text = text[1:]

    if base == 0:
        if text.startswith("0"):
            prefix = text[1:2]
            if prefix in ("x", "X"):
                base = 16
                text = text[2:]
            elif prefix in ("b", "B"):
                base = 2
                text = text[2:]
            else:
                base = 8
        else:
            base = 10

    if not text:
        raise ValueError(f"no digits in {s!r}")

    value = 0
    seen_digit = False
    for char in text:
        if char in _SPACE:
            continue
        digit = _digit_of(char, base)
        if digit >= base:
            raise ValueError(f"invalid digit {char!r} for base {base}")
        value = value * base + digit
        seen_digit = True

    if not seen_digit:
        raise ValueError(f"no digits in {s!r}")
    return -value if negative else value


def _byte_layout(order: object, size: object, endian: object) -> tuple[int, int, str]:
    order = _integer(order, "order")
    size = _integer(size, "size")
    endian = _integer(endian, "endian")
    if order not in (1, -1):
        raise ValueError("order must be 1 or -1")
    if endian not in (1, 0, -1):
        raise ValueError("endian must be 1, 0 or -1")
    if endian == 0:
        byteorder = sys.byteorder
    else:
        byteorder = "big" if endian == 1 else "little"
    return order, size, byteorder


def import_bytes(data: bytes, order: int, size: int, endian: int) -> int:
    """Read a non-negative integer from words of ``size`` bytes.

    ``order`` 1 puts the most significant word first and -1 the least
    significant first. ``endian`` 1 is big-endian within each word, -1
    little-endian and 0 the host's byte order.
    """
    order, size, byteorder = _byte_layout(order, size, endian)
    if size < 1:
        raise ValueError("word size must be positive")
    data = bytes(data)
    if len(data) % size:
        raise ValueError("data length is not a multiple of the word size")
    words = [data[start:start + size] for start in range(0, len(data), size)]
    if order == -1:
        words.reverse()
    value = 0
    for word in words:
        value = (value << (8 * size)) | int.from_bytes(word, byteorder)
    return value


def export_bytes(u: int, order: int, size: int, endian: int) -> bytes:
    """Write ``|u|`` as words of ``size`` bytes, laid out as in import_bytes.

    Uses the fewest words that hold the value; zero gives no bytes.
    """
    u = _integer(u, "u")
    order, size, byteorder = _byte_layout(order, size, endian)
    magnitude = abs(u)
    if magnitude == 0:
        return b""
    if size < 1:
        raise ValueError("word size must be positive")
    nbytes = (magnitude.bit_length() + 7) // 8
    count = -(-nbytes // size)
    word_bits = 8 * size
    mask = (1 << word_bits) - 1
    words = [
        ((magnitude >> (word_bits * k)) & mask).to_bytes(size, byteorder)
        for k in range(count)
    ]
    if order == 1:
        words.reverse()
    return b"".join(words)


def get_d(u: int) -> float:
    """Convert ``u`` to a float, truncating towards zero.

    Values too large for a float give an infinity of the right sign.
    """
    u = _integer(u, "u")
    magnitude = abs(u)
    excess = magnitude.bit_length() - _DBL_MANT_BITS
    if excess > 0:
        magnitude = (magnitude >> excess) << excess
    try:
        x = float(magnitude)
    except OverflowError:
        x = math.inf
    return -x if u < 0 else x


def set_d(x: float) -> int:
    """Truncate ``x`` towards zero; NaN and infinities give zero."""
    x = _real(x, "x")
    if math.isnan(x) or math.isinf(x):
        return 0
    return int(x)


def _checked(d: object) -> float:
    value = _real(d, "d")
    if math.isnan(value):
        raise ValueError("cannot compare with NaN")
    return value


def cmpabs_d(x: int, d: float) -> int:
    """Compare ``|x|`` with ``|d|``: -1, 0 or 1."""
    x = _integer(x, "x")
    d = abs(_checked(d))
    a = abs(x)
    return (a > d) - (a < d)


def cmp_d(x: int, d: float) -> int:
    """Compare ``x`` with ``d`` exactly: -1, 0 or 1."""
    x = _integer(x, "x")
    d = _checked(d)
    return (x > d) - (x < d)


def get_ui(u: int) -> int:
    """The low machine word of ``|u|``."""
    return abs(_integer(u, "u")) & _ULONG_MAX


def get_si(u: int) -> int:
    """``u`` wrapped into the signed machine-word range.

    When ``u`` fits, this is ``u`` itself.
    """
    u = _integer(u, "u")
    low = abs(u) & _ULONG_MAX
    if u < 0:
        return -1 - (((low - 1) & _ULONG_MAX) & _LONG_MAX)
    return low & _LONG_MAX


def fits_ulong_p(u: int) -> bool:
    """True if ``u`` fits in an unsigned machine word."""
    u = _integer(u, "u")
    return 0 <= u <= _ULONG_MAX


def fits_slong_p(u: int) -> bool:
    """True if ``u`` fits in a signed machine word."""
    u = _integer(u, "u")
    return _LONG_MIN <= u <= _LONG_MAX