"""Curve25519 scalar multiplication on Montgomery u-coordinates."""

from __future__ import annotations

__all__ = ["scalarmult_curve25519"]

_P = 2**255 - 19
_A24 = 121665
_KEY_BYTES = 32


def _as_bytes(value: object, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes, not {type(value).__name__}")
    data = bytes(value)
    if len(data) != _KEY_BYTES:
        raise ValueError(f"{name} must be {_KEY_BYTES} bytes long")
    return data


def _clamp(scalar: bytes) -> int:
    k = bytearray(scalar)
    k[0] &= 248
    k[31] &= 127
    k[31] |= 64
    return int.from_bytes(k, "little")


def scalarmult_curve25519(scalar: bytes, point: bytes) -> bytes:
    """Multiply the u-coordinate ``point`` by the clamped ``scalar``.

    Both arguments are 32 little-endian bytes. All 256 bits of the point
    are used, so a set top bit adds 2**255 before reduction modulo the
    field prime. The result is the canonical 32-byte u-coordinate.
    """
    k = _clamp(_as_bytes(scalar, "scalar"))
    x1 = int.from_bytes(_as_bytes(point, "point"), "little") % _P

    x2, z2 = 1, 0
    x3, z3 = x1, 1
    swap = 0
    for position in range(254, -1, -1):
        bit = (k >> position) & 1
        swap ^= bit
        if swap:
            x2, x3 = x3, x2
            z2, z3 = z3, z2
        swap = bit

        a = (x2 + z2) % _P
        aa = a * a % _P
        b = (x2 - z2) % _P
        bb = b * b % _P
        e = (aa - bb) % _P
        c = (x3 + z3) % _P
        d = (x3 - z3) % _P
        da = d * a % _P
        cb = c * b % _P
        x3 = (da + cb) ** 2 % _P
        z3 = x1 * (da - cb) ** 2 % _P
        x2 = aa * bb % _P
        z2 = e * (aa + _A24 * e) % _P

    if swap:
        x2, x3 = x3, x2
        z2, z3 = z3, z2

    result = x2 * pow(z2, _P - 2, _P) % _P
    return result.to_bytes(_KEY_BYTES, "little")