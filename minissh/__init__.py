"""Multi-precision integer helpers, Curve25519, AES-CBC/CTR ciphers and SSH channel state."""

__version__ = "0.1.0"

__all__ = [
    "arith",
    "division",
    "bits",
    "numtheory",
    "convert",
    "curve25519",
    "cipher",
    "channel",
]