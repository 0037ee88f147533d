"""Block ciphers for the transport layer: AES in CBC and CTR modes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

__all__ = ["CipherType", "CipherMode", "CipherProps", "CipherContext"]

AES_BLOCK_SIZE = 16


class CipherType(enum.Enum):
    """Block cipher algorithm."""

    AES = "aes"


class CipherMode(enum.Enum):
    """Mode of operation."""

    CBC = "cbc"
    CTR = "ctr"


@dataclass(frozen=True)
class CipherProps:
    """Description of a negotiable cipher."""

    name: str
    type: CipherType
    mode: CipherMode
    block_len: int
    key_len: int


class CipherContext:
    """State of one direction of a cipher: key, IV or counter, and mode."""

    def __init__(self, props: CipherProps, decrypt: bool) -> None:
        if not isinstance(props, CipherProps):
            raise TypeError("props must be a CipherProps")
        if props.type is not CipherType.AES:
            raise ValueError(f"unsupported cipher type: {props.type!r}")
        if props.block_len != AES_BLOCK_SIZE:
            raise ValueError(f"AES block length must be {AES_BLOCK_SIZE}")
        self.props = props
        self.decrypt_direction = bool(decrypt)
        self.iv: Optional[bytearray] = None
        self._transform = None

    @property
    def block_len(self) -> int:
        return self.props.block_len

    def init(self, key: bytes, iv: bytes) -> None:
        """Set the key and the IV (or initial counter) and ready the cipher.

        The first ``key_len`` bytes of ``key`` are used. CTR mode always runs
        the block cipher forwards, whichever direction this context is for.
        """
        if not key or len(key) < self.props.key_len or self.props.key_len == 0:
            raise ValueError("key is missing or too short")
        if iv is None or len(iv) != self.block_len:
            raise ValueError(f"iv must be {self.block_len} bytes long")
        backwards = self.decrypt_direction and self.props.mode is not CipherMode.CTR
        block = Cipher(algorithms.AES(bytes(key[: self.props.key_len])), modes.ECB())
        self._transform = block.decryptor() if backwards else block.encryptor()
        self.iv = bytearray(iv)

    def _blocks(self, data: bytes):
        if self._transform is None or self.iv is None:
            raise RuntimeError("cipher is not initialised")
        data = bytes(data)
        size = self.block_len
        if not data or len(data) % size:
            raise ValueError(f"data must be a positive multiple of {size} bytes")
        for start in range(0, len(data), size):
            yield data[start : start + size]

    def _process(self, block: bytes) -> bytes:
        return self._transform.update(block)

    def _next_keystream(self) -> bytes:
        stream = self._process(bytes(self.iv))
        counter = (int.from_bytes(self.iv, "big") + 1) % (1 << (8 * self.block_len))
        self.iv = bytearray(counter.to_bytes(self.block_len, "big"))
        return stream

    @staticmethod
    def _xor(a: bytes, b: bytes) -> bytes:
        return bytes(x ^ y for x, y in zip(a, b))

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt whole blocks, carrying the chaining state across calls."""
        out = bytearray()
        for block in self._blocks(data):
            if self.props.mode is CipherMode.CBC:
                result = self._process(self._xor(self.iv, block))
                self.iv = bytearray(result)
            else:
                result = self._xor(block, self._next_keystream())
            out += result
        return bytes(out)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt whole blocks, carrying the chaining state across calls."""
        out = bytearray()
        for block in self._blocks(data):
            if self.props.mode is CipherMode.CBC:
                result = self._xor(self._process(block), self.iv)
                self.iv = bytearray(block)
            else:
                result = self._xor(block, self._next_keystream())
            out += result
        return bytes(out)