# minissh

Building blocks for a small SSH server, in plain Python:

- **Integer arithmetic** in the GMP style: rounding-mode division, bit
  operations on two's-complement integers, number theory and base conversion
  (`minissh.arith`, `minissh.division`, `minissh.bits`, `minissh.numtheory`,
  `minissh.convert`).
- **Curve25519** scalar multiplication for key exchange (`minissh.curve25519`).
- **AES block ciphers** in CBC and CTR modes, as SSH uses them
  (`minissh.cipher`).
- **Channel** state for an SSH session (`minissh.channel`).

## Installation

```
pip install minissh
```

To run the test suite, install the test extra:

```
pip install "minissh[test]"
pytest
```

## Arithmetic

Every function takes Python integers and returns new values; nothing is
changed in place. Passing something other than an `int` raises `TypeError`.

```python
from minissh import arith, division, bits, numtheory, convert

arith.add(7, -3)                 # 4
arith.cmpabs(-5, 4)              # 1
arith.mul_2exp(-3, 4)            # -48

division.fdiv_qr(-7, 2)          # (-4, 1)   rounds toward minus infinity
division.cdiv_qr(7, 2)           # (4, -1)   rounds toward plus infinity
division.tdiv_qr(-7, 2)          # (-3, -1)  rounds toward zero
division.mod(-7, 3)              # 2
division.div_q_2exp(-7, 1, division.RoundMode.FLOOR)  # -4

bits.tstbit(-1, 100)             # 1: negative numbers act as infinitely sign-extended
bits.popcount(0b1011)            # 3
bits.popcount(-1)                # None: infinitely many one bits
bits.scan1(0b1000, 0)            # 3

numtheory.gcdext(240, 46)        # (g, s, t) with g == s*240 + t*46
numtheory.invert(3, 11)          # 4
numtheory.powm(4, 13, 497)       # 445
numtheory.sqrtrem(10)            # (3, 1)
numtheory.binomial(5, 2)         # 10
numtheory.probab_prime_p(97, 25) # 2: certainly prime (1 probably, 0 composite)

convert.get_str(255, 16)         # "ff"
convert.set_str("0x1f", 0)       # 31
convert.export_bytes(0x0102, 1, 1, 1)  # b"\x01\x02"
convert.import_bytes(b"\x01\x02", 1, 1, 1)  # 258
convert.fits_slong_p(2**63)      # False: machine words are 64 bits
```

Division by zero, and `powm` with a zero modulus, raise `ZeroDivisionError`.
Arguments out of range raise `ValueError`: an even root of a negative number,
a non-invertible value passed to `invert`, an inexact `divexact`, a negative
bit count, or a string that `set_str` cannot parse.

## Curve25519

```python
from minissh.curve25519 import scalarmult_curve25519

base = bytes([9]) + bytes(31)
scalar = bytes(range(32))
public = scalarmult_curve25519(scalar, base)
```

Both arguments must be exactly 32 bytes (`ValueError` otherwise). The scalar
is clamped as the curve requires and the result is the canonical 32-byte
little-endian u-coordinate.

## Ciphers

```python
from minissh.cipher import CipherContext, CipherMode, CipherProps, CipherType

props = CipherProps("aes128-ctr", CipherType.AES, CipherMode.CTR, block_len=16, key_len=16)
key = bytes(range(16))
iv = bytes(16)

enc = CipherContext(props, decrypt=False)
enc.init(key, iv)
ciphertext = enc.encrypt(b"sixteen byte msg")

dec = CipherContext(props, decrypt=True)
dec.init(key, iv)
assert dec.decrypt(ciphertext) == b"sixteen byte msg"
```

`encrypt` and `decrypt` take any positive whole number of 16-byte blocks; other
lengths raise `ValueError`. The IV chains (CBC) or the counter advances (CTR)
from block to block and from one call to the next, so a message may be handled
in one call or in several. `init` must be called first (`RuntimeError`
otherwise); it needs at least `key_len` bytes of key and an IV of exactly one
block. Only AES with a 16-byte block is accepted.

## Channels

```python
from minissh.channel import Channel

channel = Channel(chid=0, win_size=2 * 1024 * 1024, packet_size=32768)
channel.eof()        # channel.eof_received is now True
channel.close()      # channel.closing is now True
```

The id, window size and packet size must fit in 32 unsigned bits. Both
`local_window_size` and `remote_window_size` start at `win_size`.

## What this package does not do

It is a set of pieces, not a server. There is no command to run, no network
listener, no SSH packet encoding, no key-exchange or authentication protocol,
no MAC or digest layer, no compression, and a `Channel` only records its state:
it does not open a terminal or start a shell.