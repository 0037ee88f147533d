"""Number-theoretic functions on arbitrary-precision integers.

Greatest common divisors, modular inverses and powers, integer roots,
factorials and binomial coefficients, and a probabilistic primality test
(Baillie-PSW followed by extra Miller-Rabin rounds).
"""

from __future__ import annotations

import math

from .division import divexact, mod, tdiv_q, tdiv_r

__all__ = [
    "gcd",
    "gcdext",
    "lcm",
    "invert",
    "pow_ui",
    "powm",
    "rootrem",
    "root",
    "sqrtrem",
    "sqrt",
    "perfect_square_p",
    "mfac",
    "double_factorial",
    "factorial",
    "binomial",
    "probab_prime_p",
]

# Product of the odd primes up to 29; fits in 32 bits.
_PRIME_PRODUCT = 3 * 5 * 7 * 11 * 13 * 17 * 19 * 23 * 29
# Bit (p + 1) / 2 is set for each odd prime p not above 61.
_PRIME_MASK = 0xC96996DC
_LIMB_MAX = (1 << 64) - 1


def _integer(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    return value


def _unsigned(value: object, name: str) -> int:
    number = _integer(value, name)
    if number < 0:
        raise ValueError(f"{name} must not be negative")
    return number


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _ctz(value: int) -> int:
    """Number of trailing zero bits of a non-zero integer."""
    return (value & -value).bit_length() - 1


def gcd(u: int, v: int) -> int:
    """Return the non-negative greatest common divisor of ``u`` and ``v``."""
    return math.gcd(_integer(u, "u"), _integer(v, "v"))


def gcdext(u: int, v: int) -> tuple[int, int, int]:
    """Return ``(g, s, t)`` with ``g = gcd(u, v) = s * u + t * v``.

    The cofactors are reduced so that they are as small as the binary
    algorithm allows; with ``u`` zero they are ``(0, sgn(v))`` and with
    ``v`` zero ``(sgn(u), 0)``.
    """
    u = _integer(u, "u")
    v = _integer(v, "v")
    if u == 0:
        return abs(v), 0, _sign(v)
    if v == 0:
        return abs(u), _sign(u), 0

    tu = abs(u)
    uz = _ctz(tu)
    tu >>= uz
    tv = abs(v)
    vz = _ctz(tv)
    tv >>= vz
    gz = min(uz, vz)
    uz -= gz
    vz -= gz

    swapped = tu < tv
    if swapped:
        tu, tv = tv, tu
        u, v = v, u
        uz, vz = vz, uz

    # Maintained: u = t0 tu + t1 tv and v = s0 tu + s1 tv, up to 2^power.
    t0 = 1 << uz
    t1, tu = divmod(tu, tv)
    t1 <<= uz
    s0 = 0
    s1 = 1 << vz
    power = uz + vz

    if tu > 0:
        shift = _ctz(tu)
        tu >>= shift
        t0 <<= shift
        s0 <<= shift
        power += shift
        while tu != tv:
            if tu < tv:
                tv -= tu
                t0 += t1
                s0 += s1
                shift = _ctz(tv)
                tv >>= shift
                t1 <<= shift
                s1 <<= shift
            else:
                tu -= tv
                t1 += t0
                s1 += s0
                shift = _ctz(tu)
                tu >>= shift
                t0 <<= shift
                s0 <<= shift
            power += shift

    g = tv << gz
    s0 = -s0
    s1 = abs(divexact(v, g))
    t1 = abs(divexact(u, g))

    for _ in range(power):
        if s0 & 1 or t0 & 1:
            s0 -= s1
            t0 += t1
        s0 >>= 1
        t0 >>= 1

    s1 = s0 + s1
    if abs(s0) > abs(s1):
        s0 = s1
        t0 -= t1
    if u < 0:
        s0 = -s0
    if v < 0:
        t0 = -t0

    if swapped:
        return g, t0, s0
    return g, s0, t0


def lcm(u: int, v: int) -> int:
    """Return the non-negative least common multiple of ``u`` and ``v``."""
    u = _integer(u, "u")
    v = _integer(v, "v")
    if u == 0 or v == 0:
        return 0
    return abs(divexact(u, math.gcd(u, v)) * v)


def invert(u: int, m: int) -> int:
    """Return the inverse of ``u`` modulo ``m``, in ``[0, |m|)``.

    Raises ValueError when no inverse exists, which includes ``u`` zero and
    ``|m|`` of at most one.
    """
    u = _integer(u, "u")
    m = _integer(m, "m")
    if u == 0 or abs(m) <= 1:
        raise ValueError("not invertible")
    g, s, _ = gcdext(u, m)
    if g != 1:
        raise ValueError("not invertible")
    if s < 0:
        s += abs(m)
    return s


def pow_ui(b: int, e: int) -> int:
    """Return ``b`` raised to the non-negative power ``e``."""
    b = _integer(b, "b")
    e = _unsigned(e, "e")
    return b**e


def powm(b: int, e: int, m: int) -> int:
    """Return ``b`` to the power ``e`` modulo ``|m|``.

    A zero exponent gives 1 whatever the modulus. A negative exponent uses
    the inverse of ``b``; ValueError is raised when there is none.
    ZeroDivisionError is raised for a zero modulus.
    """
    b = _integer(b, "b")
    e = _integer(e, "e")
    m = _integer(m, "m")
    if m == 0:
        raise ZeroDivisionError("zero modulus")
    if e == 0:
        return 1
    modulus = abs(m)
    if e < 0:
        base = invert(b, m)
        return pow(base, -e, modulus)
    return pow(b, e, modulus)


def rootrem(y: int, z: int) -> tuple[int, int]:
    """Return ``(x, r)`` with ``x`` the ``z``-th root of ``y`` truncated
    towards zero and ``r = y - x ** z``.

    Raises ValueError for an even root of a negative number and for ``z``
    zero.
    """
    y = _integer(y, "y")
    z = _unsigned(z, "z")
    if y < 0 and z % 2 == 0:
        raise ValueError("even root of a negative number")
    if z == 0:
        raise ValueError("zeroth root")
    if abs(y) <= 1:
        return y, 0

    t = 1 << (abs(y).bit_length() // z + 1)
    if z == 2:
        while True:
            u = t
            t = tdiv_q(y, u) + u
            t >>= 1
            if abs(t) >= abs(u):
                break
    else:
        if y < 0:
            t = -t
        while True:
            u = t
            t = tdiv_q(y, u ** (z - 1))
            t = tdiv_q(t + u * (z - 1), z)
            if abs(t) >= abs(u):
                break

    return u, y - u**z


def root(y: int, z: int) -> tuple[int, bool]:
    """Return the truncated ``z``-th root of ``y`` and whether it is exact."""
    x, r = rootrem(y, z)
    return x, r == 0


def sqrtrem(u: int) -> tuple[int, int]:
    """Return ``(s, r)`` with ``s = floor(sqrt(u))`` and ``r = u - s * s``."""
    return rootrem(u, 2)


def sqrt(u: int) -> int:
    """Return the integer square root of ``u``, rounded down."""
    return rootrem(u, 2)[0]


def perfect_square_p(u: int) -> bool:
    """Return True if ``u`` is the square of an integer."""
    u = _integer(u, "u")
    if u <= 0:
        return u == 0
    return root(u, 2)[1]


def mfac(n: int, m: int) -> int:
    """Return the ``m``-multifactorial of ``n``: n (n - m) (n - 2m) ...

    With ``m`` zero the result is ``n`` itself, or 1 when ``n`` is zero.
    """
    n = _unsigned(n, "n")
    m = _unsigned(m, "m")
    x = n + (n == 0)
    if m == 0:
        return x
    while n > m + 1:
        n -= m
        x *= n
    return x


def double_factorial(n: int) -> int:
    """Return ``n!!``."""
    return mfac(n, 2)


def factorial(n: int) -> int:
    """Return ``n!``."""
    return mfac(n, 1)


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient ``n`` choose ``k``; zero if ``k > n``."""
    n = _unsigned(n, "n")
    k = _unsigned(k, "k")
    r = 1 if k <= n else 0
    if k > n >> 1:
        k = n - k if k <= n else 0
    t = factorial(k)
    for _ in range(k):
        r *= n
        n -= 1
    return divexact(r, t)


def _jacobi_coprime(a: int, b: int) -> int:
    """Kronecker symbol (a/b) for odd ``b``, non-zero ``a``, coprime."""
    bit = 0
    b >>= 1
    c = _ctz(a)
    a >>= 1
    while True:
        a >>= c
        bit ^= c & (b ^ (b >> 1))
        if a < b:
            bit ^= a & b
            a = b - a
            b -= a
        else:
            a -= b
        if b == 0:
            break
        c = _ctz(a) + 1
    return -1 if bit & 1 else 1


def _lucas_step_k_2k(v: int, qk: int, n: int) -> tuple[int, int]:
    qk = mod(qk, n)
    v = tdiv_r(v * v - 2 * qk, n)
    return v, qk * qk


def _lucas_mod(q: int, b0: int, n: int) -> tuple[bool, int, int]:
    """Lucas sequence with P = 1 at k = (n >> b0) | 1; return (U_k == 0, V_k, Q^k)."""
    u = 1
    v = 1
    qk = q
    bs = n.bit_length() - 1
    while True:
        bs -= 1
        if bs < b0:
            break
        u = u * v
        v, qk = _lucas_step_k_2k(v, qk, n)
        if bs == b0 or (n >> bs) & 1:
            qk = qk * q
            u, v = u + v, u
            if u & 1:
                u += n
            u >>= 1
            v = tdiv_r(u + v * (-2 * q), n)
        u = tdiv_r(u, n)
    return u == 0, v, qk


def _strong_lucas(n: int) -> bool:
    s, exact = root(n, 2)
    if exact:
        return False
    max_d = s - 1 if s.bit_length() <= 64 else _LIMB_MAX

    d = 3
    while True:
        if d >= max_d:
            return True
        d += 2
        tl = n % d
        if tl == 0:
            return False
        if _jacobi_coprime(tl, d) != 1:
            break

    b0 = _ctz(~n & (n + 1)) if n & 1 else 0
    q = (d >> 2) + 1 if d & 2 else -(d >> 2)

    zero_u, v, qk = _lucas_mod(q, b0, n)
    if not zero_u:
        while v != 0:
            b0 -= 1
            if b0 == 0:
                break
            v, qk = _lucas_step_k_2k(v, qk, n)
    return b0 != 0


def _miller_rabin(n: int, nm1: int, y: int, q: int, k: int) -> bool:
    y = pow(y, q, n)
    if y == 1 or y == nm1:
        return True
    for _ in range(k - 1):
        y = y * y % n
        if y == nm1:
            return True
        if y <= 1:
            return False
    return False


def probab_prime_p(n: int, reps: int) -> int:
    """Test ``|n|`` for primality.

    Returns 2 when it is certainly prime, 1 when it is probably prime and 0
    when it is certainly composite. Rounds of ``reps`` beyond 24 add
    Miller-Rabin tests with bases from Euler's polynomial.
    """
    n = _integer(n, "n")
    reps = _integer(reps, "reps")
    a = abs(n)
    if a % 2 == 0:
        return 2 if a == 2 else 0
    if a < 64:
        return (_PRIME_MASK >> (a >> 1)) & 2
    if math.gcd(a, _PRIME_PRODUCT) != 1:
        return 0
    if a < 31 * 31:
        return 2

    nm1 = a - 1
    k = _ctz(nm1)
    q = nm1 >> k

    is_prime = _miller_rabin(a, nm1, 2, q, k) and _strong_lucas(a)
    reps -= 24
    j = 0
    while is_prime and j < reps:
        base = j * j + j + 41
        if base >= nm1:
            break
        is_prime = _miller_rabin(a, nm1, base, q, k)
        j += 1
    return 1 if is_prime else 0