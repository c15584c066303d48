"""Multiple-precision floating-point arithmetic in radix 2**24.

A number is held as a sign (``d[0]``, one of -1, 0, 1), an exponent ``e``
and mantissa digits ``d[1]..d[p]`` with ``0 <= d[i] < 2**24`` and
``d[1] > 0`` for non-zero values.  Its value is
``d[1]*r**(e-1) + d[2]*r**(e-2) + ... + d[p]*r**(e-p)`` with ``r = 2**24``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

RADIX = 2.0**24
RADIXI = 2.0**-24
CUTTER = 2.0**76
TWO5 = 2.0**5
TWO10 = 2.0**10
TWO18 = 2.0**18
TWO19 = 2.0**19
TWO23 = 2.0**23
TWO52 = 2.0**52
TWO57 = 2.0**57
TWO71 = 2.0**71
TWOM1032 = math.ldexp(1.0, -1032)

DIGITS = 40
MAX_PRECISION = 32

_NEWTON_STEPS = (0, 0, 0, 0, 1, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 3, 3, 3,
                 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4)


def _check_precision(p: int) -> None:
    if not isinstance(p, int) or not 1 <= p <= MAX_PRECISION:
        raise ValueError(f"precision must be an integer in 1..{MAX_PRECISION}, got {p!r}")


def _zeros() -> list[float]:
    return [0.0] * DIGITS


@dataclass
class MPNumber:
    """A multiple-precision number: exponent ``e`` and sign/digit list ``d``."""

    e: int = 0
    d: list[float] = field(default_factory=_zeros)

    def __post_init__(self) -> None:
        digits = [float(v) for v in self.d]
        if len(digits) > DIGITS:
            raise ValueError(f"at most {DIGITS} entries are allowed, got {len(digits)}")
        self.d = digits + [0.0] * (DIGITS - len(digits))

    @property
    def sign(self) -> float:
        return self.d[0]

    def copy(self, p: int) -> MPNumber:
        """Return a copy keeping the sign and the first ``p`` digits."""
        _check_precision(p)
        return MPNumber(self.e, self.d[: p + 1])

    def resized(self, m: int, n: int) -> MPNumber:
        """Treat self as precision ``m`` and return it at precision ``n``.

        Digits beyond ``min(m, n)`` are zero in the result.
        """
        _check_precision(m)
        _check_precision(n)
        return MPNumber(self.e, self.d[: min(m, n) + 1])


def _mcr(x: MPNumber, y: MPNumber, p: int) -> int:
    for a, b in zip(x.d[1 : p + 1], y.d[1 : p + 1]):
        if a != b:
            return 1 if a > b else -1
    return 0


def acr(x: MPNumber, y: MPNumber, p: int) -> int:
    """Compare absolute values: return -1, 0 or 1."""
    _check_precision(p)
    if x.d[0] == 0.0:
        return 0 if y.d[0] == 0.0 else -1
    if y.d[0] == 0.0:
        return 1
    if x.e > y.e:
        return 1
    if x.e < y.e:
        return -1
    return _mcr(x, y, p)


def cr(x: MPNumber, y: MPNumber, p: int) -> int:
    """Compare signed values: return -1, 0 or 1."""
    _check_precision(p)
    if x.d[0] > y.d[0]:
        return 1
    if x.d[0] < y.d[0]:
        return -1
    if x.d[0] < 0.0:
        return acr(y, x, p)
    return acr(x, y, p)


def _norm(x: MPNumber, p: int) -> float:
    """Convert to float, normalized case (|x| >= 2**-1022)."""
    X = x.d
    r = RADIXI
    if p < 5:
        if p == 1:
            c = X[1]
        elif p == 2:
            c = X[1] + r * X[2]
        elif p == 3:
            c = X[1] + r * (X[2] + r * X[3])
        else:
            c = (X[1] + r * X[2]) + r * r * (X[3] + r * X[4])
    else:
        z = [0.0] * 5
        a = 1.0
        z[1] = X[1]
        while z[1] < TWO23:
            a *= 2.0
            z[1] *= 2.0
        for i in range(2, 5):
            z[i] = X[i] * a
            u = (z[i] + CUTTER) - CUTTER
            if u > z[i]:
                u -= RADIX
            z[i] -= u
            z[i - 1] += u * RADIXI

        u = (z[3] + TWO71) - TWO71
        if u > z[3]:
            u -= TWO19
        v = z[3] - u

        if v == TWO18:
            if z[4] == 0.0:
                if any(digit != 0.0 for digit in X[5 : p + 1]):
                    z[3] += 1.0
            else:
                z[3] += 1.0

        c = (z[1] + r * (z[2] + r * z[3])) / a

    c *= X[0]
    for _ in range(1, x.e):
        c *= RADIX
    for _ in range(x.e, 1):
        c *= RADIXI
    return c


def _denorm(x: MPNumber, p: int) -> float:
    """Convert to float, denormalized case (|x| < 2**-1022)."""
    X = x.d
    r = RADIXI
    if x.e < -44 or (x.e == -44 and X[1] < TWO5):
        return 0.0

    if p == 1:
        if x.e == -42:
            z1, z2, z3, k = X[1] + TWO10, 0.0, 0.0, 3
        elif x.e == -43:
            z1, z2, z3, k = TWO10, X[1], 0.0, 2
        else:
            z1, z2, z3, k = TWO10, 0.0, X[1], 1
    elif p == 2:
        if x.e == -42:
            z1, z2, z3, k = X[1] + TWO10, X[2], 0.0, 3
        elif x.e == -43:
            z1, z2, z3, k = TWO10, X[1], X[2], 2
        else:
            z1, z2, z3, k = TWO10, 0.0, X[1], 1
    else:
        if x.e == -42:
            z1, z2, k = X[1] + TWO10, X[2], 3
        elif x.e == -43:
            z1, z2, k = TWO10, X[1], 2
        else:
            z1, z2, k = TWO10, 0.0, 1
        z3 = X[k]

    u = (z3 + TWO57) - TWO57
    if u > z3:
        u -= TWO5

    if u == z3 and any(digit != 0.0 for digit in X[k + 1 : p + 1]):
        z3 += 1.0

    c = X[0] * ((z1 + r * (z2 + r * z3)) - TWO10)
    return c * TWOM1032


def to_float(x: MPNumber, p: int) -> float:
    """Convert to a float, correctly rounded to nearest/even."""
    _check_precision(p)
    if x.d[0] == 0.0:
        return 0.0
    if x.e > -42 or (x.e == -42 and x.d[1] >= TWO10):
        return _norm(x, p)
    return _denorm(x, p)


def from_float(x: float, p: int) -> MPNumber:
    """Convert a finite float to a multiple-precision number (truncated to ``p`` digits)."""
    _check_precision(p)
    x = float(x)
    if not math.isfinite(x):
        raise ValueError(f"cannot convert non-finite value {x!r}")
    y = MPNumber()
    if x == 0.0:
        return y
    if x > 0.0:
        y.d[0] = 1.0
    else:
        y.d[0] = -1.0
        x = -x

    e = 1
    while x >= RADIX:
        x *= RADIXI
        e += 1
    while x < 1.0:
        x *= RADIX
        e -= 1
    y.e = e

    for i in range(1, min(p, 4) + 1):
        u = (x + TWO52) - TWO52
        if u > x:
            u -= 1.0
        y.d[i] = u
        x -= u
        x *= RADIX
    return y


def _add_magnitudes(x: MPNumber, y: MPNumber, p: int) -> MPNumber:
    """Add |x| and |y| assuming |x| >= |y| > 0; the sign is left unset."""
    i = p
    j = p + y.e - x.e
    k = p + 1
    if j < 1:
        return x.copy(p)

    z = MPNumber(x.e)
    X, Y, Z = x.d, y.d, z.d
    Z[k] = 0.0

    while j > 0:
        Z[k] += X[i] + Y[j]
        if Z[k] >= RADIX:
            Z[k] -= RADIX
            k -= 1
            Z[k] = 1.0
        else:
            k -= 1
            Z[k] = 0.0
        i -= 1
        j -= 1

    while i > 0:
        Z[k] += X[i]
        if Z[k] >= RADIX:
            Z[k] -= RADIX
            k -= 1
            Z[k] = 1.0
        else:
            k -= 1
            Z[k] = 0.0
        i -= 1

    if Z[1] == 0.0:
        Z[1 : p + 1] = Z[2 : p + 2]
    else:
        z.e += 1
    return z


def _sub_magnitudes(x: MPNumber, y: MPNumber, p: int) -> MPNumber:
    """Subtract |y| from |x| assuming |x| > |y| > 0; the sign is left unset."""
    X, Y = x.d, y.d
    if x.e == y.e:
        z = MPNumber(x.e)
        Z = z.d
        i = j = k = p
        Z[k] = Z[k + 1] = 0.0
    else:
        gap = x.e - y.e
        if gap > p:
            return x.copy(p)
        z = MPNumber(x.e)
        Z = z.d
        i = p
        j = p + 1 - gap
        k = p
        if Y[j] > 0.0:
            Z[k + 1] = RADIX - Y[j]
            Z[k] = -1.0
        else:
            Z[k + 1] = 0.0
            Z[k] = 0.0
        j -= 1

    while j > 0:
        Z[k] += X[i] - Y[j]
        if Z[k] < 0.0:
            Z[k] += RADIX
            k -= 1
            Z[k] = -1.0
        else:
            k -= 1
            Z[k] = 0.0
        i -= 1
        j -= 1

    while i > 0:
        Z[k] += X[i]
        if Z[k] < 0.0:
            Z[k] += RADIX
            k -= 1
            Z[k] = -1.0
        else:
            k -= 1
            Z[k] = 0.0
        i -= 1

    first = next(idx for idx in range(1, DIGITS) if Z[idx] != 0.0)
    z.e = z.e - first + 1
    tail = Z[first : p + 2]
    Z[1 : 1 + len(tail)] = tail
    for idx in range(1 + len(tail), p + 1):
        Z[idx] = 0.0
    return z


def add(x: MPNumber, y: MPNumber, p: int) -> MPNumber:
    """Return x + y (one guard digit, error below one ulp)."""
    _check_precision(p)
    if x.d[0] == 0.0:
        return y.copy(p)
    if y.d[0] == 0.0:
        return x.copy(p)

    if x.d[0] == y.d[0]:
        if acr(x, y, p) > 0:
            z = _add_magnitudes(x, y, p)
            z.d[0] = x.d[0]
        else:
            z = _add_magnitudes(y, x, p)
            z.d[0] = y.d[0]
        return z

    n = acr(x, y, p)
    if n == 1:
        z = _sub_magnitudes(x, y, p)
        z.d[0] = x.d[0]
    elif n == -1:
        z = _sub_magnitudes(y, x, p)
        z.d[0] = y.d[0]
    else:
        z = MPNumber()
    return z


def sub(x: MPNumber, y: MPNumber, p: int) -> MPNumber:
    """Return x - y (one guard digit, error below one ulp)."""
    _check_precision(p)
    if x.d[0] == 0.0:
        z = y.copy(p)
        z.d[0] = -z.d[0]
        return z
    if y.d[0] == 0.0:
        return x.copy(p)

    if x.d[0] != y.d[0]:
        if acr(x, y, p) > 0:
            z = _add_magnitudes(x, y, p)
            z.d[0] = x.d[0]
        else:
            z = _add_magnitudes(y, x, p)
            z.d[0] = -y.d[0]
        return z

    n = acr(x, y, p)
    if n == 1:
        z = _sub_magnitudes(x, y, p)
        z.d[0] = x.d[0]
    elif n == -1:
        z = _sub_magnitudes(y, x, p)
        z.d[0] = -y.d[0]
    else:
        z = MPNumber()
    return z


def mul(x: MPNumber, y: MPNumber, p: int) -> MPNumber:
    """Return x * y (truncated for p <= 3, error within 1.001 ulp otherwise)."""
    _check_precision(p)
    z = MPNumber()
    if x.d[0] * y.d[0] == 0.0:
        return z

    X, Y, Z = x.d, y.d, z.d
    k2 = p + p if p < 3 else p + 3
    Z[k2] = 0.0
    k = k2
    while k > 1:
        if k > p:
            i1, i2 = k - p, p + 1
        else:
            i1, i2 = 1, k
        for i in range(i1, i2):
            Z[k] += X[i] * Y[i1 + i2 - 1 - i]

        u = (Z[k] + CUTTER) - CUTTER
        if u > Z[k]:
            u -= RADIX
        Z[k] -= u
        k -= 1
        Z[k] = u * RADIXI

    if Z[1] == 0.0:
        Z[1 : p + 1] = Z[2 : p + 2]
        z.e = x.e + y.e - 1
    else:
        z.e = x.e + y.e

    Z[0] = X[0] * Y[0]
    return z


def inv(x: MPNumber, p: int) -> MPNumber:
    """Return 1 / x by Newton iteration; x must not be zero."""
    _check_precision(p)
    if x.d[0] == 0.0:
        raise ZeroDivisionError("multiple-precision inverse of zero")
    two = MPNumber(1, [1.0, 2.0])

    z = x.copy(p)
    z.e = 0
    t = 1.0 / to_float(z, p)
    y = from_float(t, p)
    y.e -= x.e

    for _ in range(_NEWTON_STEPS[p]):
        w = y.copy(p)
        y = mul(x, w, p)
        z = sub(two, y, p)
        y = mul(w, z, p)
    return y


def dvd(x: MPNumber, y: MPNumber, p: int) -> MPNumber:
    """Return x / y; a zero x gives zero, otherwise y must not be zero."""
    _check_precision(p)
    if x.d[0] == 0.0:
        return MPNumber()
    return mul(x, inv(y, p), p)