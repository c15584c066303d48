"""Multiple-precision arctangent: atan(x) and atan2(y, x) for precision p >= 4."""

from __future__ import annotations

import math
import struct

from accumath.mpa import (
    MAX_PRECISION,
    MPNumber,
    add,
    dvd,
    from_float,
    mul,
    sub,
    to_float,
)

MIN_PRECISION = 4


def _from_words(high: int, low: int) -> float:
    return struct.unpack(">d", struct.pack(">II", high, low))[0]


# Thresholds that choose how many times the argument is halved (in angle).
_XM = tuple(
    _from_words(high, 0)
    for high in (
        0x00000000, 0x3F8930BE, 0x3F991687, 0x3FA923A2,
        0x3FB930BE, 0x3FC95810, 0x3FDA7EF9, 0x3FF00000,
    )
)

# Number of terms of the power series, indexed by precision.
_NP = (0, 0, 0, 0, 6, 8, 10, 11, 13, 15, 17, 19, 21, 23, 25, 27, 28,
       30, 32, 34, 36, 38, 40, 42, 43, 45, 47, 49, 51, 53, 55, 57, 59)

# 2n - 1 for the number of terms n above.
_TWONM1 = tuple(float(2 * n - 1) if n else 0.0 for n in _NP)

# 2**m, the factor that undoes m angle halvings.
_TWOM = tuple(float(2**m) for m in range(8))

_ONE = MPNumber(1, [1.0, 1.0])
_TWO = MPNumber(1, [1.0, 2.0])
_THREE = MPNumber(1, [1.0, 3.0])
_HALF = MPNumber(0, [1.0, 2.0**23])


def _check_precision(p: int) -> None:
    if not isinstance(p, int) or not MIN_PRECISION <= p <= MAX_PRECISION:
        raise ValueError(
            f"precision must be an integer in {MIN_PRECISION}..{MAX_PRECISION}, got {p!r}"
        )


def _sqrt(x: MPNumber, p: int) -> MPNumber:
    """Square root of a non-negative multiple-precision number."""
    if x.d[0] == 0.0:
        return MPNumber()
    if x.d[0] < 0.0:
        raise ValueError("square root of a negative multiple-precision number")

    parity = x.e % 2
    half_exp = (x.e - parity) // 2
    scaled = x.copy(p)
    scaled.e = parity
    y = from_float(1.0 / math.sqrt(to_float(scaled, p)), p)
    y.e -= half_exp

    bits = 50
    steps = 1
    while bits < 24 * (p + 1):
        bits *= 2
        steps += 1

    # Newton iteration for 1/sqrt(x): y <- y * (3 - x*y*y) / 2
    for _ in range(steps):
        t = mul(x, mul(y, y, p), p)
        t = mul(y, sub(_THREE, t, p), p)
        y = mul(t, _HALF, p)

    s = mul(x, y, p)
    residual = sub(x, mul(s, s, p), p)
    return add(s, mul(mul(residual, y, p), _HALF, p), p)


def mpatan(x: MPNumber, p: int) -> MPNumber:
    """Return atan(x) at precision ``p`` (4 <= p <= 32).

    The relative error is bounded by about 34.32 * r**(1-p) with r = 2**24.
    """
    _check_precision(p)

    if x.e > 0:
        m = 7
    elif x.e < 0:
        m = 0
    else:
        dx = abs(to_float(x, p))
        m = next((k for k in range(6, 0, -1) if dx > _XM[k]), 0)

    # Reduce x m times: s <- s / (1 + sqrt(1 + s*s)), kept as squares.
    mpsm = mul(x, x, p)
    if m == 0:
        mps = x.copy(p)
    else:
        for _ in range(m):
            root = _sqrt(add(_ONE, mpsm, p), p)
            denominator = add(add(root, root, p), add(_TWO, mpsm, p), p)
            mpsm = dvd(mpsm, denominator, p)
        mps = _sqrt(mpsm, p)
        mps.d[0] = x.d[0]

    # Truncated power series for atan(s).
    n = _NP[p]
    divisor = MPNumber(1, [1.0, _TWONM1[p]])
    mpt = dvd(mpsm, divisor, p)
    for _ in range(n - 1, 1, -1):
        divisor.d[1] -= 2.0
        term = dvd(mpsm, divisor, p)
        mpt = sub(term, mul(mpsm, mpt, p), p)
    mpt = sub(mps, mul(mps, mpt, p), p)

    return mul(MPNumber(1, [1.0, _TWOM[m]]), mpt, p)


def mpatan2(y: MPNumber, x: MPNumber, p: int) -> MPNumber:
    """Return atan2(y, x) at precision ``p`` (4 <= p <= 32).

    ``y`` must not be zero when ``x <= 0``.
    """
    _check_precision(p)

    if x.d[0] > 0.0:
        return mpatan(dvd(y, x, p), p)

    if y.d[0] == 0.0:
        raise ValueError("atan2 is undefined here: y is zero and x is not positive")

    ratio = dvd(x, y, p)
    square = mul(ratio, ratio, p)
    if ratio.d[0] != 0.0:
        ratio.d[0] = 1.0
    root = _sqrt(add(square, _ONE, p), p)
    half_angle_tan = add(ratio, root, p)
    half_angle_tan.d[0] = y.d[0]
    half = mpatan(half_angle_tan, p)
    return add(half, half, p)