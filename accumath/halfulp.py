"""Exact powers: ``x**y`` when the result needs no rounding."""

from __future__ import annotations

import math
import struct

from accumath.doublelength import emulv

NOT_EXACT = -10.0

# Largest odd m such that m**n fits in 54 bits, for n = 3, 4, ...
TAB54 = (
    262143, 11585, 1782, 511, 210, 107, 63, 42,
    30, 22, 17, 14, 12, 10, 9, 7,
    7, 6, 5, 5, 5, 4, 4, 4,
    3, 3, 3, 3, 3, 3, 3, 3,
)


def _words(x: float) -> tuple[int, int]:
    """Return the signed high word and the unsigned low word of a double."""
    bits = struct.unpack(">Q", struct.pack(">d", x))[0]
    high = bits >> 32
    if high >= 1 << 31:
        high -= 1 << 32
    return high, bits & 0xFFFFFFFF


def _odd_part(high: int) -> tuple[int, int]:
    """Return (odd integer of the high mantissa, number of significant fraction bits)."""
    mant = high & 0x000FFFFF
    bits = 0 if mant == 0 else 20 - ((mant & -mant).bit_length() - 1)
    return (mant | 0x00100000) >> (20 - bits), bits


def halfulp(x: float, y: float) -> float:
    """Return ``x**y`` if it is exactly representable, else a negative number.

    A result too close to zero to be represented gives 0.  The power is not
    computed (``-10.0`` is returned) when the result would need rounding,
    when ``y`` falls outside the supported set, or when ``x`` is a power of
    two whose power is not exactly the underflow threshold.
    """
    x = float(x)
    y = float(y)
    if y <= 0:
        if _words(y)[1] != 0:
            return NOT_EXACT
        xhigh, xlow = _words(x)
        if xlow != 0 or xhigh & 0x000FFFFF != 0:
            return NOT_EXACT
        k = ((xhigh & 0x7FFFFFFF) >> 20) - 1023
        return 0.0 if k * y == -1075.0 else NOT_EXACT

    if _words(y)[1] != 0:
        return NOT_EXACT

    xhigh, xlow = _words(x)
    if (xhigh & 0x000FFFFF) | xlow == 0:
        k = (xhigh >> 20) - 1023
        return 0.0 if k * y == -1075.0 else NOT_EXACT

    yhigh = _words(y)[0]
    n, bits = _odd_part(yhigh)
    k = ((yhigh >> 20) - 1023) - bits  # y = n * 2**k
    if k > 5:
        return NOT_EXACT
    if k > 0:
        n <<= k
        k = 0
    if n > 34:
        return NOT_EXACT
    k = -k
    if k > 5:
        return NOT_EXACT

    while k > 0:
        if not x >= 0.0:
            break
        z = math.sqrt(x)
        u, uu = emulv(z, z)
        if (u - x) + uu != 0:
            break
        x = z
        k -= 1
    if k:
        return NOT_EXACT

    xhigh, xlow = _words(x)
    if xlow:
        return NOT_EXACT
    m, _ = _odd_part(xhigh)
    if n >= 3 and m > TAB54[n - 3]:
        return NOT_EXACT

    u = x
    for _ in range(1, n):
        u *= x
    return u