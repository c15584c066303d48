"""Double-length arithmetic on pairs of floats, and arcsin of a double-length number.

A double-length number is a pair ``(x, xx)`` whose value is ``x + xx``, with
``|xx|`` at most half an ulp of ``x``.  The operations use Dekker's splitting,
so they are exact or nearly so in round-to-nearest arithmetic.
"""

from __future__ import annotations

import struct

CN = 134217729.0  # 2**27 + 1, the splitting constant


def _from_words(high: int, low: int) -> float:
    return struct.unpack(">d", struct.pack(">II", high, low))[0]


# Taylor coefficients of arcsin, each split into a head and a tail.
C1 = _from_words(0x3FC55555, 0x55555555)
CC1 = _from_words(0x3C655555, 0x55775389)
C2 = _from_words(0x3FB33333, 0x33333333)
CC2 = _from_words(0x3C499993, 0x63F1A115)
C3 = _from_words(0x3FA6DB6D, 0xB6DB6DB7)
CC3 = _from_words(0xBC320FC0, 0x3D5CF0C5)
C4 = _from_words(0x3F9F1C71, 0xC71C71C5)
CC4 = _from_words(0xBC02B240, 0xFF23ED1E)

D5 = 0.22372159090911789889975459505194491e-01
D6 = 0.17352764422456822913014975683014622e-01
D7 = 0.13964843843786693521653681033981614e-01
D8 = 0.11551791438485242609036067259086589e-01
D9 = 0.97622386568166960207425666787248914e-02
D10 = 0.83638737193775788576092749009744976e-02
D11 = 0.79470250400727425881446981833568758e-02


def _split(a: float) -> tuple[float, float]:
    p = CN * a
    head = (a - p) + p
    return head, a - head


def emulv(x: float, y: float) -> tuple[float, float]:
    """Return ``(z, zz)`` with ``z + zz`` exactly ``x * y``."""
    hx, tx = _split(x)
    hy, ty = _split(y)
    z = x * y
    zz = (((hx * hy - z) + hx * ty) + tx * hy) + tx * ty
    return z, zz


def mul2(x: float, xx: float, y: float, yy: float) -> tuple[float, float]:
    """Multiply the double-length numbers ``x + xx`` and ``y + yy``."""
    hx, tx = _split(x)
    hy, ty = _split(y)
    p = hx * hy
    q = hx * ty + tx * hy
    c = p + q
    cc = ((p - c) + q) + tx * ty
    cc = (x * yy + xx * y) + cc
    z = c + cc
    return z, (c - z) + cc


def add2(x: float, xx: float, y: float, yy: float) -> tuple[float, float]:
    """Add the double-length numbers ``x + xx`` and ``y + yy``."""
    r = x + y
    if abs(x) > abs(y):
        s = (((x - r) + y) + yy) + xx
    else:
        s = (((y - r) + x) + xx) + yy
    z = r + s
    return z, (r - z) + s


def sub2(x: float, xx: float, y: float, yy: float) -> tuple[float, float]:
    """Subtract the double-length number ``y + yy`` from ``x + xx``."""
    r = x - y
    if abs(x) > abs(y):
        s = (((x - r) - y) - yy) + xx
    else:
        s = ((x - (y + r)) + xx) - yy
    z = r + s
    return z, (r - z) + s


def doasin(x: float, dx: float) -> tuple[float, float]:
    """Return ``(v, vv)`` with ``v + vv`` approximating ``arcsin(x + dx)``.

    Intended for small arguments, where the Taylor series converges fast.
    """
    xx = x * x + 2.0 * x * dx
    p = ((((((D11 * xx + D10) * xx + D9) * xx + D8) * xx + D7) * xx + D6) * xx + D5) * xx
    pp = 0.0

    u, uu = mul2(x, dx, x, dx)
    for c, cc in ((C4, CC4), (C3, CC3), (C2, CC2), (C1, CC1)):
        p, pp = add2(p, pp, c, cc)
        p, pp = mul2(p, pp, u, uu)
    p, pp = mul2(p, pp, x, dx)
    return add2(p, pp, x, dx)