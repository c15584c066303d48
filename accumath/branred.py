"""Range reduction of a double modulo pi/2 for arguments of any size."""

from __future__ import annotations

import math
import struct


def _from_words(high: int, low: int) -> float:
    return struct.unpack(">d", struct.pack(">II", high, low))[0]


TM600 = math.ldexp(1.0, -600)
TM24 = math.ldexp(1.0, -24)
BIG = _from_words(0x43380000, 0x00000000)
BIG1 = _from_words(0x43580000, 0x00000000)
HP0 = _from_words(0x3FF921FB, 0x54442D18)
HP1 = _from_words(0x3C91A626, 0x33145C07)
MP1 = _from_words(0x3FF921FB, 0x58000000)
MP2 = _from_words(0xBE4DDE97, 0x40000000)
SPLIT = 134217729.0

# 2/pi in base 2**24
TOVERP = (
    10680707.0, 7228996.0, 1387004.0, 2578385.0, 16069853.0,
    12639074.0, 9804092.0, 4427841.0, 16666979.0, 11263675.0,
    12935607.0, 2387514.0, 4345298.0, 14681673.0, 3074569.0,
    13734428.0, 16653803.0, 1880361.0, 10960616.0, 8533493.0,
    3062596.0, 8710556.0, 7349940.0, 6258241.0, 3772886.0,
    3769171.0, 3798172.0, 8675211.0, 12450088.0, 3874808.0,
    9961438.0, 366607.0, 15675153.0, 9132554.0, 7151469.0,
    3571407.0, 2607881.0, 12013382.0, 4155038.0, 6285869.0,
    7677882.0, 13102053.0, 15825725.0, 473591.0, 9065106.0,
    15363067.0, 6271263.0, 9264392.0, 5636912.0, 4652155.0,
    7056368.0, 13614112.0, 10155062.0, 1944035.0, 9527646.0,
    15080200.0, 6658437.0, 6231200.0, 6832269.0, 16767104.0,
    5075751.0, 3212806.0, 1398474.0, 7579849.0, 6349435.0,
    12618859.0, 4703257.0, 12806093.0, 14477321.0, 2786137.0,
    12875403.0, 9837734.0, 14528324.0, 13719321.0, 343717.0,
)


def _biased_exponent(x: float) -> int:
    return (struct.unpack(">Q", struct.pack(">d", x))[0] >> 52) & 0x7FF


def _reduce_part(part: float) -> tuple[float, float, float]:
    """Multiply one half of the split argument by 2/pi; return (b, bb, integer part)."""
    k = max((_biased_exponent(part) - 450) // 24, 0)
    gor = math.ldexp(1.0, 576 - 24 * k)
    r = []
    for digit in TOVERP[k : k + 6]:
        r.append(part * digit * gor)
        gor *= TM24

    total = 0.0
    for i in range(3):
        s = (r[i] + BIG) - BIG
        total += s
        r[i] -= s

    t = 0.0
    for value in reversed(r):
        t += value
    bb = r[0] - t
    for value in r[1:]:
        bb += value

    s = (t + BIG) - BIG
    total += s
    t -= s
    b = t + bb
    bb = (t - b) + bb
    s = (total + BIG1) - BIG1
    total -= s
    return b, bb, total


def branred(x: float) -> tuple[int, float, float]:
    """Reduce ``x`` to ``n*pi/2 + (a + aa)`` with ``|a + aa| < pi/4``.

    Returns ``(n mod 4, a, aa)``.
    """
    x = float(x)
    if not math.isfinite(x):
        raise ValueError(f"cannot reduce non-finite value {x!r}")

    x *= TM600
    t = x * SPLIT
    x1 = t - (t - x)
    x2 = x - x1

    b1, bb1, sum1 = _reduce_part(x1)
    b2, bb2, sum2 = _reduce_part(x2)

    total = sum1 + sum2
    b = b1 + b2
    bb = (b1 - b) + b2 if abs(b1) > abs(b2) else (b2 - b) + b1
    if b > 0.5:
        b -= 1.0
        total += 1.0
    elif b < -0.5:
        b += 1.0
        total -= 1.0

    s = b + (bb + bb1 + bb2)
    t = ((b - s) + bb) + (bb1 + bb2)
    b = s * SPLIT
    t1 = b - (b - s)
    t2 = s - t1
    b = s * HP0
    bb = (((t1 * MP1 - b) + t1 * MP2) + t2 * MP1) + (t2 * MP2 + s * HP1 + t * HP0)
    s = b + bb
    t = (b - s) + bb
    return int(total) & 3, s, t