# accumath

Building blocks for accurate elementary functions on IEEE double precision
numbers: a multiple precision arithmetic core, exact double-length
operations, argument reduction modulo pi/2, exact powers, and a multiple
precision arctangent.

## Modules

- `accumath.mpa` — multiple precision numbers in radix 2**24.
  `MPNumber` holds an exponent `e` and a list `d` (sign in `d[0]`, digits
  in `d[1]..d[p]`); `MPNumber.copy(p)` and `MPNumber.resized(m, n)` copy
  it at a given precision. Functions: `from_float`, `to_float` (correctly
  rounded to nearest/even), `add`, `sub`, `mul`, `inv`, `dvd`, and the
  comparisons `acr` (absolute values) and `cr` (signed values), each
  returning -1, 0 or 1. The precision `p` is an integer from 1 to 32;
  anything else raises `ValueError`. Inverting zero raises
  `ZeroDivisionError`.
- `accumath.doublelength` — operations on pairs `(x, xx)` standing for
  `x + xx`: `emulv` (exact product of two floats), `add2`, `sub2`, `mul2`,
  and `doasin(x, dx)`, the arcsine of a small double-length number as a
  pair.
- `accumath.branred` — `branred(x)` reduces a finite float to
  `n*pi/2 + (a + aa)` with `|a + aa| < pi/4` and returns
  `(n mod 4, a, aa)`. Non-finite input raises `ValueError`.
- `accumath.halfulp` — `halfulp(x, y)` returns `x**y` when the result is
  exactly representable, 0 when it is exactly at the underflow threshold,
  and `-10.0` otherwise.
- `accumath.mpatan` — `mpatan(x, p)` and `mpatan2(y, x, p)` in multiple
  precision, for `p` from 4 to 32. `mpatan2` raises `ValueError` when `y`
  is zero and `x` is not positive.

## Example

```python
from accumath.mpa import from_float, to_float, dvd
from accumath.mpatan import mpatan

p = 32
one = from_float(1.0, p)
three = from_float(3.0, p)
print(to_float(dvd(one, three, p), p))    # 0.3333333333333333
print(to_float(mpatan(one, p), p) * 4)    # 3.141592653589793
```

## What it does not do

The package has no ready-made `atan(x)` or `atan2(y, x)` for floats: it
provides the multiple precision arctangent and the double-length
operations such functions are built from, but not the fast table-driven
paths nor the driver that picks between them. Nor does it provide sine,
cosine or other elementary functions beyond what is listed above.

## Installing

```
pip install .
pip install ".[test]"
pytest
```