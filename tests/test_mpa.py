import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from accumath.mpa import (
    MPNumber,
    acr,
    add,
    cr,
    dvd,
    from_float,
    inv,
    mul,
    sub,
    to_float,
)

finite = st.floats(allow_nan=False, allow_infinity=False)
moderate = st.floats(min_value=-1e50, max_value=1e50, allow_nan=False).filter(
    lambda v: v == 0.0 or abs(v) > 1e-50
)
nonzero_moderate = moderate.filter(lambda v: v != 0.0)
precisions = st.sampled_from([4, 5, 8, 16, 32])


@given(finite, precisions)
def test_round_trip(x, p):
    assert to_float(from_float(x, p), p) == x


@pytest.mark.parametrize("x", [5e-324, -5e-324, 2.2250738585072014e-308, 1e-310, -3.5e-320])
@pytest.mark.parametrize("p", [3, 4, 8, 32])
def test_round_trip_subnormal_and_boundary(x, p):
    assert to_float(from_float(x, p), p) == x


def test_layout_of_one():
    one = from_float(1.0, 4)
    assert one.e == 1
    assert one.d[0] == 1.0
    assert one.d[1] == 1.0
    assert all(v == 0.0 for v in one.d[2:])


def test_layout_of_radix():
    r = from_float(2.0**24, 4)
    assert r.e == 2
    assert r.d[1] == 1.0
    assert r.d[2] == 0.0


def test_layout_of_negative_half():
    h = from_float(-0.5, 4)
    assert h.sign == -1.0
    assert h.e == 0
    assert h.d[1] == 8388608.0


def test_explicit_two():
    assert to_float(MPNumber(1, [1.0, 2.0]), 4) == 2.0


def test_zero_conversion():
    z = from_float(-0.0, 8)
    assert z.sign == 0.0
    assert to_float(z, 8) == 0.0


@given(moderate, moderate)
def test_add_matches_float(a, b):
    assert to_float(add(from_float(a, 32), from_float(b, 32), 32), 32) == a + b


@given(moderate, moderate)
def test_sub_matches_float(a, b):
    assert to_float(sub(from_float(a, 32), from_float(b, 32), 32), 32) == a - b


@given(moderate, moderate)
def test_mul_matches_float(a, b):
    assert to_float(mul(from_float(a, 32), from_float(b, 32), 32), 32) == a * b


@given(moderate, nonzero_moderate)
def test_dvd_matches_float(a, b):
    assert to_float(dvd(from_float(a, 32), from_float(b, 32), 32), 32) == a / b


@given(nonzero_moderate)
def test_inv_matches_float(b):
    assert to_float(inv(from_float(b, 32), 32), 32) == 1.0 / b


@given(moderate)
def test_sub_self_is_zero(a):
    x = from_float(a, 16)
    assert sub(x, x, 16).sign == 0.0


@given(moderate)
def test_add_negation_is_zero(a):
    assert add(from_float(a, 16), from_float(-a, 16), 16).sign == 0.0


@given(moderate, moderate)
def test_cr_orders_like_floats(a, b):
    expected = (a > b) - (a < b)
    assert cr(from_float(a, 8), from_float(b, 8), 8) == expected


@given(moderate, moderate)
def test_acr_orders_absolute_values(a, b):
    expected = (abs(a) > abs(b)) - (abs(a) < abs(b))
    assert acr(from_float(a, 8), from_float(b, 8), 8) == expected


def test_inv_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        inv(from_float(0.0, 8), 8)


def test_dvd_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        dvd(from_float(1.0, 8), from_float(0.0, 8), 8)


def test_dvd_zero_by_zero_is_zero():
    result = dvd(from_float(0.0, 8), from_float(0.0, 8), 8)
    assert to_float(result, 8) == 0.0


def test_copy_is_independent():
    x = from_float(math.pi, 8)
    y = x.copy(8)
    y.d[1] = 0.0
    y.e = 99
    assert to_float(x, 8) == math.pi
    assert x.copy(8) == x


def test_resized_truncates_digits():
    x = from_float(1.0 / 3.0, 4)
    y = x.resized(4, 2)
    assert y.d[:3] == x.d[:3]
    assert y.d[3] == 0.0 and y.d[4] == 0.0
    assert y.e == x.e


def test_resized_zero_fills_when_growing():
    x = from_float(1.0 / 3.0, 4)
    y = x.resized(2, 6)
    assert y.d[:3] == x.d[:3]
    assert all(v == 0.0 for v in y.d[3:7])


@pytest.mark.parametrize("p", [0, 33, -1])
def test_invalid_precision(p):
    with pytest.raises(ValueError):
        from_float(1.0, p)


@pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
def test_non_finite_rejected(x):
    with pytest.raises(ValueError):
        from_float(x, 8)


def test_too_many_digits_rejected():
    with pytest.raises(ValueError):
        MPNumber(1, [0.0] * 41)