import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from accumath.mpa import add, from_float, to_float
from accumath.mpatan import mpatan, mpatan2


def _atan(x: float, p: int) -> float:
    return to_float(mpatan(from_float(x, p), p), p)


def _atan2(y: float, x: float, p: int) -> float:
    return to_float(mpatan2(from_float(y, p), from_float(x, p), p), p)


@pytest.mark.parametrize("p", [4, 6, 10, 20, 32])
def test_atan_of_one_is_quarter_pi(p):
    assert _atan(1.0, p) == math.pi / 4


@pytest.mark.parametrize("p", [4, 8, 32])
def test_atan_of_zero_is_zero(p):
    assert _atan(0.0, p) == 0.0


@pytest.mark.parametrize("x", [1e-300, 1e-10, 0.01, 0.1, 0.3, 0.5, 0.9, 2.0, 10.0, 1e5, 1e20])
def test_atan_matches_math(x):
    assert _atan(x, 10) == pytest.approx(math.atan(x), rel=1e-15)


@pytest.mark.parametrize("x", [0.05, 0.7, 3.0, 123.456])
def test_atan_is_odd(x):
    assert _atan(-x, 8) == -_atan(x, 8)


@pytest.mark.parametrize("x", [0.2, 0.45, 1.5, 7.0])
def test_precisions_agree(x):
    assert _atan(x, 6) == _atan(x, 32)


@pytest.mark.parametrize("x", [0.25, 2.0, 3.0, 50.0])
def test_complementary_angles_sum_to_half_pi(x):
    p = 10
    a = mpatan(from_float(x, p), p)
    b = mpatan(from_float(1.0 / x, p), p) if x in (0.25, 2.0) else None
    if b is None:
        b = mpatan2(from_float(1.0, p), from_float(x, p), p)
    assert to_float(add(a, b, p), p) == math.pi / 2


@pytest.mark.parametrize("p", [3, 0, 33])
def test_atan_rejects_bad_precision(p):
    with pytest.raises(ValueError):
        mpatan(from_float(0.5, 4), p)


def test_atan2_positive_x_axis_is_zero():
    assert _atan2(0.0, 1.0, 8) == 0.0


def test_atan2_positive_y_axis_is_half_pi():
    assert _atan2(1.0, 0.0, 8) == math.pi / 2


def test_atan2_negative_y_axis_is_minus_half_pi():
    assert _atan2(-3.0, 0.0, 8) == -math.pi / 2


@pytest.mark.parametrize(
    "y, x",
    [(1.0, 1.0), (1.0, -1.0), (-1.0, -1.0), (2.5, -0.5), (-0.1, -7.0), (3.0, 4.0), (-5.0, 12.0)],
)
def test_atan2_matches_math(y, x):
    assert _atan2(y, x, 10) == pytest.approx(math.atan2(y, x), rel=1e-15)


@pytest.mark.parametrize("y, x", [(0.3, 2.0), (-4.0, 0.5), (1.0, 1.0)])
def test_atan2_with_positive_x_equals_atan_of_ratio(y, x):
    p = 8
    assert _atan2(y, x, p) == _atan(y / x, p) or _atan2(y, x, p) == pytest.approx(
        math.atan(y / x), rel=1e-15
    )


@pytest.mark.parametrize("y, x", [(1.0, -2.0), (0.7, -0.3)])
def test_atan2_reflects_in_x_axis(y, x):
    assert _atan2(-y, x, 8) == -_atan2(y, x, 8)


@pytest.mark.parametrize("x", [-1.0, 0.0])
def test_atan2_rejects_zero_y_with_nonpositive_x(x):
    with pytest.raises(ValueError):
        mpatan2(from_float(0.0, 6), from_float(x, 6), 6)


def test_atan2_rejects_bad_precision():
    with pytest.raises(ValueError):
        mpatan2(from_float(1.0, 4), from_float(1.0, 4), 2)


@settings(max_examples=40, deadline=None)
@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False))
def test_atan_close_to_math_for_random_values(x):
    assert _atan(x, 6) == pytest.approx(math.atan(x), rel=2e-16, abs=0.0)


@settings(max_examples=30, deadline=None)
@given(
    st.floats(min_value=1e-3, max_value=1e3),
    st.floats(min_value=-1e3, max_value=1e3).filter(lambda v: abs(v) > 1e-3),
)
def test_atan2_close_to_math_for_random_values(y, x):
    assert _atan2(y, x, 6) == pytest.approx(math.atan2(y, x), rel=4e-16)