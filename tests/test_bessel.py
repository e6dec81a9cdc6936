import math

import pytest

from picscale.bessel import j1, jinc

SAMPLE_POINTS = [0.001, 0.3, 1.0, 1.9, 2.0, 2.5, 3.2, 4.0, 5.5, 7.9, 8.0, 12.5, 20.0, 30.0]


def _bessel_integral(x, steps=512):
    """J1 via the periodic integral representation, trapezoid rule."""
    h = 2.0 * math.pi / steps
    total = sum(math.cos(k * h - x * math.sin(k * h)) for k in range(steps))
    return total * h / (2.0 * math.pi)


def test_zero():
    assert j1(0.0) == 0.0


def test_tiny_argument_is_half_x():
    assert j1(1e-300) == 0.5e-300


@pytest.mark.parametrize("x", SAMPLE_POINTS)
def test_odd_symmetry(x):
    assert j1(-x) == pytest.approx(-j1(x), abs=1e-15)


@pytest.mark.parametrize("x", SAMPLE_POINTS)
def test_matches_integral_representation(x):
    assert j1(x) == pytest.approx(_bessel_integral(x), abs=1e-12)


def test_known_value_at_one():
    assert j1(1.0) == pytest.approx(0.44005058574493355, abs=1e-14)


def test_infinity_gives_zero():
    assert j1(math.inf) == 0.0
    assert j1(-math.inf) == 0.0


def test_nan_propagates():
    assert math.isnan(j1(math.nan))


@pytest.mark.parametrize("x", [1e6, 1e10, 1e200])
def test_large_argument_decays(x):
    bound = math.sqrt(2.0 / (math.pi * x)) * 1.01
    assert abs(j1(x)) <= bound


def test_jinc_zero_is_zero():
    assert jinc(0.0) == 0.0


def test_jinc_limit_near_origin():
    assert jinc(1e-10) == pytest.approx(0.5)


@pytest.mark.parametrize("x", SAMPLE_POINTS)
def test_jinc_is_ratio(x):
    assert jinc(x) == pytest.approx(j1(x) / x, rel=1e-15)


@pytest.mark.parametrize("x", SAMPLE_POINTS)
def test_jinc_is_even(x):
    assert jinc(-x) == pytest.approx(jinc(x), abs=1e-15)


def test_jinc_accepts_int():
    assert jinc(2) == pytest.approx(j1(2.0) / 2.0, rel=1e-15)