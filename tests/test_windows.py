import math

import pytest

from picscale.windows import (
    bartlett,
    bartlett_hann,
    bessel_i0,
    blackman,
    blackman_window,
    bohman,
    gaussian,
    hamming,
    hann,
    hanning,
    kaiser,
    sinc,
    sphinx,
    welch,
)


def test_sinc_at_origin_is_one():
    assert sinc(0.0) == 1.0


def test_sinc_zero_at_pi():
    assert sinc(math.pi) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("x", [0.3, 1.1, 2.7])
def test_sinc_is_even(x):
    assert sinc(x) == pytest.approx(sinc(-x))


def test_sphinx_near_origin_is_one():
    assert sphinx(0.0) == 1.0
    assert sphinx(5e-9) == 1.0


@pytest.mark.parametrize("x", [0.25, 0.8, 1.6])
def test_sphinx_is_even(x):
    assert sphinx(x) == pytest.approx(sphinx(-x))


def test_sphinx_is_continuous_at_origin():
    assert sphinx(1e-4) == pytest.approx(1.0, abs=1e-6)


def test_welch_values():
    assert welch(0.0) == 1.0
    assert welch(1.0) == 0.0
    assert welch(3.0) == 0.0
    assert welch(0.5) == pytest.approx(0.75)


def test_bartlett_branches():
    assert bartlett(0.0) == 0.0
    assert bartlett(1.0) == pytest.approx(2.0 * 1.0)
    assert bartlett(1.5) == pytest.approx(2.0 - 2.0 * 1.5)


def test_bartlett_hann_outside_support():
    assert bartlett_hann(2.5) == 0.0
    assert bartlett_hann(-2.5) == 0.0


def test_bartlett_hann_peak():
    assert bartlett_hann(0.5) == pytest.approx(1.0)


@pytest.mark.parametrize("x", [0.2, 0.9, 1.7])
def test_bartlett_hann_is_even(x):
    assert bartlett_hann(x) == pytest.approx(bartlett_hann(-x))


def test_bartlett_hann_symmetric_about_half():
    assert bartlett_hann(0.0) == pytest.approx(bartlett_hann(1.0))
    assert bartlett_hann(0.2) == pytest.approx(bartlett_hann(0.8))


def test_blackman_at_origin_equals_window():
    assert blackman(0.0) == pytest.approx(blackman_window(0.0))


def test_blackman_outside_support():
    assert blackman(2.0) == 0.0
    assert blackman(-3.0) == 0.0


@pytest.mark.parametrize("x", [0.4, 1.3, 1.9])
def test_blackman_is_even(x):
    assert blackman(x) == pytest.approx(blackman(-x))


def test_blackman_window_periodic():
    assert blackman_window(0.3) == pytest.approx(blackman_window(1.3))
    assert blackman_window(0.3) == pytest.approx(blackman_window(-0.3))


def test_bohman_endpoints():
    assert bohman(0.0) == pytest.approx(1.0)
    assert bohman(1.0) == pytest.approx(0.0, abs=1e-12)
    assert bohman(1.5) == 0.0
    assert bohman(-1.5) == 0.0


@pytest.mark.parametrize("x", [0.1, 0.5, 0.95])
def test_bohman_is_even_and_decreasing(x):
    assert bohman(x) == pytest.approx(bohman(-x))
    assert bohman(x) < bohman(x / 2.0)


def test_gaussian_decreases_with_x():
    assert gaussian(0.0) > gaussian(0.5) > gaussian(1.0) > 0.0


def test_gaussian_exponential_ratio():
    # exp(-x / den) makes the ratio between equal steps constant.
    r1 = gaussian(0.5) / gaussian(0.0)
    r2 = gaussian(1.0) / gaussian(0.5)
    assert r1 == pytest.approx(r2)


def test_hann_values():
    assert hann(0.0) == pytest.approx(0.25)
    assert hann(2.5) == 0.0
    assert hann(-2.5) == 0.0
    assert hann(2.0) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("x", [0.3, 1.0, 1.8])
def test_hann_is_even(x):
    assert hann(x) == pytest.approx(hann(-x))


def test_hamming_branches():
    assert hamming(0.0) == 1.0
    assert hamming(1.0) == 0.0
    assert hamming(-1.2) == 0.0
    assert hamming(0.5) == pytest.approx(0.54)


def test_hanning_branches():
    assert hanning(0.0) == 1.0
    assert hanning(1.0) == 0.0
    assert hanning(0.5) == pytest.approx(0.5)
    assert hanning(-0.3) == pytest.approx(hanning(0.3))


def test_bessel_i0_at_zero():
    assert bessel_i0(0.0) == 1.0


def test_bessel_i0_even_and_increasing():
    assert bessel_i0(2.0) == pytest.approx(bessel_i0(-2.0))
    assert bessel_i0(1.0) < bessel_i0(2.0) < bessel_i0(6.33)


def test_kaiser_peak_and_support():
    assert kaiser(0.0) == pytest.approx(1.0)
    assert kaiser(1.5) == 0.0
    assert kaiser(1.0) == pytest.approx(1.0 / bessel_i0(6.33))


def test_kaiser_below_negative_one_takes_nan_path():
    assert kaiser(-2.0) == pytest.approx(kaiser(1.0))


@pytest.mark.parametrize("x", [0.2, 0.6, 0.9])
def test_kaiser_symmetric_inside_support(x):
    assert kaiser(x) == pytest.approx(kaiser(-x))
    assert 0.0 < kaiser(x) < 1.0