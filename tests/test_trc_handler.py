from array import array

import pytest

from picscale.trc import TransferFunction
from picscale.trc_handler import (
    image16_to_linear16,
    image_f32_to_linear_f32,
    image_to_linear,
    linear16_to_gamma_image16,
    linear_f32_to_gamma_image_f32,
    linear_to_gamma_image,
)


def _gradient8():
    return bytearray(range(256))


def test_linearize_srgb_is_monotonic_and_darkens():
    image = _gradient8()
    image_to_linear(image, 1, TransferFunction.SRGB)
    values = list(image)
    assert values == sorted(values)
    assert values[0] == 0
    assert all(out <= inp for out, inp in zip(values, range(256)))


def test_gamma_srgb_is_monotonic_and_brightens():
    image = _gradient8()
    linear_to_gamma_image(image, 1, TransferFunction.SRGB)
    values = list(image)
    assert values == sorted(values)
    assert values[0] == 0
    assert all(out >= inp for out, inp in zip(values, range(256)))


@pytest.mark.parametrize("channels", [2, 4])
def test_alpha_is_untouched(channels):
    pixels = 64
    image = bytearray()
    for i in range(pixels):
        image.extend([i * 3 % 256] * (channels - 1))
        image.append(200)
    image_to_linear(image, channels, TransferFunction.LINEAR)
    alpha = image[channels - 1 :: channels]
    assert list(alpha) == [200] * pixels
    colors = [v for i, v in enumerate(image) if i % channels != channels - 1]
    assert colors == [0] * len(colors)


def test_rgb_converts_all_three_channels():
    image = bytearray([10, 100, 250, 10, 100, 250])
    linear_to_gamma_image(image, 3, TransferFunction.LINEAR)
    assert list(image) == [0] * 6


def test_trailing_partial_pixel_left_alone():
    image = bytearray([50, 60, 70, 80, 90])
    image_to_linear(image, 3, TransferFunction.LINEAR)
    assert list(image) == [0, 0, 0, 80, 90]


@pytest.mark.parametrize("channels", [0, 5])
def test_invalid_channels(channels):
    with pytest.raises(ValueError):
        image_to_linear(bytearray(10), channels, TransferFunction.SRGB)
    with pytest.raises(ValueError):
        image_f32_to_linear_f32([0.5] * 10, channels, TransferFunction.SRGB)


@pytest.mark.parametrize("bit_depth", [0, 17])
def test_invalid_bit_depth(bit_depth):
    with pytest.raises(ValueError):
        image16_to_linear16(array("H", [0, 1]), 1, bit_depth, TransferFunction.SRGB)
    with pytest.raises(ValueError):
        linear16_to_gamma_image16(array("H", [0, 1]), 1, bit_depth, TransferFunction.SRGB)


def test_16bit_linearize_monotonic():
    image = array("H", range(1024))
    image16_to_linear16(image, 1, 10, TransferFunction.REC709)
    values = list(image)
    assert values == sorted(values)
    assert values[0] == 0
    assert all(out <= inp for out, inp in zip(values, range(1024)))


def test_16bit_gamma_monotonic_with_alpha():
    image = array("H")
    for i in range(0, 4096, 8):
        image.extend([i, i, i, 4095])
    linear16_to_gamma_image16(image, 4, 12, TransferFunction.SRGB)
    reds = list(image[0::4])
    assert reds == sorted(reds)
    assert list(image[3::4]) == [4095] * (len(image) // 4)
    assert list(image[0::4]) == list(image[1::4]) == list(image[2::4])


def test_16bit_value_beyond_depth_fails():
    image = array("H", [2000])
    with pytest.raises(IndexError):
        image16_to_linear16(image, 1, 10, TransferFunction.SRGB)


def test_f32_round_trip():
    original = [i / 20.0 for i in range(21)]
    image = list(original)
    image_f32_to_linear_f32(image, 1, TransferFunction.SRGB)
    linear_f32_to_gamma_image_f32(image, 1, TransferFunction.SRGB)
    assert image == pytest.approx(original, abs=1e-9)


def test_f32_luma_alpha_keeps_alpha():
    image = [0.5, 0.25, 0.75, 0.125]
    image_f32_to_linear_f32(image, 2, TransferFunction.GAMMA2P2)
    assert image[1] == 0.25
    assert image[3] == 0.125
    assert image[0] == pytest.approx(TransferFunction.GAMMA2P2.linearize(0.5))
    assert image[2] == pytest.approx(TransferFunction.GAMMA2P2.linearize(0.75))