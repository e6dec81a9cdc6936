import pytest

from picscale.nearest import resize_nearest


def _pixels(data, channels):
    return [tuple(data[i : i + channels]) for i in range(0, len(data), channels)]


def test_same_size_is_copy():
    src = list(range(2 * 3 * 3))
    out = resize_nearest(src, 3, 2, 3, 2, 3)
    assert out == src


def test_upscale_single_pixel():
    src = [10, 20, 30, 40]
    out = resize_nearest(src, 1, 1, 3, 5, 4)
    assert len(out) == 3 * 5 * 4
    assert _pixels(out, 4) == [tuple(src)] * 15


def test_downscale_row_picks_even_columns():
    src = [1, 2, 3, 4]
    out = resize_nearest(src, 4, 1, 2, 1, 1)
    assert out == [src[0], src[2]]


def test_upscale_row_pattern():
    src = [7, 9]
    out = resize_nearest(src, 2, 1, 4, 1, 1)
    assert out == [src[0], src[0], src[0], src[1]]


def test_vertical_downscale():
    src = [1, 1, 2, 2, 3, 3, 4, 4]
    out = resize_nearest(src, 2, 4, 2, 2, 1)
    assert out == [1, 1, 3, 3]


@pytest.mark.parametrize(
    "size",
    [(5, 7, 3, 2), (3, 3, 8, 6), (10, 1, 4, 4), (2, 9, 2, 3)],
)
def test_output_pixels_come_from_source(size):
    sw, sh, dw, dh = size
    channels = 3
    src = [(i * 37) % 251 for i in range(sw * sh * channels)]
    out = resize_nearest(src, sw, sh, dw, dh, channels)
    assert len(out) == dw * dh * channels
    source_pixels = set(_pixels(src, channels))
    assert all(p in source_pixels for p in _pixels(out, channels))


def test_accepts_bytes():
    src = bytes([1, 2, 3, 4, 5, 6])
    out = resize_nearest(src, 1, 2, 1, 1, 3)
    assert out == [1, 2, 3]


@pytest.mark.parametrize(
    "dims",
    [(0, 1, 1, 1), (1, 0, 1, 1), (1, 1, 0, 1), (1, 1, 1, 0)],
)
def test_zero_size_rejected(dims):
    with pytest.raises(ValueError):
        resize_nearest([0, 0, 0, 0], *dims, 1)


def test_short_source_rejected():
    with pytest.raises(ValueError):
        resize_nearest([0, 0, 0], 2, 2, 1, 1, 1)


def test_zero_channels_rejected():
    with pytest.raises(ValueError):
        resize_nearest([0], 1, 1, 1, 1, 0)