# picscale

This package provides building blocks for scaling images that are stored as
flat buffers of interleaved pixels. It uses only the Python standard library.

## What is in it

| Module | Contents |
| --- | --- |
| `picscale.bessel` | `j1`, the Bessel function of the first kind of order one, and `jinc(x) = j1(x) / x`, which is 0 at the origin. |
| `picscale.splines` | Piecewise-polynomial kernels: `bc_spline` and its presets `hermite_spline`, `b_spline`, `mitchell_netravalli`, `catmull_rom`, `robidoux`, `robidoux_sharp`; also `cubic_spline`, `bicubic_spline`, `spline16`, `spline36`, `spline64`, `lagrange`, `lagrange2`, `lagrange3`, `quadric` and `bilinear`. |
| `picscale.windows` | Window and trigonometric kernels: `bartlett`, `bartlett_hann`, `blackman_window`, `blackman`, `bohman`, `gaussian`, `hann`, `hamming`, `hanning`, `bessel_i0`, `kaiser`, `sinc`, `sphinx` and `welch`. |
| `picscale.lanczos` | Lanczos kernels windowed by sinc (`lanczos_sinc`, `lanczos2`, `lanczos3`, `lanczos4`, `lanczos6`) and by jinc (`lanczos_jinc`, `lanczos2_jinc`, `lanczos3_jinc`, `lanczos4_jinc`, `lanczos6_jinc`). |
| `picscale.sampler` | The `ResamplingFunction` enum, with codes 0 to 38. `ResamplingFunction.from_value` maps unknown codes to `BILINEAR`. `resampling_filter()` returns a frozen `ResamplingFilter` holding the kernel, the minimum kernel size, an optional `ResamplingWindow`, and two flags, `is_resizable_kernel` and `is_area_filter`. The module also has `box_weight`. |
| `picscale.trc` | Transfer functions: sRGB, Rec.709, gamma 2.2 and 2.8, SMPTE 428 and 240, Log100, Log100Sqrt10, BT.1361, IEC 61966 and linear. Each is a plain function, and each is also reachable through the `TransferFunction` enum with `linearize(v)` and `gamma(v)`. `TransferFunction.from_value` maps unknown codes to `SRGB`. |
| `picscale.numeric` | `cpu_round` rounds halves away from zero. `to_u8` and `to_u16(x, bit_depth)` round and saturate, and map NaN to 0. `mlaf(acc, a, b)` returns `acc + a * b`. |
| `picscale.trc_handler` | Converts images in place between gamma-encoded and linear light. 8-bit images use a lookup table (`image_to_linear`, `linear_to_gamma_image`), as do images of 1 to 16 bits (`image16_to_linear16`, `linear16_to_gamma_image16`). Float images use direct evaluation (`image_f32_to_linear_f32`, `linear_f32_to_gamma_image_f32`). |
| `picscale.nearest` | `resize_nearest`, which resizes by nearest neighbour. |

## Examples

Evaluate a kernel through its filter description:

```python
from picscale.sampler import ResamplingFunction

flt = ResamplingFunction.LANCZOS3.resampling_filter()
print(flt.min_kernel_size, flt.kernel(0.5))
```

Convert an sRGB image to linear light in place:

```python
from picscale.trc import TransferFunction
from picscale.trc_handler import image_to_linear

pixels = bytearray([255, 128, 0, 255] * 4)  # 2x2 RGBA
image_to_linear(pixels, 4, TransferFunction.SRGB)
```

Images with 1 or 2 channels have only their first sample converted. Images
with 3 or 4 channels have their first three samples converted. In 2- and
4-channel images the last sample is alpha and is left unchanged. If the
buffer ends in an incomplete pixel, that pixel is not touched. A channel count
outside 1 to 4 raises `ValueError`, and so does a bit depth outside 1 to 16.

Resize with nearest neighbour:

```python
from picscale.nearest import resize_nearest

src = [1, 2, 3, 4]                      # 2x2, one channel
dst = resize_nearest(src, 2, 2, 4, 4, 1)
assert len(dst) == 16
```

`resize_nearest` returns a new list. It raises `ValueError` in three cases:
the channel count is below 1, a dimension is zero or negative, or the source
is shorter than `width * height * channels`.

## What it does not do

The package describes resampling filters, but it does not resize with them.
It does not compute convolution weights, and it has no filtered (bilinear,
Lanczos, and so on) resize of whole images. The only resize it offers is
nearest neighbour. It also does not read or write image files, and it has no
command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```