# colorspace.py
"""
Pixel normalization and the linear RGB -> Lab-like conversion.

Both images go through exactly the same steps before any SSIM is computed:
alpha blending over mid-gray (RGBA only), sRGB -> linear lookup (color only),
and a Lab transform rescaled so every output channel sits roughly in 0..1.
"""
import numpy as np

from .errors import UnsupportedChannelCount
from .raster import as_planes

BACKGROUND_GRAY = 128


def _single(value: float) -> float:
    # Lab constants are single-precision literals widened to double;
    # existing scores depend on that rounding.
    return float(np.float32(value))


LAB_EPSILON = _single(0.00885645167903563081)
LAB_OFFSET = _single(0.13793103448275862068)
LAB_SLOPE = _single(7.78703703703703703703)
LAB_EXPONENT = _single(1.0 / 3.0)

# rows: fx, fy, fz; columns: R, G, B
XYZ_MATRIX = tuple(tuple(_single(v) for v in row) for row in (
    (0.43393624408206207259, 0.37619779063650710152, 0.18983429773803261441),
    (0.2126729, 0.7151522, 0.0721750),
    (0.01775381083562901744, 0.10945087235996326905, 0.87263921028466483011),
))

L_SCALE = _single(1.16)
A_OFFSET, A_SCALE = _single(0.39181818181818181818), _single(2.27272727272727272727)
B_OFFSET, B_SCALE = _single(0.49045454545454545454), _single(0.90909090909090909090)


def _srgb_to_linear_lut() -> np.ndarray:
    c = np.arange(256, dtype=np.float64) / 255.0
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


SRGB_TO_LINEAR = _srgb_to_linear_lut()


def blend_alpha(img: np.ndarray) -> np.ndarray:
    """Composite BGRA over a gray background, so semi-transparent colors compare fairly."""
    wide = img.astype(np.int32)
    alpha = wide[:, :, 3:4]
    out = img.copy()
    out[:, :, :3] = (alpha * wide[:, :, :3] + (255 - alpha) * BACKGROUND_GRAY) // 255
    return out


def _lab_response(t: np.ndarray) -> np.ndarray:
    # clamp keeps the discarded branch of np.where free of NaN warnings
    root = np.power(np.maximum(t, 0.0), LAB_EXPONENT) - LAB_OFFSET
    return np.where(t > LAB_EPSILON, root, LAB_SLOPE * t)


def rgb_to_lab(img: np.ndarray) -> np.ndarray:
    """
    Convert linear BGR(A) in place to rescaled L*a*b* (D65 adjustment included).
    Channel 3, if present, is left alone.
    """
    b, g, r = img[:, :, 0], img[:, :, 1], img[:, :, 2]
    (xr, xg, xb), (yr, yg, yb), (zr, zg, zb) = XYZ_MATRIX

    fx = r * xr + g * xg + b * xb
    fy = r * yr + g * yg + b * yb
    fz = r * zr + g * zg + b * zb

    x = _lab_response(fx)
    y = _lab_response(fy)
    z = _lab_response(fz)

    img[:, :, 0] = y * L_SCALE
    img[:, :, 1] = A_OFFSET + A_SCALE * (x - y)
    img[:, :, 2] = B_OFFSET + B_SCALE * (y - z)
    return img


def normalize(img: np.ndarray) -> np.ndarray:
    """
    Turn an 8-bit raster into the float64 (H, W, C) buffer the pyramid works on.

    Grayscale is taken as already linear and is only rescaled to 0..1.
    """
    img = as_planes(img)
    nchan = img.shape[2]
    if nchan == 1:
        return img.astype(np.float64) / 255.0
    if nchan not in (3, 4):
        raise UnsupportedChannelCount(nchan)
    if nchan == 4:
        img = blend_alpha(img)
    return rgb_to_lab(SRGB_TO_LINEAR[img])
