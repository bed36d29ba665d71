"""
RGBA / HSV Color Conversion

Converts RGBA images into separate hue, saturation and value planes and
back. Two precisions are provided:

- byte: uint8 planes, hue spanning the full turn over 0..255 (OpenCV)
- float: float64 planes in [0, 1], hue as a fraction of the full turn

The round trip is only as exact as the chosen precision.
"""

import cv2
import numpy as np
from typing import Optional

from .image_buffer import COLOR_CHANNELS, validate_color_image
from ..data_models import HSVPlanes
from ..exceptions import ImageFormatError


def _rgb_to_hsv_float(rgb: np.ndarray):
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    maxc = rgb.max(axis=-1)
    minc = rgb.min(axis=-1)
    delta = maxc - minc

    value = maxc
    saturation = np.zeros_like(maxc)
    np.divide(delta, maxc, out=saturation, where=maxc > 0)

    # Grays (delta == 0) get hue 0
    safe_delta = np.where(delta > 0, delta, 1.0)
    sector = np.select(
        [delta == 0, maxc == r, maxc == g],
        [0.0, (g - b) / safe_delta, 2.0 + (b - r) / safe_delta],
        default=4.0 + (r - g) / safe_delta
    )
    hue = (sector / 6.0) % 1.0

    return hue, saturation, value


def _hsv_to_rgb_float(hue: np.ndarray, saturation: np.ndarray, value: np.ndarray) -> np.ndarray:
    h6 = (hue % 1.0) * 6.0
    i = np.floor(h6)
    f = h6 - i
    sector = i.astype(np.int64) % 6

    p = value * (1.0 - saturation)
    q = value * (1.0 - saturation * f)
    t = value * (1.0 - saturation * (1.0 - f))

    conditions = [sector == k for k in range(6)]
    r = np.select(conditions, [value, q, p, p, t, value])
    g = np.select(conditions, [t, value, value, q, p, p])
    b = np.select(conditions, [p, p, t, value, value, q])

    return np.dstack([r, g, b])


def rgba_to_hsv(image: np.ndarray, dtype=np.uint8) -> HSVPlanes:
    """
    Convert an RGBA image to HSV planes. Alpha is ignored.

    Args:
        image: RGBA image
        dtype: np.uint8 for byte planes, np.float64 for floating-point planes

    Returns:
        HSVPlanes with one plane per component
    """
    validate_color_image(image)
    height, width = image.shape[:2]
    float_precision = np.dtype(dtype).kind == 'f'

    if image.size == 0:
        empty = np.zeros((height, width), dtype=np.float64 if float_precision else np.uint8)
        return HSVPlanes(hue=empty, saturation=empty.copy(), value=empty.copy())

    if float_precision:
        rgb = image[:, :, :3].astype(np.float64) / 255.0
        hue, saturation, value = _rgb_to_hsv_float(rgb)
        return HSVPlanes(hue=hue, saturation=saturation, value=np.ascontiguousarray(value))

    hsv = cv2.cvtColor(np.ascontiguousarray(image[:, :, :3]), cv2.COLOR_RGB2HSV_FULL)
    return HSVPlanes(
        hue=np.ascontiguousarray(hsv[:, :, 0]),
        saturation=np.ascontiguousarray(hsv[:, :, 1]),
        value=np.ascontiguousarray(hsv[:, :, 2])
    )


def hsv_to_rgba(planes: HSVPlanes,
                alpha: Optional[np.ndarray] = None,
                out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Convert HSV planes back to an RGBA image.

    The precision is taken from the planes' dtype (uint8 or floating point).

    Args:
        planes: Hue, saturation and value planes
        alpha: Alpha plane to attach; fully opaque when omitted
        out: Optional RGBA buffer to write into

    Returns:
        RGBA image
    """
    if not (planes.hue.shape == planes.saturation.shape == planes.value.shape):
        raise ImageFormatError("HSV planes must have the same dimensions")

    height, width = planes.shape
    if out is None:
        out = np.empty((height, width, COLOR_CHANNELS), dtype=np.uint8)

    out[:, :, 3] = 255 if alpha is None else alpha

    if out.size == 0:
        return out

    if np.issubdtype(planes.value.dtype, np.floating):
        rgb = _hsv_to_rgb_float(planes.hue, planes.saturation, planes.value)
        out[:, :, :3] = np.clip(np.floor(rgb * 255.0 + 0.5), 0, 255)
    else:
        hsv = np.dstack([planes.hue, planes.saturation, planes.value]).astype(np.uint8)
        out[:, :, :3] = cv2.cvtColor(hsv, cv2.COLOR_HSV2RGB_FULL)

    return out
