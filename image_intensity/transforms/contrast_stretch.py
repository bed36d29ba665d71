"""
Contrast Stretching

Linearly maps the observed intensity range of an image onto [0, 255],
either per channel or on the saturation and value planes in HSV space.
"""

import numpy as np
from typing import Optional
import logging

from ..core.image_buffer import (
    COLOR_CHANNELS, LUT_SIZE, get_min_max, is_color, prepare_output,
    validate_color_image, validate_image
)
from ..core.lookup_table import LookupTable
from ..core.color_conversion import rgba_to_hsv, hsv_to_rgba

logger = logging.getLogger(__name__)


def build_stretch_table(plane: np.ndarray) -> np.ndarray:
    """
    Build the stretch table of a non-empty grayscale plane.

    lut[x] = 255 * (x - min) // (max - min) for x in [min, max]. A flat
    plane maps its single intensity onto itself. Other entries are zero.

    Args:
        plane: uint8 grayscale plane (may be a strided channel view)

    Returns:
        uint8 array of 256 entries
    """
    table = np.zeros(LUT_SIZE, dtype=np.uint8)
    min_value, max_value = get_min_max(plane)
    value_range = max_value - min_value

    if value_range > 0:
        x = np.arange(min_value, max_value + 1, dtype=np.int64)
        table[x] = 255 * (x - min_value) // value_range
    else:
        table[min_value] = min_value

    return table


def stretch_contrast(image: np.ndarray,
                     use_hsv: bool = False,
                     out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Stretch the contrast of a grayscale or RGBA image.

    RGBA channels (alpha included) are stretched independently, each with
    its own min/max, unless ``use_hsv`` is set, in which case the call is
    delegated to :func:`stretch_contrast_hsv`.

    Args:
        image: Grayscale or RGBA image
        use_hsv: For RGBA images, stretch saturation and value in HSV space
        out: Optional output image; ``image`` is modified in place when omitted

    Returns:
        The stretched image (``out`` or ``image``)
    """
    validate_image(image)

    if use_hsv and is_color(image):
        return stretch_contrast_hsv(image, out=out)

    target = prepare_output(image, out)
    if target.size == 0:
        logger.debug("Contrast stretch skipped: empty image")
        return target

    if is_color(target):
        table = np.stack([build_stretch_table(target[:, :, c]) for c in range(COLOR_CHANNELS)], axis=1)
    else:
        table = build_stretch_table(target)

    LookupTable(table).apply(target)
    return target


def _rescale_plane(plane: np.ndarray, name: str) -> None:
    min_value, max_value = get_min_max(plane)
    value_range = max_value - min_value

    if value_range > 0.0:
        plane -= min_value
        plane /= value_range
    else:
        logger.debug(f"HSV stretch: {name} plane is flat, left unchanged")


def stretch_contrast_hsv(image: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Stretch the contrast of an RGBA image in HSV space.

    Saturation and value are each rescaled to occupy [0, 1]; hue is left
    untouched so colors keep their identity. Alpha is preserved.

    Args:
        image: RGBA image
        out: Optional output image; ``image`` is modified in place when omitted

    Returns:
        The stretched image (``out`` or ``image``)
    """
    validate_color_image(image)
    target = prepare_output(image, out)

    if target.size == 0:
        logger.debug("HSV contrast stretch skipped: empty image")
        return target

    planes = rgba_to_hsv(target, dtype=np.float64)
    _rescale_plane(planes.saturation, 'saturation')
    _rescale_plane(planes.value, 'value')

    hsv_to_rgba(planes, alpha=target[:, :, 3].copy(), out=target)
    return target
