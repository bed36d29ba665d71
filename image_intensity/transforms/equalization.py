"""
Histogram Equalization

Redistributes intensities over the full [0, 255] range so that the
cumulative histogram becomes linear.
"""

import numpy as np
from typing import Optional
import logging

from ..core.image_buffer import (
    is_color, prepare_output, validate_image, split_channels, merge_channels
)
from ..core.lookup_table import LookupTable, saturate
from ..core.histogram import compute_histogram, compute_cdf
from ..core.color_conversion import rgba_to_hsv, hsv_to_rgba

logger = logging.getLogger(__name__)


def build_equalization_table(plane: np.ndarray) -> LookupTable:
    """
    Build the equalization table of a non-empty grayscale plane.

    Only the intensities between the first and the last populated bin are
    mapped; the remaining entries are zero. A constant plane maps its single
    intensity onto itself.

    Args:
        plane: uint8 grayscale plane

    Returns:
        LookupTable valid for this plane only
    """
    distribution = compute_cdf(compute_histogram(plane))
    lut = LookupTable.zeros()

    nb_pixels = distribution.total
    if nb_pixels == distribution.cdf_min:
        lut.table[distribution.min_value] = distribution.min_value
        return lut

    indices = np.arange(distribution.min_value, distribution.max_value + 1)
    scale = 255.0 / (nb_pixels - distribution.cdf_min)
    lut.table[indices] = saturate((distribution.cdf[indices] - distribution.cdf_min) * scale)

    logger.debug(f"Equalization table: bins {distribution.min_value}-{distribution.max_value}, "
                 f"cdf_min={distribution.cdf_min}, pixels={nb_pixels}")
    return lut


def _equalize_plane(plane: np.ndarray) -> None:
    if plane.size == 0:
        return
    build_equalization_table(plane).apply(plane)


def equalize_histogram(image: np.ndarray,
                       use_hsv: bool = False,
                       out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Equalize the histogram of a grayscale or RGBA image.

    Args:
        image: Grayscale or RGBA image
        use_hsv: For RGBA images, equalize only the value plane in HSV space
            instead of each of the R, G, B and A channels. Ignored for
            grayscale images.
        out: Optional output image; ``image`` is modified in place when omitted

    Returns:
        The equalized image (``out`` or ``image``)
    """
    validate_image(image)
    target = prepare_output(image, out)

    if target.size == 0:
        logger.debug("Histogram equalization skipped: empty image")
        return target

    if not is_color(target):
        _equalize_plane(target)
        return target

    if use_hsv:
        planes = rgba_to_hsv(target, dtype=np.uint8)
        _equalize_plane(planes.value)
        hsv_to_rgba(planes, alpha=target[:, :, 3].copy(), out=target)
    else:
        channels = split_channels(target)
        for channel in channels:
            _equalize_plane(channel)
        merge_channels(channels, out=target)

    return target
