"""
Brightness / Contrast Adjustment

Linear intensity mapping new = alpha * old + beta.
"""

import numpy as np
from typing import Optional
import logging

from ..core.image_buffer import COLOR_CHANNELS, is_color, prepare_output, validate_image
from ..core.lookup_table import LookupTable

logger = logging.getLogger(__name__)


def adjust(image: np.ndarray, alpha: float, beta: float, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Adjust brightness and contrast so that new intensity = alpha x old + beta.

    The result is rounded and saturated to [0, 255]. On RGBA images the
    same mapping is applied to all four channels, alpha included.

    Args:
        image: Grayscale or RGBA image
        alpha: Multiplication coefficient
        beta: Constant added to the scaled intensity
        out: Optional output image; ``image`` is modified in place when omitted

    Returns:
        The adjusted image (``out`` or ``image``)
    """
    validate_image(image)
    target = prepare_output(image, out)

    channels = COLOR_CHANNELS if is_color(target) else 1
    lut = LookupTable.from_function(lambda x: alpha * x + beta, channels)
    lut.apply(target)

    logger.debug(f"Brightness adjusted: alpha={alpha}, beta={beta}, channels={channels}")
    return target
