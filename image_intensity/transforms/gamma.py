"""
Gamma Correction
"""

import numpy as np
from typing import Optional
import logging

from ..core.image_buffer import COLOR_CHANNELS, is_color, prepare_output, validate_image
from ..core.lookup_table import LookupTable
from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def gamma_correction(image: np.ndarray, gamma: float, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Apply new = 255 * (old / 255) ^ (1 / gamma) to every channel.

    Args:
        image: Grayscale or RGBA image
        gamma: Strictly positive gamma value
        out: Optional output image; ``image`` is modified in place when omitted

    Returns:
        The corrected image (``out`` or ``image``)

    Raises:
        InvalidArgumentError: If gamma is not strictly positive. Neither
            ``image`` nor ``out`` is touched in that case.
    """
    validate_image(image)

    if not gamma > 0:
        logger.error(f"Rejected gamma value: {gamma}")
        raise InvalidArgumentError(f"The gamma value must be positive, got {gamma}")

    target = prepare_output(image, out)
    inverse_gamma = 1.0 / gamma

    channels = COLOR_CHANNELS if is_color(target) else 1
    lut = LookupTable.from_function(lambda x: np.power(x / 255.0, inverse_gamma) * 255.0, channels)
    lut.apply(target)

    logger.debug(f"Gamma correction applied: gamma={gamma}")
    return target
