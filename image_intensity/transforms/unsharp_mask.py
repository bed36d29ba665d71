"""
Unsharp Mask Sharpening

Subtracts a weighted Gaussian-blurred copy from the image to amplify
high-frequency detail.
"""

import numpy as np
from typing import Optional
import logging

from ..core.image_buffer import is_color, prepare_output, validate_image
from ..core.image_filter import gaussian_blur, validate_kernel_size
from ..core.lookup_table import saturate

logger = logging.getLogger(__name__)


def _sharpen_plane(plane: np.ndarray, size: int, weight: float) -> None:
    blurred = gaussian_blur(plane, size)
    plane[...] = saturate((plane - weight * blurred) / (1.0 - weight))


def unsharp_mask(image: np.ndarray,
                 size: int = 7,
                 weight: float = 0.6,
                 out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Sharpen an image with the unsharp mask technique.

    new = (old - weight * blurred) / (1 - weight), saturated to [0, 255].
    A weight outside [0, 1) leaves the image unchanged. On RGBA images
    only R, G and B are sharpened; alpha is kept as is.

    Args:
        image: Grayscale or RGBA image
        size: Odd size of the Gaussian blur kernel
        weight: Sharpening weight in [0, 1)
        out: Optional output image; ``image`` is modified in place when omitted

    Returns:
        The sharpened image (``out`` or ``image``)
    """
    validate_image(image)

    if not 0.0 <= weight < 1.0:
        logger.debug(f"Unsharp mask skipped: weight {weight} outside [0, 1)")
        return prepare_output(image, out)

    validate_kernel_size(size)
    target = prepare_output(image, out)

    if target.size == 0:
        return target

    if is_color(target):
        for c in range(3):
            _sharpen_plane(target[:, :, c], size, weight)
    else:
        _sharpen_plane(target, size, weight)

    logger.debug(f"Unsharp mask applied: size={size}, weight={weight}")
    return target
