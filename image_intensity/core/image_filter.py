"""
Gaussian Filtering

Floating-point Gaussian blur of grayscale planes.
"""

import cv2
import numpy as np
from typing import Optional
import logging

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def validate_kernel_size(size: int) -> None:
    """Check that a Gaussian kernel size is a positive odd integer."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size <= 0 or size % 2 == 0:
        logger.error(f"Rejected Gaussian kernel size: {size!r}")
        raise InvalidArgumentError(f"Gaussian kernel size must be a positive odd integer, got {size!r}")


def gaussian_blur(image: np.ndarray, size: int = 7, sigma: Optional[float] = None) -> np.ndarray:
    """
    Blur a grayscale plane with a normalized Gaussian kernel.

    Args:
        image: Single-channel plane (any numeric dtype)
        size: Odd kernel size
        sigma: Standard deviation; (size - 1) / 6 when omitted or not positive

    Returns:
        float64 plane of identical dimensions
    """
    validate_kernel_size(size)

    if sigma is None or sigma <= 0:
        sigma = (size - 1) / 6.0

    blurred = image.astype(np.float64)
    if blurred.size == 0 or size == 1:
        return blurred

    return cv2.GaussianBlur(blurred, (int(size), int(size)), sigmaX=sigma, sigmaY=sigma,
                            borderType=cv2.BORDER_REFLECT_101)
