"""
Intensity Histogram

256-bin histogram and cumulative distribution over grayscale planes.
"""

import numpy as np

from .image_buffer import LUT_SIZE
from ..data_models import CumulativeDistribution
from ..exceptions import ImageFormatError


def compute_histogram(image: np.ndarray) -> np.ndarray:
    """
    Count the occurrences of every intensity in a grayscale plane.

    Args:
        image: uint8 grayscale plane

    Returns:
        Array of 256 bin counts summing to the pixel count
    """
    if image.dtype != np.uint8 or image.ndim != 2:
        raise ImageFormatError("Histogram requires a uint8 grayscale image")

    return np.bincount(image.ravel(), minlength=LUT_SIZE).astype(np.int64)


def compute_cdf(histogram: np.ndarray) -> CumulativeDistribution:
    """
    Build the cumulative distribution of a 256-bin histogram.

    Args:
        histogram: 256 bin counts of a non-empty image

    Returns:
        CumulativeDistribution with the smallest positive and the largest
        CDF values and the first bins at which they occur
    """
    cdf = np.cumsum(histogram, dtype=np.int64)
    populated = np.flatnonzero(cdf > 0)
    if populated.size == 0:
        raise ImageFormatError("Cannot build a cumulative distribution of an empty histogram")

    # The CDF is non-decreasing, so the first populated bin holds the
    # smallest positive value and the first bin at the total holds the max
    min_value = int(populated[0])
    max_value = int(np.argmax(cdf == cdf[-1]))

    return CumulativeDistribution(
        cdf=cdf,
        cdf_min=int(cdf[min_value]),
        min_value=min_value,
        cdf_max=int(cdf[max_value]),
        max_value=max_value
    )
