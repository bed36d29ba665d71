"""
Intensity Transforms for 8-bit Images

Whole-image intensity transforms for grayscale and RGBA images.

This package implements:
- Brightness/contrast linear adjustment
- Histogram equalization per channel or on the HSV value plane
- Gamma correction
- Linear contrast stretching per channel or in HSV space
- Unsharp mask sharpening
- A configurable enhancement chain combining the above
"""

__version__ = "1.0.0"
__author__ = "Image Intensity Team"

from .transforms import (
    adjust, equalize_histogram, gamma_correction,
    stretch_contrast, stretch_contrast_hsv, unsharp_mask
)
from .core import LookupTable, compute_histogram, compute_cdf, rgba_to_hsv, hsv_to_rgba
from .preprocessing import ImageEnhancer
from .data_models import CumulativeDistribution, HSVPlanes, EnhancementResult
from .exceptions import IntensityTransformError, InvalidArgumentError, ImageFormatError

__all__ = [
    # Transforms
    'adjust', 'equalize_histogram', 'gamma_correction',
    'stretch_contrast', 'stretch_contrast_hsv', 'unsharp_mask',
    # Primitives
    'LookupTable', 'compute_histogram', 'compute_cdf', 'rgba_to_hsv', 'hsv_to_rgba',
    # Preprocessing
    'ImageEnhancer',
    # Data Models
    'CumulativeDistribution', 'HSVPlanes', 'EnhancementResult',
    # Exceptions
    'IntensityTransformError', 'InvalidArgumentError', 'ImageFormatError'
]
