"""
Image Buffer Primitives

Buffer validation, lookup tables, histograms, color conversion and
Gaussian filtering used by the intensity transform kernels.
"""

from .image_buffer import (
    is_color, validate_image, validate_color_image, prepare_output,
    get_min_max, perform_lut, split_channels, merge_channels
)
from .lookup_table import LookupTable, saturate
from .histogram import compute_histogram, compute_cdf
from .color_conversion import rgba_to_hsv, hsv_to_rgba
from .image_filter import gaussian_blur

__all__ = [
    'is_color', 'validate_image', 'validate_color_image', 'prepare_output',
    'get_min_max', 'perform_lut', 'split_channels', 'merge_channels',
    'LookupTable', 'saturate',
    'compute_histogram', 'compute_cdf',
    'rgba_to_hsv', 'hsv_to_rgba',
    'gaussian_blur'
]
