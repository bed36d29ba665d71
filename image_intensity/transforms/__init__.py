"""
Intensity Transform Kernels

Brightness adjustment, histogram equalization, gamma correction,
contrast stretching and unsharp masking.
"""

from .brightness import adjust
from .equalization import equalize_histogram, build_equalization_table
from .gamma import gamma_correction
from .contrast_stretch import stretch_contrast, stretch_contrast_hsv, build_stretch_table
from .unsharp_mask import unsharp_mask

__all__ = [
    'adjust',
    'equalize_histogram', 'build_equalization_table',
    'gamma_correction',
    'stretch_contrast', 'stretch_contrast_hsv', 'build_stretch_table',
    'unsharp_mask'
]
