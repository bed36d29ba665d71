"""
Exception Types for Intensity Transforms

Defines the errors raised by the transform kernels and buffer helpers.
"""


class IntensityTransformError(Exception):
    """Base class for all intensity transform errors."""


class InvalidArgumentError(IntensityTransformError, ValueError):
    """Raised when a transform parameter is outside its valid domain."""


class ImageFormatError(IntensityTransformError, ValueError):
    """Raised when an image is not an 8-bit grayscale or RGBA buffer."""
