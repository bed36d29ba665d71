"""
Pixel Buffer Helpers

Validation and bulk operations over 8-bit grayscale (H x W) and
RGBA (H x W x 4) numpy images.
"""

import cv2
import numpy as np
from typing import List, Optional, Tuple, Union

from ..exceptions import ImageFormatError


COLOR_CHANNELS = 4
LUT_SIZE = 256


def is_color(image: np.ndarray) -> bool:
    """Return True for an RGBA image, False for grayscale."""
    return image.ndim == 3


def validate_image(image: np.ndarray) -> None:
    """
    Check that an image is an 8-bit grayscale or RGBA buffer.

    Args:
        image: Image to check

    Raises:
        ImageFormatError: If the dtype or layout is not supported
    """
    if not isinstance(image, np.ndarray):
        raise ImageFormatError(f"Image must be a numpy array, got {type(image).__name__}")

    if image.dtype != np.uint8:
        raise ImageFormatError(f"Image must be uint8, got {image.dtype}")

    if image.ndim == 2:
        return

    if image.ndim == 3 and image.shape[2] == COLOR_CHANNELS:
        return

    raise ImageFormatError(
        f"Image must be grayscale (H, W) or RGBA (H, W, 4), got shape {image.shape}"
    )


def validate_color_image(image: np.ndarray) -> None:
    """Check that an image is an 8-bit RGBA buffer."""
    validate_image(image)
    if not is_color(image):
        raise ImageFormatError("Operation requires an RGBA image")


def prepare_output(image: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Resolve the buffer a kernel should write to.

    With no output buffer the kernel works in place on ``image``. Otherwise
    ``image`` is copied into ``out`` and ``out`` becomes the working buffer.

    Args:
        image: Input image
        out: Optional output image with the same shape and dtype

    Returns:
        Buffer to transform in place
    """
    if out is None or out is image:
        return image

    if not isinstance(out, np.ndarray) or out.shape != image.shape or out.dtype != image.dtype:
        raise ImageFormatError(
            "Output image must have the same shape and dtype as the input image"
        )

    np.copyto(out, image)
    return out


def get_min_max(image: np.ndarray) -> Tuple[Union[int, float], Union[int, float]]:
    """
    Scan a single-channel buffer for its minimum and maximum sample values.

    Works for byte and floating-point planes alike.

    Args:
        image: Non-empty single-channel plane

    Returns:
        Tuple of (min, max) sample values
    """
    if image.size == 0:
        raise ImageFormatError("Cannot compute min/max of an empty image")

    min_value, max_value = image.min(), image.max()
    return min_value.item(), max_value.item()


def perform_lut(image: np.ndarray, table: np.ndarray) -> np.ndarray:
    """
    Apply a 256-entry lookup table to every sample of an image in place.

    Args:
        image: Grayscale or RGBA image
        table: uint8 table of shape (256,) or, for RGBA images, (256, 4)

    Returns:
        The transformed image (same object as ``image``)
    """
    if image.size == 0:
        return image

    if table.shape[0] != LUT_SIZE:
        raise ImageFormatError(f"Lookup table must have {LUT_SIZE} entries, got {table.shape[0]}")

    if table.ndim == 2:
        if not is_color(image) or table.shape[1] != COLOR_CHANNELS:
            raise ImageFormatError("Per-channel lookup table requires an RGBA image")
        # OpenCV reads a (256, 1, 4) array as a 4-channel table
        lut = np.ascontiguousarray(table.reshape(LUT_SIZE, 1, COLOR_CHANNELS))
    else:
        lut = table

    image[...] = cv2.LUT(np.ascontiguousarray(image), lut)
    return image


def split_channels(image: np.ndarray) -> List[np.ndarray]:
    """
    Split an RGBA image into four contiguous grayscale planes.

    Args:
        image: RGBA image

    Returns:
        List of [R, G, B, A] planes
    """
    validate_color_image(image)
    return [np.ascontiguousarray(image[:, :, c]) for c in range(COLOR_CHANNELS)]


def merge_channels(planes: List[np.ndarray], out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Interleave four grayscale planes back into an RGBA image.

    Args:
        planes: [R, G, B, A] planes of identical shape
        out: Optional RGBA buffer to write into

    Returns:
        RGBA image
    """
    if len(planes) != COLOR_CHANNELS:
        raise ImageFormatError(f"Expected {COLOR_CHANNELS} planes, got {len(planes)}")

    shape = planes[0].shape
    if any(plane.shape != shape for plane in planes):
        raise ImageFormatError("All channel planes must have the same dimensions")

    if out is None:
        out = np.empty((*shape, COLOR_CHANNELS), dtype=np.uint8)

    for c, plane in enumerate(planes):
        out[:, :, c] = plane

    return out
