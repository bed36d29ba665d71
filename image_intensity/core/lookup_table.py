"""
Lookup Tables

Per-intensity transforms are expressed as a byte-to-byte table built once
per call and applied in a single pass.
"""

from dataclasses import dataclass
from typing import Callable
import numpy as np

from .image_buffer import COLOR_CHANNELS, LUT_SIZE, perform_lut

INTENSITIES = np.arange(LUT_SIZE, dtype=np.float64)


def saturate(values) -> np.ndarray:
    """Round half up and clamp to the [0, 255] byte range."""
    return np.clip(np.floor(np.asarray(values, dtype=np.float64) + 0.5), 0, 255).astype(np.uint8)


@dataclass
class LookupTable:
    """
    Byte-to-byte mapping applied uniformly to every sample.

    ``table`` has shape (256,) for grayscale images or (256, 4) for one
    table per RGBA channel. A table is built for a single image and must
    not be reused on another one: entries outside the value range of the
    image it was built from are zero.
    """
    table: np.ndarray

    def __post_init__(self):
        self.table = np.asarray(self.table, dtype=np.uint8)

    @classmethod
    def zeros(cls, channels: int = 1) -> "LookupTable":
        """Create a zero-initialized table for 1 or 4 channels."""
        shape = (LUT_SIZE,) if channels == 1 else (LUT_SIZE, channels)
        return cls(np.zeros(shape, dtype=np.uint8))

    @classmethod
    def from_function(cls, func: Callable[[np.ndarray], np.ndarray], channels: int = 1) -> "LookupTable":
        """
        Evaluate ``func`` over every intensity and saturate the result.

        Args:
            func: Vectorized mapping of float intensities 0..255
            channels: 1 for grayscale, 4 to use the same table on every RGBA channel

        Returns:
            LookupTable
        """
        table = saturate(func(INTENSITIES))
        if channels == 1:
            return cls(table)
        return cls.broadcast(table, channels)

    @classmethod
    def broadcast(cls, table: np.ndarray, channels: int = COLOR_CHANNELS) -> "LookupTable":
        """Repeat a single-channel table for every channel of a color image."""
        return cls(np.repeat(np.asarray(table, dtype=np.uint8)[:, None], channels, axis=1))

    @property
    def channels(self) -> int:
        return 1 if self.table.ndim == 1 else self.table.shape[1]

    def apply(self, image: np.ndarray) -> np.ndarray:
        """Apply the table to ``image`` in place and return it."""
        return perform_lut(image, self.table)
