"""
Data Models for Intensity Transforms

Defines the value types passed between the buffer helpers, the kernels
and the enhancement chain.
"""

from dataclasses import dataclass, field
from typing import List
import numpy as np


@dataclass
class CumulativeDistribution:
    """Cumulative histogram with the extremes used by equalization."""
    cdf: np.ndarray  # 256 running sums, cdf[255] == pixel count
    cdf_min: int  # Smallest positive CDF value
    min_value: int  # First bin reaching cdf_min
    cdf_max: int  # Largest CDF value
    max_value: int  # First bin reaching cdf_max

    @property
    def total(self) -> int:
        return int(self.cdf[-1])


@dataclass
class HSVPlanes:
    """Hue, saturation and value planes of an RGBA image."""
    hue: np.ndarray
    saturation: np.ndarray
    value: np.ndarray

    @property
    def shape(self):
        return self.hue.shape


@dataclass
class EnhancementResult:
    """Result of running a configured enhancement chain."""
    image: np.ndarray
    applied_steps: List[str] = field(default_factory=list)
    processing_time: float = 0.0  # seconds
