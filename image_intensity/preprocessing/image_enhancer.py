"""
Image Enhancer

Runs a configured chain of intensity transforms over an image.
"""

import time
import numpy as np
from typing import Callable, Dict, List, Optional
import logging

from ..core.image_buffer import validate_image
from ..data_models import EnhancementResult
from ..transforms import (
    adjust, equalize_histogram, gamma_correction,
    stretch_contrast, stretch_contrast_hsv, unsharp_mask
)
from ..utils.config_manager import ConfigManager, PIPELINE_STEPS


class ImageEnhancer:
    """Applies an ordered list of intensity transforms with configured parameters."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        """
        Initialize image enhancer.

        Args:
            config_manager: Configuration manager instance
        """
        self.config = config_manager or ConfigManager()
        self.logger = logging.getLogger(__name__)

        brightness_config = self.config.get_brightness_params()
        self.alpha = float(brightness_config.get('alpha', 1.0))
        self.beta = float(brightness_config.get('beta', 0.0))

        self.equalize_use_hsv = bool(self.config.get_equalization_params().get('use_hsv', False))
        self.gamma = float(self.config.get_gamma_params().get('value', 1.0))
        self.stretch_use_hsv = bool(self.config.get_stretch_params().get('use_hsv', False))

        usm_config = self.config.get_unsharp_params()
        self.kernel_size = int(usm_config.get('kernel_size', 7))
        self.weight = float(usm_config.get('weight', 0.6))
        if not 0.0 <= self.weight < 1.0:
            self.logger.warning(f"Unsharp mask weight {self.weight} outside [0, 1): sharpening disabled")

        self.steps = self.config.get_pipeline_steps()

        self.logger.info(f"Image enhancer initialized: steps={self.steps}")

    def _step_functions(self) -> Dict[str, Callable[[np.ndarray], np.ndarray]]:
        """Bind every known step to its configured parameters."""
        return {
            'adjust': lambda img: adjust(img, self.alpha, self.beta),
            'equalize_histogram': lambda img: equalize_histogram(img, use_hsv=self.equalize_use_hsv),
            'gamma_correction': lambda img: gamma_correction(img, self.gamma),
            'stretch_contrast': lambda img: stretch_contrast(img, use_hsv=self.stretch_use_hsv),
            'stretch_contrast_hsv': stretch_contrast_hsv,
            'unsharp_mask': lambda img: unsharp_mask(img, self.kernel_size, self.weight),
        }

    def set_steps(self, steps: List[str]) -> None:
        """
        Replace the enhancement chain.

        Args:
            steps: Ordered step names
        """
        unknown = [step for step in steps if step not in PIPELINE_STEPS]
        if unknown:
            raise ValueError(f"Unknown pipeline steps: {', '.join(map(str, unknown))}")

        self.steps = list(steps)

    def apply_step(self, image: np.ndarray, step_name: str) -> np.ndarray:
        """
        Run one named transform in place with its configured parameters.

        Args:
            image: Grayscale or RGBA image
            step_name: One of the known pipeline step names

        Returns:
            The transformed image
        """
        functions = self._step_functions()
        if step_name not in functions:
            raise ValueError(f"Unknown pipeline step: {step_name}")

        return functions[step_name](image)

    def enhance(self, image: np.ndarray) -> EnhancementResult:
        """
        Run the configured chain on a copy of ``image``.

        Args:
            image: Grayscale or RGBA image (left unmodified)

        Returns:
            EnhancementResult with the enhanced image and the applied steps
        """
        validate_image(image)
        start_time = time.time()

        enhanced = image.copy()
        applied_steps = []

        for step_name in self.steps:
            step_start = time.time()
            self.apply_step(enhanced, step_name)
            applied_steps.append(step_name)
            self.logger.debug(f"Step '{step_name}' applied in {time.time() - step_start:.4f}s")

        processing_time = time.time() - start_time
        self.logger.debug(f"Enhancement complete: {len(applied_steps)} steps in {processing_time:.4f}s")

        return EnhancementResult(
            image=enhanced,
            applied_steps=applied_steps,
            processing_time=processing_time
        )
