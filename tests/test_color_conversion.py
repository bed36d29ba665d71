"""
Tests for RGBA / HSV color conversion
"""

import pytest
import numpy as np

from image_intensity.core.color_conversion import hsv_to_rgba, rgba_to_hsv
from image_intensity.data_models import HSVPlanes
from image_intensity.exceptions import ImageFormatError


def rgba(pixels):
    """Build a 1 x N RGBA image from a list of (R, G, B, A) tuples."""
    return np.array([pixels], dtype=np.uint8)


class TestFloatConversion:
    """Test suite for floating-point HSV planes."""

    def test_primary_colors(self):
        image = rgba([(255, 0, 0, 255), (0, 255, 0, 255), (0, 0, 255, 255), (128, 128, 128, 255)])
        planes = rgba_to_hsv(image, dtype=np.float64)

        assert planes.hue.dtype == np.float64
        np.testing.assert_allclose(planes.hue[0], [0.0, 1 / 3, 2 / 3, 0.0])
        np.testing.assert_allclose(planes.saturation[0], [1.0, 1.0, 1.0, 0.0])
        np.testing.assert_allclose(planes.value[0], [1.0, 1.0, 1.0, 128 / 255])

    def test_planes_within_unit_range(self, rgba_image):
        planes = rgba_to_hsv(rgba_image, dtype=np.float64)

        for plane in (planes.hue, planes.saturation, planes.value):
            assert plane.shape == rgba_image.shape[:2]
            assert plane.min() >= 0.0
            assert plane.max() <= 1.0
        assert planes.hue.max() < 1.0

    def test_round_trip_is_exact(self, rgba_image):
        planes = rgba_to_hsv(rgba_image, dtype=np.float64)
        restored = hsv_to_rgba(planes, alpha=rgba_image[:, :, 3])

        np.testing.assert_array_equal(restored, rgba_image)


class TestByteConversion:
    """Test suite for byte HSV planes."""

    def test_byte_planes(self):
        image = rgba([(255, 0, 0, 255), (90, 90, 90, 255)])
        planes = rgba_to_hsv(image, dtype=np.uint8)

        assert planes.value.dtype == np.uint8
        np.testing.assert_array_equal(planes.hue[0], [0, 0])
        np.testing.assert_array_equal(planes.saturation[0], [255, 0])
        np.testing.assert_array_equal(planes.value[0], [255, 90])

    def test_round_trip_of_grays_and_red(self):
        image = rgba([(255, 0, 0, 10), (0, 0, 0, 20), (37, 37, 37, 30), (255, 255, 255, 40)])
        restored = hsv_to_rgba(rgba_to_hsv(image), alpha=image[:, :, 3])

        np.testing.assert_array_equal(restored, image)

    def test_round_trip_is_close(self, rgba_image):
        restored = hsv_to_rgba(rgba_to_hsv(rgba_image), alpha=rgba_image[:, :, 3])
        difference = np.abs(restored.astype(int) - rgba_image.astype(int))

        # Byte hue quantization costs a few levels at most
        assert difference.max() <= 8
        assert difference.mean() < 2.0


class TestAlphaAndShapes:
    """Test suite for alpha handling and degenerate inputs."""

    def test_default_alpha_is_opaque(self, rgba_image):
        restored = hsv_to_rgba(rgba_to_hsv(rgba_image, dtype=np.float64))
        assert np.all(restored[:, :, 3] == 255)

    def test_writes_into_output(self, rgba_image):
        out = np.zeros_like(rgba_image)
        result = hsv_to_rgba(rgba_to_hsv(rgba_image, dtype=np.float64), alpha=rgba_image[:, :, 3], out=out)

        assert result is out
        np.testing.assert_array_equal(out, rgba_image)

    def test_requires_color_image(self, gray_ramp):
        with pytest.raises(ImageFormatError, match="RGBA"):
            rgba_to_hsv(gray_ramp)

    def test_mismatched_planes(self):
        planes = HSVPlanes(
            hue=np.zeros((2, 2)),
            saturation=np.zeros((2, 3)),
            value=np.zeros((2, 2))
        )
        with pytest.raises(ImageFormatError, match="same dimensions"):
            hsv_to_rgba(planes)

    @pytest.mark.parametrize("dtype", [np.uint8, np.float64])
    def test_empty_image(self, dtype):
        empty = np.zeros((0, 0, 4), dtype=np.uint8)
        planes = rgba_to_hsv(empty, dtype=dtype)

        assert planes.shape == (0, 0)
        assert hsv_to_rgba(planes).shape == (0, 0, 4)
