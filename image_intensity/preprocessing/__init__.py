"""
Image Preprocessing Module

Chains intensity transforms into a configured enhancement pass.
"""

from .image_enhancer import ImageEnhancer

__all__ = ['ImageEnhancer']
