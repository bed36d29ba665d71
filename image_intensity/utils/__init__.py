"""
Utility Functions and Helpers

Common utilities for the intensity transforms.
"""

from .config_manager import ConfigManager, PIPELINE_STEPS

__all__ = ['ConfigManager', 'PIPELINE_STEPS']
