"""
Configuration Management System

Handles loading, validation, and management of transform parameters.
"""

import yaml
from typing import Dict, Any, List, Optional
from pathlib import Path

PIPELINE_STEPS = (
    'adjust',
    'equalize_histogram',
    'gamma_correction',
    'stretch_contrast',
    'stretch_contrast_hsv',
    'unsharp_mask',
)


class ConfigManager:
    """Manages configuration parameters for the intensity transforms."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default config.
        """
        self.config_path = config_path or self._get_default_config_path()
        self.config = self._load_config()
        self._validate_config()

    def _get_default_config_path(self) -> str:
        """Get path to default configuration file."""
        package_dir = Path(__file__).parent.parent
        return str(package_dir / "config" / "default_config.yaml")

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, 'r') as file:
                config = yaml.safe_load(file)
            return config or {}
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing configuration file: {e}")

    def _validate_config(self) -> None:
        """Validate configuration parameters for consistency and feasibility."""
        # Gamma must be strictly positive
        gamma = self.config.get('gamma', {})
        gamma_value = float(gamma.get('value', 1.0))
        if gamma_value <= 0:
            raise ValueError("gamma value must be positive")

        # Gaussian kernel must be a positive odd size
        usm = self.config.get('unsharp_mask', {})
        kernel_size = usm.get('kernel_size', 7)
        if not isinstance(kernel_size, int) or kernel_size <= 0 or kernel_size % 2 == 0:
            raise ValueError("unsharp_mask kernel_size must be a positive odd integer")

        # Only known kernels can be chained
        steps = self.config.get('pipeline', {}).get('steps', []) or []
        unknown = [step for step in steps if step not in PIPELINE_STEPS]
        if unknown:
            raise ValueError(f"Unknown pipeline steps: {', '.join(map(str, unknown))}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'unsharp_mask.weight')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'gamma.value')
            value: Value to set
        """
        keys = key.split('.')
        config_ref = self.config

        for k in keys[:-1]:
            if k not in config_ref:
                config_ref[k] = {}
            config_ref = config_ref[k]

        config_ref[keys[-1]] = value
        self._validate_config()

    def save(self, output_path: Optional[str] = None) -> None:
        """
        Save current configuration to file.

        Args:
            output_path: Path to save configuration. If None, overwrites current file.
        """
        save_path = output_path or self.config_path

        with open(save_path, 'w') as file:
            yaml.dump(self.config, file, default_flow_style=False, indent=2)

    def get_brightness_params(self) -> Dict[str, Any]:
        """Get brightness adjustment parameters as a dictionary."""
        return self.config.get('brightness', {})

    def get_equalization_params(self) -> Dict[str, Any]:
        """Get histogram equalization parameters as a dictionary."""
        return self.config.get('equalization', {})

    def get_gamma_params(self) -> Dict[str, Any]:
        """Get gamma correction parameters as a dictionary."""
        return self.config.get('gamma', {})

    def get_stretch_params(self) -> Dict[str, Any]:
        """Get contrast stretch parameters as a dictionary."""
        return self.config.get('contrast_stretch', {})

    def get_unsharp_params(self) -> Dict[str, Any]:
        """Get unsharp mask parameters as a dictionary."""
        return self.config.get('unsharp_mask', {})

    def get_pipeline_steps(self) -> List[str]:
        """Get the ordered list of enhancement steps."""
        return list(self.config.get('pipeline', {}).get('steps', []) or [])
