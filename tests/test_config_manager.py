"""
Tests for the configuration manager
"""

import pytest
import yaml

from image_intensity.utils.config_manager import ConfigManager, PIPELINE_STEPS


class TestConfigManager:
    """Test suite for YAML configuration handling."""

    def test_default_values(self, config_manager):
        assert config_manager.get('brightness.alpha') == 1.0
        assert config_manager.get('gamma.value') == 1.0
        assert config_manager.get('unsharp_mask.weight') == 0.6
        assert config_manager.get('missing.key', 'fallback') == 'fallback'

    def test_section_accessors(self, config_manager):
        assert config_manager.get_brightness_params()['beta'] == 0.0
        assert config_manager.get_equalization_params()['use_hsv'] is False
        assert config_manager.get_gamma_params()['value'] == 1.0
        assert config_manager.get_stretch_params()['use_hsv'] is False
        assert config_manager.get_unsharp_params()['kernel_size'] == 7
        assert config_manager.get_pipeline_steps() == ['stretch_contrast', 'unsharp_mask']

    def test_default_steps_are_known(self, config_manager):
        assert set(config_manager.get_pipeline_steps()) <= set(PIPELINE_STEPS)

    @pytest.mark.parametrize("value", [0.0, -2.0])
    def test_rejects_non_positive_gamma(self, config_manager, value):
        with pytest.raises(ValueError, match="gamma"):
            config_manager.set('gamma.value', value)

    @pytest.mark.parametrize("size", [0, 4, -1])
    def test_rejects_invalid_kernel_size(self, config_manager, size):
        with pytest.raises(ValueError, match="kernel_size"):
            config_manager.set('unsharp_mask.kernel_size', size)

    def test_rejects_unknown_step(self, config_manager):
        with pytest.raises(ValueError, match="Unknown pipeline steps"):
            config_manager.set('pipeline.steps', ['adjust', 'posterize'])

    def test_set_creates_sections(self, config_manager):
        config_manager.set('extra.nested.flag', True)
        assert config_manager.get('extra.nested.flag') is True

    def test_save_and_reload(self, config_manager, tmp_path):
        config_manager.set('gamma.value', 2.2)
        output_path = tmp_path / "config.yaml"

        config_manager.save(str(output_path))
        reloaded = ConfigManager(str(output_path))

        assert reloaded.get('gamma.value') == 2.2
        assert reloaded.get_pipeline_steps() == config_manager.get_pipeline_steps()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="not found"):
            ConfigManager(str(tmp_path / "absent.yaml"))

    def test_invalid_yaml(self, tmp_path):
        config_path = tmp_path / "broken.yaml"
        config_path.write_text("gamma: [unclosed\n")

        with pytest.raises(ValueError, match="parsing"):
            ConfigManager(str(config_path))

    def test_invalid_file_content(self, tmp_path):
        config_path = tmp_path / "bad_gamma.yaml"
        config_path.write_text(yaml.dump({'gamma': {'value': -1.0}}))

        with pytest.raises(ValueError, match="gamma"):
            ConfigManager(str(config_path))

    def test_empty_file_uses_defaults(self, tmp_path):
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")

        config = ConfigManager(str(config_path))

        assert config.get_pipeline_steps() == []
        assert config.get_unsharp_params() == {}
