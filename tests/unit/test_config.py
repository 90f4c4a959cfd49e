"""
Unit tests for environment-driven settings.
"""

import pytest

from complaint_pipeline.config import DEFAULT_SUMMARY_YEARS, get_settings


class TestSettings:
    """Tests for get_settings"""

    def test_defaults(self, clean_env):
        """Test defaults when no variables are set"""
        settings = get_settings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.normalization_rules_path is None
        assert settings.column_mapping_path is None
        assert settings.summary_years == DEFAULT_SUMMARY_YEARS

    def test_environment_overrides(self, clean_env):
        """Test values are read from the environment"""
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("NORMALIZATION_RULES_PATH", "config/normalization_rules.yaml")
        clean_env.setenv("SUMMARY_YEARS", "2023, 2024,2025")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.normalization_rules_path == "config/normalization_rules.yaml"
        assert settings.summary_years == ("2023", "2024", "2025")

    def test_blank_paths_are_unset(self, clean_env):
        """Test empty path variables count as unset"""
        clean_env.setenv("COLUMN_MAPPING_PATH", "")
        assert get_settings().column_mapping_path is None

    def test_invalid_years(self, clean_env):
        """Test malformed years are rejected"""
        clean_env.setenv("SUMMARY_YEARS", "2024,twenty")
        with pytest.raises(ValueError, match="four-digit years"):
            get_settings()

    def test_settings_are_immutable(self, clean_env):
        """Test settings cannot be changed after creation"""
        settings = get_settings()
        with pytest.raises(AttributeError):
            settings.log_level = "DEBUG"
