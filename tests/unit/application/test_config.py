"""Test application configuration."""

import pytest

from formrules.application.config import Config, Environment, get_config
from formrules.infrastructure.settings import DictSettings


class TestConfig:
    """Test loading and validating configuration."""

    def test_defaults(self):
        config = get_config(DictSettings())

        assert config.ENVIRONMENT is Environment.DEVELOPMENT
        assert config.LOG_LEVEL == "INFO"
        assert config.json_logs is True
        assert config.COMPOSITE_KEY_SEPARATOR == ""
        assert config.STOP_ON_FIRST_FAILURE is False

    def test_overrides(self):
        config = get_config(DictSettings({
            "ENVIRONMENT": "Staging",
            "LOG_LEVEL": "debug",
            "LOG_FORMAT": "console",
            "COMPOSITE_KEY_SEPARATOR": "_",
            "STOP_ON_FIRST_FAILURE": "true",
        }))

        assert config.ENVIRONMENT is Environment.STAGING
        assert config.LOG_LEVEL == "DEBUG"
        assert config.json_logs is False
        assert config.COMPOSITE_KEY_SEPARATOR == "_"
        assert config.STOP_ON_FIRST_FAILURE is True

    def test_unknown_environment(self):
        with pytest.raises(ValueError):
            Config(DictSettings({"ENVIRONMENT": "moon"}))

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            get_config(DictSettings({"LOG_LEVEL": "LOUD"}))

    def test_invalid_log_format(self):
        with pytest.raises(ValueError, match="LOG_FORMAT"):
            get_config(DictSettings({"LOG_FORMAT": "xml"}))

    def test_debug_rejected_in_production(self):
        with pytest.raises(ValueError, match="production"):
            get_config(DictSettings({"ENVIRONMENT": "production", "LOG_LEVEL": "DEBUG"}))
