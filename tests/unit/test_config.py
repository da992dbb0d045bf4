"""Unit tests for configuration management."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import pytest

from tagcheck.config import (
    LoggingConfig,
    LogLevel,
    TagcheckConfig,
    ValidationConfig,
    create_default_config,
    find_config_file,
    load_config,
)


class TestValidationConfig:
    """Test ValidationConfig model."""

    def test_defaults(self):
        config = ValidationConfig()
        assert config.tag_key == "is"
        assert config.name_key == "json"
        assert config.max_depth is None
        assert config.skip_cycles is True

    def test_aliases(self):
        config = ValidationConfig(**{"tagKey": "validate", "nameKey": "yaml", "maxDepth": 5, "skipCycles": False})
        assert config.tag_key == "validate"
        assert config.name_key == "yaml"
        assert config.max_depth == 5
        assert config.skip_cycles is False

    def test_field_names(self):
        config = ValidationConfig(tag_key="check", max_depth=3)
        assert config.tag_key == "check"
        assert config.max_depth == 3

    def test_max_depth_must_be_positive(self):
        with pytest.raises(ValueError, match="max_depth must be >= 1"):
            ValidationConfig(max_depth=0)

    def test_tag_keys_must_not_be_blank(self):
        with pytest.raises(ValueError):
            ValidationConfig(tag_key="  ")


class TestTagcheckConfig:
    """Test complete TagcheckConfig model."""

    def test_minimal_config(self):
        config = TagcheckConfig()
        assert config.validation.tag_key == "is"
        assert config.logging.level == "warn"

    def test_config_from_dict(self):
        config_data = {
            "validation": {"tagKey": "rules", "maxDepth": 10},
            "logging": {"level": "debug"},
        }

        config = TagcheckConfig(**config_data)
        assert config.validation.tag_key == "rules"
        assert config.validation.max_depth == 10
        assert config.logging.level == LogLevel.DEBUG.value

    def test_extra_sections_are_rejected(self):
        with pytest.raises(ValueError):
            TagcheckConfig(**{"output": {"dir": "x"}})

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            LoggingConfig(level="trace")


class TestConfigLoading:
    """Test configuration file loading."""

    def test_load_config_file(self):
        """Test loading config from an explicit file."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".tagcheck.json"
            config_file.write_text(json.dumps({"validation": {"nameKey": "yaml"}}))

            config = load_config(config_file)
            assert config.validation.name_key == "yaml"

    def test_load_config_invalid_json(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".tagcheck.json"
            config_file.write_text("{ invalid json }")

            with pytest.raises(ValueError, match="Invalid JSON"):
                load_config(config_file)

    def test_load_config_invalid_content(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".tagcheck.json"
            config_file.write_text(json.dumps({"validation": {"maxDepth": -1}}))

            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(config_file)

    def test_load_config_missing_explicit_file(self):
        with TemporaryDirectory() as temp_dir:
            with pytest.raises(ValueError, match="Config file not found"):
                load_config(Path(temp_dir) / "missing.json")

    def test_load_config_without_file_uses_defaults(self):
        with patch("tagcheck.config.find_config_file", return_value=None):
            assert load_config() == create_default_config()

    def test_find_config_file_in_parent(self):
        """Test searching parent directories for .tagcheck.json."""
        with TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            (root / ".tagcheck.json").write_text("{}")
            nested = root / "a" / "b"
            nested.mkdir(parents=True)

            assert find_config_file(nested) == (root / ".tagcheck.json").resolve()

    def test_find_config_file_not_found(self):
        with TemporaryDirectory() as temp_dir:
            with patch("pathlib.Path.exists", return_value=False):
                assert find_config_file(Path(temp_dir)) is None

    def test_load_config_searches_from_cwd(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".tagcheck.json"
            config_file.write_text(json.dumps({"logging": {"level": "info"}}))

            with patch("tagcheck.config.find_config_file", return_value=config_file):
                assert load_config().logging.level == "info"
