"""Configuration management for tagcheck using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILENAME = ".tagcheck.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ValidationConfig(BaseModel):
    """Validation configuration section."""
    tag_key: str = Field(alias="tagKey", default="is")
    name_key: str = Field(alias="nameKey", default="json")
    max_depth: int | None = Field(alias="maxDepth", default=None)
    skip_cycles: bool = Field(alias="skipCycles", default=True)

    @field_validator("tag_key", "name_key")
    @classmethod
    def validate_key(cls, v):
        if not v or not v.strip():
            raise ValueError("tag keys must not be empty")
        return v.strip()

    @field_validator("max_depth")
    @classmethod
    def validate_max_depth(cls, v):
        if v is not None and v < 1:
            raise ValueError("max_depth must be >= 1")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True, validate_default=True)


class TagcheckConfig(BaseModel):
    """Complete tagcheck configuration model."""
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> TagcheckConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .tagcheck.json and
                    falls back to defaults when none is found

    Returns:
        TagcheckConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid or an explicit path does not exist
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ValueError(f"Config file not found: {config_path}")

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return TagcheckConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e
        except (TypeError, ValueError) as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}") from e
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .tagcheck.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILENAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> TagcheckConfig:
    """Create default configuration (zero-config operation)."""
    return TagcheckConfig()
