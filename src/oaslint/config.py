"""Configuration management for oaslint using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, StrictBool, model_validator

CONFIG_FILE_NAME = ".oaslint.json"


class OutputFormat(str, Enum):
    """Report output formats."""
    TABLE = "table"
    JSON = "json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class RuleConfiguration(BaseModel):
    """Feature flags deciding which optional rules a validator includes.

    Flags are read-only once built. Flags this version does not know about
    are kept as given and read as disabled unless explicitly set.
    """
    enable_recommendations: StrictBool = Field(alias="enableRecommendations", default=False)
    enable_apache_nginx_underscore_recommendation: StrictBool = Field(
        alias="enableApacheNginxUnderscoreRecommendation", default=False
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    @model_validator(mode="after")
    def validate_extra_flags(self):
        for name, value in (self.model_extra or {}).items():
            if not isinstance(value, bool):
                raise ValueError(f"rule flag '{name}' must be a boolean, got: {value!r}")
        return self

    def is_enabled(self, flag: str) -> bool:
        """Look up a flag by its camelCase or snake_case name."""
        for field_name, info in type(self).model_fields.items():
            if flag in (field_name, info.alias):
                return getattr(self, field_name)
        wanted = _flag_key(flag)
        for name, value in (self.model_extra or {}).items():
            if _flag_key(name) == wanted:
                return value
        return False


def _flag_key(name: str) -> str:
    # enableFooBar and enable_foo_bar share one key
    return name.replace("_", "").lower()


class OutputConfig(BaseModel):
    """Output configuration section."""
    format: OutputFormat = OutputFormat.TABLE

    model_config = ConfigDict(use_enum_values=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class OaslintConfig(BaseModel):
    """Complete oaslint configuration model."""
    rules: RuleConfiguration = Field(default_factory=RuleConfiguration)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> OaslintConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .oaslint.json

    Returns:
        OaslintConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If config file specified but not found
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return create_default_config()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

    try:
        return OaslintConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}") from e


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .oaslint.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    start = Path(start_dir or Path.cwd()).resolve()
    candidates = (directory / CONFIG_FILE_NAME for directory in (start, *start.parents))
    return next((candidate for candidate in candidates if candidate.exists()), None)


def create_default_config() -> OaslintConfig:
    """Create default configuration: every optional rule disabled."""
    return OaslintConfig()
