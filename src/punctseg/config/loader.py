"""YAML symbol configuration loading and validation."""

import yaml
from pathlib import Path
from typing import Any, Union

from ..core.errors import ConfigurationError
from .schema import SymbolConfig


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading or validation fails."""
    pass


def load_config(path: Union[str, Path]) -> SymbolConfig:
    """
    Load and validate a symbol configuration from YAML file.

    Args:
        path: Path to YAML configuration file

    Returns:
        SymbolConfig: Validated configuration object

    Raises:
        ConfigLoadError: If file cannot be read or configuration is invalid
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"Configuration file not found: {path}", element=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}", element=str(path))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Cannot read configuration file {path}: {e}", element=str(path))

    return _validate(data, source=str(path))


def load_config_from_string(yaml_content: str) -> SymbolConfig:
    """
    Load and validate a symbol configuration from YAML string.

    Args:
        yaml_content: YAML content as string

    Returns:
        SymbolConfig: Validated configuration object

    Raises:
        ConfigLoadError: If YAML is invalid or configuration validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML content: {e}")

    return _validate(data, source="<string>")


def _validate(data: Any, source: str) -> SymbolConfig:
    # An empty document means "all defaults"
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigLoadError(f"Configuration in {source} must be a YAML mapping, got {type(data).__name__}")

    try:
        config = SymbolConfig.model_validate(data)
    except Exception as e:
        raise ConfigLoadError(f"Configuration validation failed: {e}")

    # Run additional validation
    issues = config.validate_symbols()
    if issues:
        raise ConfigLoadError(f"Configuration validation issues: {'; '.join(issues)}")

    return config
