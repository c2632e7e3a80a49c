"""Settings validator for loading and validating engine configuration.

This module handles loading YAML/JSON settings files and validating
them against EngineSettings. It provides clear, user-friendly error messages.
"""

import json
import pathlib
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from settings.schema import DEFAULT_SETTINGS, EngineSettings
from utils import (
    PathValidationError,
    get_logger,
    is_supported_config_format,
    validate_path_safe,
)

logger = get_logger(__name__)


class SettingsValidationError(Exception):
    """Raised when settings loading or validation fails."""

    pass


def load_config_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Load configuration from YAML or JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary containing configuration

    Raises:
        SettingsValidationError: If file cannot be loaded or parsed
    """
    try:
        config_path = validate_path_safe(config_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise SettingsValidationError(f"Invalid settings path: {e}") from e
    except FileNotFoundError as e:
        raise SettingsValidationError(f"Settings file not found: {config_path}") from e

    suffix = config_path.suffix.lower()
    if not is_supported_config_format(config_path):
        raise SettingsValidationError(
            f"Unsupported file format: {config_path.suffix}. "
            "Supported formats: .yaml, .yml, .json"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                config = json.load(f)
            else:
                config = yaml.safe_load(f)
    except (OSError, IOError) as e:
        raise SettingsValidationError(
            f"Failed to read settings file {config_path}: I/O error: {e}"
        ) from e
    except yaml.YAMLError as e:
        raise SettingsValidationError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SettingsValidationError(f"Invalid JSON syntax in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SettingsValidationError(
            f"Failed to decode settings file {config_path}: Encoding error: {e}"
        ) from e

    if config is None:
        raise SettingsValidationError("Settings file is empty")

    if not isinstance(config, dict):
        raise SettingsValidationError(
            f"Settings must be a dictionary, got {type(config).__name__}"
        )

    return config


def validate_settings(config: dict) -> EngineSettings:
    """Validate a configuration dictionary against EngineSettings.

    Raises:
        SettingsValidationError: If validation fails with user-friendly error message
    """
    try:
        return EngineSettings(**config)
    except ValidationError as e:
        raise SettingsValidationError(
            f"Settings validation failed:\n{_format_validation_error(e)}"
        ) from e
    except TypeError as e:
        raise SettingsValidationError(f"Settings validation failed:\n  {e}") from e


def _format_validation_error(error: ValidationError) -> str:
    errors = []
    for err in error.errors():
        field_path = " -> ".join(str(loc) for loc in err.get("loc", []))
        error_msg = err.get("msg", "Validation error")
        error_type = err.get("type", "unknown")
        errors.append(f"  {field_path}: {error_msg} ({error_type})")
    return "\n".join(errors)


def load_settings(config_path: Optional[Union[str, pathlib.Path]] = None) -> EngineSettings:
    """Load and validate settings, falling back to defaults when no path is given.

    This is the main entry point for settings validation.

    Args:
        config_path: Optional path to a YAML or JSON settings file

    Returns:
        Validated EngineSettings instance

    Raises:
        SettingsValidationError: If loading or validation fails
    """
    if config_path is None:
        logger.debug("No settings file given, using defaults")
        return DEFAULT_SETTINGS

    config = load_config_file(config_path)
    settings = validate_settings(config)
    logger.info(f"Settings loaded from: {config_path}")
    return settings
