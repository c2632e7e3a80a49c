"""Engine settings: thresholds, serial-date window and display options."""

from .schema import (
    DEFAULT_RULE_ORDER,
    DEFAULT_SETTINGS,
    ClassifierSettings,
    DateLabelStyle,
    DisplaySettings,
    EngineSettings,
    SerialDateSettings,
)
from .validator import (
    SettingsValidationError,
    load_config_file,
    load_settings,
    validate_settings,
)

__all__ = [
    "ClassifierSettings",
    "DateLabelStyle",
    "DEFAULT_RULE_ORDER",
    "DEFAULT_SETTINGS",
    "DisplaySettings",
    "EngineSettings",
    "load_config_file",
    "load_settings",
    "SerialDateSettings",
    "SettingsValidationError",
    "validate_settings",
]
