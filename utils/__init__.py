"""Shared utilities for SheetSense.

This module provides common utilities used across the application.
"""

from .constants import (
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_SETTINGS,
    EXIT_NO_DATA,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    SPREADSHEET_EPOCH,
    SUPPORTED_CONFIG_FORMATS,
    SUPPORTED_DATASET_FORMATS,
)
from .file_helpers import (
    FileHelperError,
    PathValidationError,
    ensure_directory,
    generate_run_id,
    get_file_extension,
    is_supported_config_format,
    is_supported_dataset_format,
    safe_write_json,
    safe_write_text,
    validate_output_path,
    validate_path_safe,
)
from .logging import get_logger, setup_logging

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "EXIT_INVALID_SETTINGS",
    "EXIT_NO_DATA",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "SPREADSHEET_EPOCH",
    "SUPPORTED_CONFIG_FORMATS",
    "SUPPORTED_DATASET_FORMATS",
    "ensure_directory",
    "FileHelperError",
    "generate_run_id",
    "get_file_extension",
    "get_logger",
    "is_supported_config_format",
    "is_supported_dataset_format",
    "PathValidationError",
    "safe_write_json",
    "safe_write_text",
    "setup_logging",
    "validate_output_path",
    "validate_path_safe",
]
