"""Constants for SheetSense.

This module defines shared constants used across the application.
"""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_SETTINGS = 1
EXIT_NO_DATA = 2
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_NAME = "SheetSense"
APP_VERSION = "1.0.0"

# Supported file formats
SUPPORTED_DATASET_FORMATS = ["xlsx", "xls", "csv", "json"]
SUPPORTED_CONFIG_FORMATS = ["yaml", "yml", "json"]

# Spreadsheet date serials count days from this epoch (1900 date system)
SPREADSHEET_EPOCH = "1899-12-30"
