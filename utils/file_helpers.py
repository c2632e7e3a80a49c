"""File helper utilities for SheetSense.

This module provides the path checks and safe write operations shared by
ingestion (reading workbooks) and reporting (writing report files).
"""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from .constants import SUPPORTED_CONFIG_FORMATS, SUPPORTED_DATASET_FORMATS

logger = logging.getLogger(__name__)

# Directories that report output must never land in (checked with subdirectories)
_SYSTEM_DIRECTORIES = (
    "/bin", "/boot", "/dev", "/etc", "/lib", "/lib64", "/proc",
    "/sbin", "/sys", "/usr",
    "/private/etc", "/private/var/lib", "/private/var/log", "/private/var/run",
    "c:/windows", "c:/system32", "c:/syswow64",
)


class PathValidationError(Exception):
    """Raised when path validation fails due to security concerns."""

    pass


class FileHelperError(Exception):
    """Raised when a safe file write fails."""

    pass


def ensure_directory(path: Path) -> Path:
    """Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure

    Returns:
        Resolved Path object (for chaining)

    Raises:
        OSError: If directory creation fails
    """
    try:
        resolved_path = path.resolve()
        resolved_path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Directory ensured: {resolved_path}")
        return resolved_path
    except (OSError, RuntimeError) as e:
        logger.error(f"Failed to resolve or create directory {path}: {e}")
        raise


def get_file_extension(file_path: str | Path) -> str:
    """Get lower-case file extension (without dot), empty string if none."""
    return Path(file_path).suffix.lstrip(".").lower()


def is_supported_dataset_format(file_path: str | Path) -> bool:
    """Check if file is a workbook or table format the loader can read."""
    return get_file_extension(file_path) in SUPPORTED_DATASET_FORMATS


def is_supported_config_format(file_path: str | Path) -> bool:
    """Check if file is a supported settings format."""
    return get_file_extension(file_path) in SUPPORTED_CONFIG_FORMATS


def validate_path_safe(
    file_path: str | Path,
    base_dir: Optional[Path] = None,
    must_exist: bool = False,
    must_be_file: bool = False,
    must_be_dir: bool = False,
) -> Path:
    """Validate path to prevent directory traversal.

    Args:
        file_path: Path to validate
        base_dir: Optional base directory to restrict paths within
        must_exist: If True, path must exist
        must_be_file: If True, path must be a file
        must_be_dir: If True, path must be a directory

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path contains traversal or violates constraints
        FileNotFoundError: If a required path doesn't exist
    """
    path = Path(file_path).expanduser()

    if ".." in path.parts:
        raise PathValidationError(
            f"Path contains directory traversal sequence: {file_path}"
        )

    try:
        resolved = path.resolve()
    except (OSError, RuntimeError) as e:
        raise PathValidationError(f"Failed to resolve path {file_path}: {e}") from e

    if base_dir is not None:
        base_resolved = Path(base_dir).expanduser().resolve()
        try:
            common = os.path.commonpath([str(resolved), str(base_resolved)])
        except ValueError:
            # Paths on different drives (Windows)
            raise PathValidationError(
                f"Path {file_path} cannot be validated against base directory {base_dir}"
            )
        if common != str(base_resolved):
            raise PathValidationError(
                f"Path {file_path} is outside allowed base directory {base_dir}"
            )

    if must_exist and not resolved.exists():
        raise FileNotFoundError(f"Path does not exist: {file_path}")

    if must_be_file and not resolved.is_file():
        if resolved.exists():
            raise PathValidationError(f"Path is not a file: {file_path}")
        raise FileNotFoundError(f"File does not exist: {file_path}")

    if must_be_dir and not resolved.is_dir():
        if resolved.exists():
            raise PathValidationError(f"Path is not a directory: {file_path}")
        raise FileNotFoundError(f"Directory does not exist: {file_path}")

    return resolved


def is_system_directory(path: Path) -> bool:
    """Check if path is (or is inside) a system directory."""
    candidates = {str(path).lower().replace("\\", "/")}
    try:
        candidates.add(str(path.resolve()).lower().replace("\\", "/"))
    except (OSError, RuntimeError):
        pass

    for candidate in candidates:
        for sys_dir in _SYSTEM_DIRECTORIES:
            if candidate == sys_dir or candidate.startswith(sys_dir + "/"):
                return True
    return False


def validate_output_path(
    output_path: str | Path,
    base_dir: Optional[Path] = None,
    allow_existing: bool = True,
) -> Path:
    """Validate an output directory for reports.

    Args:
        output_path: Output directory to validate
        base_dir: Optional base directory to restrict output within
        allow_existing: If True, allow existing directories (default: True)

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path contains traversal, is a system directory,
            or is an existing file
    """
    try:
        validated_path = validate_path_safe(output_path, base_dir=base_dir)
    except PathValidationError as e:
        raise PathValidationError(f"Output path validation failed: {e}") from e

    if is_system_directory(validated_path):
        raise PathValidationError(
            f"Output path cannot be a system directory: {validated_path}"
        )

    if validated_path.exists():
        if not allow_existing:
            raise PathValidationError(f"Output path already exists: {validated_path}")
        if not validated_path.is_dir():
            raise PathValidationError(
                f"Output path exists but is not a directory: {validated_path}"
            )

    return validated_path


def _prepare_target(file_path: Path, overwrite: bool) -> Path:
    try:
        resolved_path = file_path.resolve()
    except (OSError, RuntimeError) as e:
        raise FileHelperError(f"Failed to resolve path {file_path}: {e}") from e

    if resolved_path.exists() and not overwrite:
        raise FileHelperError(
            f"File already exists: {resolved_path} (use overwrite=True to replace)"
        )

    try:
        ensure_directory(resolved_path.parent)
    except (OSError, RuntimeError) as e:
        raise FileHelperError(f"Failed to create directory {resolved_path.parent}: {e}") from e
    return resolved_path


def safe_write_json(data: Any, file_path: Path, overwrite: bool = False) -> Path:
    """Safely write JSON data to file.

    Args:
        data: Data to serialize to JSON
        file_path: Path to write file
        overwrite: If True, overwrite existing file; if False, raise error if exists

    Returns:
        Resolved path of the written file

    Raises:
        FileHelperError: If write fails or file exists and overwrite=False
    """
    resolved_path = _prepare_target(file_path, overwrite)
    try:
        with open(resolved_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, default=str, ensure_ascii=False)
        logger.debug(f"JSON written to: {resolved_path}")
        return resolved_path
    except (OSError, IOError) as e:
        raise FileHelperError(f"Failed to write JSON to {resolved_path}: I/O error: {e}") from e
    except (TypeError, ValueError) as e:
        raise FileHelperError(f"Failed to serialize data to JSON for {resolved_path}: {e}") from e


def safe_write_text(text: str, file_path: Path, overwrite: bool = False) -> Path:
    """Safely write text to file.

    Raises:
        FileHelperError: If write fails or file exists and overwrite=False
    """
    resolved_path = _prepare_target(file_path, overwrite)
    try:
        with open(resolved_path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.debug(f"Text written to: {resolved_path}")
        return resolved_path
    except (OSError, IOError) as e:
        raise FileHelperError(f"Failed to write text to {resolved_path}: I/O error: {e}") from e
    except UnicodeEncodeError as e:
        raise FileHelperError(f"Failed to write text to {resolved_path}: Encoding error: {e}") from e


def generate_run_id() -> str:
    """Generate a timestamp-based run ID."""
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
    return f"run_{timestamp}"
