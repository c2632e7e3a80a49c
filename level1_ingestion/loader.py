"""Dataset loader for Level 1 ingestion.

This module reads the first sheet of a workbook (or a CSV/JSON table) into
a Dataset: an ordered list of records keyed by column name. Blank cells
become empty strings; no other conversion is applied.
"""

import json
import zipfile
from pathlib import Path
from typing import Any

import pandas as pd

from utils import (
    PathValidationError,
    get_logger,
    is_supported_dataset_format,
    validate_path_safe,
)
from utils.constants import SUPPORTED_DATASET_FORMATS

logger = get_logger(__name__)

Record = dict[str, Any]
Dataset = list[Record]


class DatasetLoadError(Exception):
    """Raised when dataset loading fails."""

    pass


def records_from_dataframe(df: pd.DataFrame) -> Dataset:
    """Convert a DataFrame into records with empty-string defaults for blanks.

    Column order is preserved. Column labels are converted to strings so
    records are always keyed by name.

    Args:
        df: DataFrame as read from the source file

    Returns:
        List of record dictionaries, one per row
    """
    frame = df.copy()
    frame.columns = [str(col) for col in frame.columns]
    frame = frame.astype(object).where(frame.notna(), "")
    return frame.to_dict(orient="records")


def _read_frame(file_path: Path, suffix: str) -> pd.DataFrame:
    if suffix in (".xlsx", ".xls"):
        # sheet_name=0 reads the first sheet only; dtype=object keeps raw cells
        return pd.read_excel(file_path, sheet_name=0, dtype=object)
    if suffix == ".csv":
        return pd.read_csv(file_path, dtype=str, keep_default_na=False)
    if suffix == ".json":
        with open(file_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, list) or not all(isinstance(row, dict) for row in payload):
            raise DatasetLoadError(
                f"JSON dataset must be a list of objects: {file_path}"
            )
        # the first record's keys define the columns; later extra keys are ignored
        columns = list(payload[0].keys()) if payload else None
        return pd.DataFrame.from_records(payload, columns=columns)
    raise DatasetLoadError(f"Unsupported format: {suffix}")


def load_dataset(file_path: str | Path) -> Dataset:
    """Load a dataset from disk.

    Supports Excel workbooks (first sheet), CSV and JSON (list of objects).
    Validates file existence and format before loading.

    Args:
        file_path: Path to dataset file

    Returns:
        Non-empty list of records

    Raises:
        DatasetLoadError: If the file doesn't exist, the format is unsupported,
            the container can't be read, or the first sheet has no rows
    """
    try:
        file_path = validate_path_safe(file_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise DatasetLoadError(f"Invalid dataset path: {e}") from e
    except FileNotFoundError as e:
        raise DatasetLoadError(f"Dataset file not found: {file_path}") from e

    suffix = file_path.suffix.lower()
    if not is_supported_dataset_format(file_path):
        raise DatasetLoadError(
            f"Unsupported file format: {suffix}. "
            f"Supported formats: {', '.join('.' + fmt for fmt in SUPPORTED_DATASET_FORMATS)}"
        )

    logger.info(f"Loading dataset from: {file_path}")

    try:
        df = _read_frame(file_path, suffix)
    except DatasetLoadError:
        raise
    except (OSError, IOError) as e:
        raise DatasetLoadError(f"Failed to read dataset file {file_path}: I/O error: {e}") from e
    except pd.errors.EmptyDataError as e:
        raise DatasetLoadError("No rows found in the first sheet.") from e
    except pd.errors.ParserError as e:
        raise DatasetLoadError(f"Failed to parse dataset file {file_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"Invalid JSON in dataset file {file_path}: {e}") from e
    except ImportError as e:
        raise DatasetLoadError(
            f"Failed to load dataset {file_path}: Missing required library for {suffix} format: {e}"
        ) from e
    except (ValueError, zipfile.BadZipFile) as e:
        # pandas raises ValueError for unreadable workbook containers
        raise DatasetLoadError(
            f"Failed to read spreadsheet {file_path}. Please check the format and try again: {e}"
        ) from e

    if df.empty:
        raise DatasetLoadError("No rows found in the first sheet.")

    records = records_from_dataframe(df)
    logger.info(f"Dataset loaded successfully: {len(records)} rows, {df.shape[1]} columns")
    logger.debug(f"Column names: {list(df.columns)}")
    return records
