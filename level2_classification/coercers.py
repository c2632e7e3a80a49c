"""Value coercers for single raw cell values.

Every function here is total: it returns a definite answer for any input
and never raises. Dispatch happens on the CellKind of the value.
"""

import math
import warnings
from typing import Any, Optional

import numpy as np
import pandas as pd

from level1_ingestion.cells import CellKind, as_timestamp, cell_kind
from settings.schema import DateLabelStyle, SerialDateSettings
from utils.constants import SPREADSHEET_EPOCH

BOOLEAN_STRINGS = frozenset({"true", "false", "yes", "no", "y", "n", "0", "1"})
TRUTHY_STRINGS = frozenset({"true", "yes", "y", "1"})

DEFAULT_SERIAL_WINDOW = SerialDateSettings()

_EPOCH = pd.Timestamp(SPREADSHEET_EPOCH)

# a parsed year below this means the text had no year (the parser fills in year 1)
_MIN_PARSED_YEAR = 1000


def _native(value: Any) -> Any:
    # numpy scalars -> python scalars
    if isinstance(value, np.generic):
        return value.item()
    return value


def _parse_number_string(text: str) -> Optional[float]:
    """Parse a string with comma grouping separators; None unless finite."""
    cleaned = text.replace(",", "").strip()
    if not cleaned or "_" in cleaned:
        return None
    try:
        number = float(cleaned)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _is_finite_number(value: Any) -> bool:
    value = _native(value)
    if isinstance(value, int):
        return True
    try:
        return math.isfinite(value)
    except (TypeError, OverflowError):
        return False


def parse_date_string(text: str) -> Optional[pd.Timestamp]:
    """Parse a date string with pandas' general date parser.

    Args:
        text: Candidate date string

    Returns:
        Parsed Timestamp, or None if the string is not a recognizable date
        or names no year (``"Jan"``, ``"3rd"``)
    """
    text = text.strip()
    if not text:
        return None
    with warnings.catch_warnings():
        # pandas warns when it falls back to per-element dateutil parsing
        warnings.simplefilter("ignore")
        try:
            parsed = pd.to_datetime(text, errors="coerce")
        except (ValueError, TypeError, OverflowError):
            return None
    if parsed is None or parsed is pd.NaT or not isinstance(parsed, pd.Timestamp):
        return None
    if parsed.year < _MIN_PARSED_YEAR:
        return None
    return parsed


def serial_to_timestamp(serial: float) -> Optional[pd.Timestamp]:
    """Convert a spreadsheet date serial (days since 1899-12-30) to a Timestamp."""
    try:
        return _EPOCH + pd.to_timedelta(float(serial) * 86400, unit="s")
    except (ValueError, OverflowError):
        return None


def is_numeric(value: Any) -> bool:
    """True for finite numbers and strings that parse as finite numbers."""
    kind = cell_kind(value)
    if kind == CellKind.NUMBER:
        return _is_finite_number(value)
    if kind == CellKind.STRING and isinstance(value, str):
        return _parse_number_string(value) is not None
    return False


def is_boolean_like(value: Any) -> bool:
    """True for booleans, the numbers 0 and 1, and yes/no style strings."""
    kind = cell_kind(value)
    if kind == CellKind.BOOLEAN:
        return True
    if kind == CellKind.NUMBER:
        return _native(value) in (0, 1)
    if kind == CellKind.STRING and isinstance(value, str):
        return value.strip().lower() in BOOLEAN_STRINGS
    return False


def is_date_like(value: Any, serial_window: SerialDateSettings = DEFAULT_SERIAL_WINDOW) -> bool:
    """True for date values, parseable date strings and serials in the window."""
    kind = cell_kind(value)
    if kind == CellKind.DATE:
        return as_timestamp(value) is not None
    if kind == CellKind.STRING and isinstance(value, str):
        return parse_date_string(value) is not None
    if kind == CellKind.NUMBER:
        return _is_finite_number(value) and serial_window.contains(float(_native(value)))
    return False


def to_number(value: Any) -> int | float:
    """Convert a raw value to a finite number, defaulting to 0."""
    kind = cell_kind(value)
    if kind == CellKind.NUMBER:
        native = _native(value)
        return native if _is_finite_number(native) else 0
    if kind == CellKind.STRING and isinstance(value, str):
        parsed = _parse_number_string(value)
        return parsed if parsed is not None else 0
    return 0


def display_string(value: Any) -> str:
    """Plain string form of a raw value; blanks render as an empty string."""
    kind = cell_kind(value)
    if kind in (CellKind.ABSENT, CellKind.EMPTY):
        return ""
    native = _native(value)
    if kind == CellKind.BOOLEAN:
        return "true" if native else "false"
    if kind == CellKind.NUMBER:
        if isinstance(native, float) and native.is_integer():
            return str(int(native))
        return str(native)
    if kind == CellKind.DATE:
        timestamp = as_timestamp(native)
        return timestamp.isoformat() if timestamp is not None else str(native)
    return str(native)


def format_date(timestamp: pd.Timestamp, style: DateLabelStyle = DateLabelStyle.US) -> str:
    """Render a Timestamp as a date label."""
    if style == DateLabelStyle.ISO:
        return f"{timestamp.year:04d}-{timestamp.month:02d}-{timestamp.day:02d}"
    return f"{timestamp.month}/{timestamp.day}/{timestamp.year}"


def to_date_label(
    value: Any,
    style: DateLabelStyle = DateLabelStyle.US,
    serial_window: SerialDateSettings = DEFAULT_SERIAL_WINDOW,
) -> str:
    """Produce a human-readable date label.

    Date values, spreadsheet serials inside the serial window and parseable
    date strings are rendered in ``style``. Anything else falls back to the
    value's plain string form.
    """
    kind = cell_kind(value)
    timestamp = None
    if kind == CellKind.DATE:
        timestamp = as_timestamp(value)
    elif kind == CellKind.NUMBER:
        if _is_finite_number(value) and serial_window.contains(float(_native(value))):
            timestamp = serial_to_timestamp(_native(value))
    elif kind == CellKind.STRING and isinstance(value, str):
        timestamp = parse_date_string(value)

    if timestamp is None:
        return display_string(value)
    return format_date(timestamp, style)


def is_truthy(value: Any) -> bool:
    """Truthiness on the boolean-like scale: True, 1, true/yes/y/1."""
    kind = cell_kind(value)
    if kind == CellKind.BOOLEAN:
        return bool(value)
    if kind == CellKind.NUMBER:
        return _native(value) == 1
    if kind == CellKind.STRING:
        return str(value).strip().lower() in TRUTHY_STRINGS
    return False


def to_boolean_label(value: Any) -> str:
    """Map a raw value to ``TRUE`` or ``FALSE``."""
    return "TRUE" if is_truthy(value) else "FALSE"
