"""Raw cell classification for Level 1 ingestion.

Spreadsheet parsers hand back loosely-typed cell values. This module maps
every value onto one of a closed set of kinds so downstream coercers can
dispatch on the kind instead of probing runtime types ad hoc.
"""

import datetime as dt
import math
from enum import Enum
from typing import Any

import numpy as np
import pandas as pd


class CellKind(str, Enum):
    """Kinds of raw cell values."""

    ABSENT = "absent"
    EMPTY = "empty"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    DATE = "date"


def cell_kind(value: Any) -> CellKind:
    """Classify a raw cell value.

    Total over any input. Booleans are checked before numbers because
    ``bool`` is an ``int`` subclass. Values of unknown shape (lists, dicts,
    objects) are treated as strings and rendered through their string form.

    Args:
        value: Raw cell value

    Returns:
        CellKind of the value
    """
    if value is None or value is pd.NaT:
        return CellKind.ABSENT
    if isinstance(value, str):
        return CellKind.EMPTY if value == "" else CellKind.STRING
    if isinstance(value, (bool, np.bool_)):
        return CellKind.BOOLEAN
    if isinstance(value, (int, float, np.integer, np.floating)):
        if isinstance(value, (float, np.floating)) and math.isnan(value):
            return CellKind.ABSENT
        return CellKind.NUMBER
    if isinstance(value, (dt.datetime, dt.date, np.datetime64)):
        if isinstance(value, np.datetime64) and np.isnat(value):
            return CellKind.ABSENT
        return CellKind.DATE
    return CellKind.STRING


def is_blank(value: Any) -> bool:
    """Check whether a cell is absent or an empty string."""
    return cell_kind(value) in (CellKind.ABSENT, CellKind.EMPTY)


def as_timestamp(value: Any) -> pd.Timestamp | None:
    """Convert a DATE-kind value to a pandas Timestamp, or None if out of range."""
    try:
        timestamp = pd.Timestamp(value)
    except (ValueError, TypeError, OverflowError):
        return None
    if timestamp is pd.NaT:
        return None
    return timestamp
