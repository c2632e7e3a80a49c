"""Per-cell rendering and table previews.

Turns a raw value and its column's semantic type into the display string a
table widget shows: grouped numerals, TRUE/FALSE badges, date labels and
truncated strings.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from level1_ingestion.cells import is_blank
from level2_classification.coercers import (
    display_string,
    to_boolean_label,
    to_date_label,
    to_number,
)
from level2_classification.types import ColumnSchema, SemanticType
from settings.schema import EngineSettings

ELLIPSIS = "…"


def format_number(number: int | float) -> str:
    """Thousands-grouped numeral with at most three fraction digits."""
    if isinstance(number, float) and not math.isfinite(number):
        return "0"
    if isinstance(number, int):
        return f"{number:,}"
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.3f}".rstrip("0").rstrip(".")


def truncate(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    return text[: max(max_chars - 1, 0)] + ELLIPSIS


def format_cell(
    value: Any, semantic_type: SemanticType, settings: Optional[EngineSettings] = None
) -> str:
    """Render one cell for display according to its column type.

    Args:
        value: Raw cell value
        semantic_type: Type of the column the cell belongs to
        settings: Optional engine settings for date style and truncation

    Returns:
        Display string; blank cells render as an empty string
    """
    if is_blank(value):
        return ""

    settings = settings or EngineSettings()
    if semantic_type == SemanticType.NUMBER:
        return format_number(to_number(value))
    if semantic_type == SemanticType.BOOLEAN:
        return to_boolean_label(value)
    if semantic_type == SemanticType.DATE:
        return to_date_label(value, settings.display.date_label_style, settings.serial_dates)
    if semantic_type == SemanticType.CATEGORY:
        return truncate(display_string(value), settings.display.category_max_chars)
    return truncate(display_string(value), settings.display.text_max_chars)


@dataclass(frozen=True)
class TablePreview:
    """Formatted head of a dataset."""

    columns: tuple[ColumnSchema, ...]
    rows: tuple[tuple[str, ...], ...]
    total_rows: int

    @property
    def is_truncated(self) -> bool:
        return len(self.rows) < self.total_rows

    @property
    def note(self) -> Optional[str]:
        if not self.is_truncated:
            return None
        return f"Showing {len(self.rows)} of {self.total_rows} rows"

    def to_dict(self) -> dict[str, Any]:
        return {
            "columns": [column.to_dict() for column in self.columns],
            "rows": [list(row) for row in self.rows],
            "total_rows": self.total_rows,
            "note": self.note,
        }


def build_preview(
    dataset: Sequence[Mapping[str, Any]],
    schema: Sequence[ColumnSchema],
    settings: Optional[EngineSettings] = None,
) -> TablePreview:
    """Format the first ``preview_rows`` rows of the dataset."""
    settings = settings or EngineSettings()
    head = dataset[: settings.display.preview_rows]
    rows = tuple(
        tuple(
            format_cell(
                row.get(column.name) if isinstance(row, Mapping) else None,
                column.type,
                settings,
            )
            for column in schema
        )
        for row in head
    )
    return TablePreview(columns=tuple(schema), rows=rows, total_rows=len(dataset))
