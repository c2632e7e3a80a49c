"""Default chart projection.

Picks the first numeric column as the measure and the first dimension
column (date, category or text) as the horizontal axis, then projects every
row onto an ``{x, y}`` point.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from level1_ingestion.cells import CellKind, cell_kind
from level2_classification.coercers import display_string, to_date_label, to_number
from level2_classification.types import DIMENSION_TYPES, ColumnSchema, SemanticType
from settings.schema import EngineSettings
from utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChartPoint:
    x: str | int | float
    y: int | float

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class ChartSeries:
    """Chart-ready series with one point per dataset row, in row order."""

    x_label: str
    y_label: str
    data: tuple[ChartPoint, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "x_label": self.x_label,
            "y_label": self.y_label,
            "data": [point.to_dict() for point in self.data],
        }


def select_axes(
    dataset: Sequence[Mapping[str, Any]], schema: Sequence[ColumnSchema]
) -> Optional[tuple[str, str]]:
    """Choose (x column, y column), or None when no numeric column exists."""
    y_col = next((c.name for c in schema if c.type == SemanticType.NUMBER), None)
    if y_col is None:
        return None

    x_col = next((c.name for c in schema if c.type in DIMENSION_TYPES), None)
    if x_col is None:
        first = dataset[0] if dataset and isinstance(dataset[0], Mapping) else {}
        x_col = next(iter(first.keys()), schema[0].name)
    return x_col, y_col


def _x_value(raw: Any, is_date_axis: bool, settings: EngineSettings) -> Any:
    if is_date_axis:
        return to_date_label(
            raw, settings.display.date_label_style, settings.serial_dates
        )
    kind = cell_kind(raw)
    if kind in (CellKind.ABSENT, CellKind.EMPTY):
        return ""
    if kind == CellKind.STRING and isinstance(raw, str):
        return raw
    if kind == CellKind.NUMBER:
        return to_number(raw)
    if kind == CellKind.BOOLEAN and not raw:
        return ""
    return display_string(raw)


def project_chart(
    dataset: Sequence[Mapping[str, Any]],
    schema: Sequence[ColumnSchema],
    settings: Optional[EngineSettings] = None,
) -> Optional[ChartSeries]:
    """Project the dataset onto a default two-dimensional series.

    Returns None (not an error) when no column is classified ``number``;
    callers render an empty state in that case. Rows whose x is blank, zero
    or ``False`` get the label ``Row {n}`` (1-based); rows with a non-numeric
    y contribute 0.

    Args:
        dataset: Ordered sequence of records
        schema: Column schemas produced by the classifier
        settings: Optional engine settings for date labels

    Returns:
        ChartSeries with len(dataset) points, or None
    """
    if not dataset:
        return None

    axes = select_axes(dataset, schema)
    if axes is None:
        logger.info("No numeric column found, no chart derivable")
        return None

    settings = settings or EngineSettings()
    x_col, y_col = axes
    types = {c.name: c.type for c in schema}
    is_date_axis = types.get(x_col) == SemanticType.DATE

    points = []
    for index, row in enumerate(dataset):
        row = row if isinstance(row, Mapping) else {}
        x = _x_value(row.get(x_col), is_date_axis, settings)
        if not x:
            x = f"Row {index + 1}"
        points.append(ChartPoint(x=x, y=to_number(row.get(y_col))))

    logger.debug(f"Chart projected: x='{x_col}', y='{y_col}', {len(points)} points")
    return ChartSeries(x_label=x_col, y_label=y_col, data=tuple(points))
