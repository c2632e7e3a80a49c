"""Level 3: Summary and Chart Projection.

This module derives per-type column counts, the default chart series and
formatted cell renderings from a classified dataset.
"""

from .chart import ChartPoint, ChartSeries, project_chart, select_axes
from .formatting import TablePreview, build_preview, format_cell, format_number, truncate
from .summarizer import DatasetSummary, summarize

__all__ = [
    "build_preview",
    "ChartPoint",
    "ChartSeries",
    "DatasetSummary",
    "format_cell",
    "format_number",
    "project_chart",
    "select_axes",
    "summarize",
    "TablePreview",
    "truncate",
]
