"""Level 4: Reporting.

This module profiles classified columns and writes analysis reports as
JSON and Markdown.
"""

from .profiler import (
    ColumnProfile,
    DatasetProfile,
    NumericStats,
    compute_numeric_stats,
    profile_column,
    profile_dataset,
)
from .report_generator import REPORT_FORMATS, ReportGenerationError, ReportGenerator
from .report_schema import AnalysisReport, serialize_classifications

__all__ = [
    "AnalysisReport",
    "ColumnProfile",
    "compute_numeric_stats",
    "DatasetProfile",
    "NumericStats",
    "profile_column",
    "profile_dataset",
    "REPORT_FORMATS",
    "ReportGenerationError",
    "ReportGenerator",
    "serialize_classifications",
]
