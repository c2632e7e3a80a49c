"""Deterministic column profiler for reports.

This module computes per-column completeness and cardinality, plus numeric
statistics for columns classified as ``number``. Unlike the classifier it
reads every row, so it is only used for reporting, never for typing.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import pandas as pd

from level1_ingestion.cells import is_blank
from level2_classification.coercers import display_string, is_numeric, to_number
from level2_classification.types import ColumnSchema, SemanticType
from utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class NumericStats:
    """Statistics over the numeric cells of a column."""

    count: int
    min: float
    max: float
    mean: float
    median: float
    std: float
    total: float


@dataclass(frozen=True)
class ColumnProfile:
    """Completeness and cardinality of a single column."""

    column_name: str
    semantic_type: SemanticType
    missing_count: int
    missing_percentage: float
    unique_count: int
    is_constant: bool  # at most one distinct non-blank value
    numeric_stats: Optional[NumericStats] = None

    def to_dict(self) -> dict[str, Any]:
        profile = {
            "column_name": self.column_name,
            "semantic_type": self.semantic_type.value,
            "missing_count": self.missing_count,
            "missing_percentage": self.missing_percentage,
            "unique_count": self.unique_count,
            "is_constant": self.is_constant,
        }
        if self.numeric_stats is not None:
            stats = self.numeric_stats
            profile["numeric_stats"] = {
                "count": stats.count,
                "min": stats.min,
                "max": stats.max,
                "mean": stats.mean,
                "median": stats.median,
                "std": stats.std,
                "total": stats.total,
            }
        return profile


@dataclass(frozen=True)
class DatasetProfile:
    """Profiles for all columns, in schema order."""

    columns: tuple[ColumnProfile, ...]
    total_rows: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_rows": self.total_rows,
            "columns": [column.to_dict() for column in self.columns],
        }


def compute_numeric_stats(values: Sequence[Any]) -> Optional[NumericStats]:
    """Compute statistics over the values that parse as numbers.

    Returns:
        NumericStats, or None if no value is numeric
    """
    series = pd.Series([float(to_number(v)) for v in values if is_numeric(v)], dtype="float64")
    if series.empty:
        return None

    # std of a single value is NaN in pandas; report 0.0 instead
    std = float(series.std()) if len(series) > 1 else 0.0
    return NumericStats(
        count=int(series.count()),
        min=float(series.min()),
        max=float(series.max()),
        mean=float(series.mean()),
        median=float(series.median()),
        std=std,
        total=float(series.sum()),
    )


def profile_column(dataset: Sequence[Mapping[str, Any]], column: ColumnSchema) -> ColumnProfile:
    """Profile a single column over every row of the dataset."""
    values = [row.get(column.name) if isinstance(row, Mapping) else None for row in dataset]
    total_count = len(values)
    present = [v for v in values if not is_blank(v)]
    missing_count = total_count - len(present)
    missing_percentage = (missing_count / total_count * 100) if total_count > 0 else 0.0
    unique_count = len({display_string(v).strip() for v in present})

    numeric_stats = None
    if column.type == SemanticType.NUMBER:
        numeric_stats = compute_numeric_stats(present)

    return ColumnProfile(
        column_name=column.name,
        semantic_type=column.type,
        missing_count=missing_count,
        missing_percentage=round(missing_percentage, 4),
        unique_count=unique_count,
        is_constant=unique_count <= 1,
        numeric_stats=numeric_stats,
    )


def profile_dataset(
    dataset: Sequence[Mapping[str, Any]], schema: Sequence[ColumnSchema]
) -> DatasetProfile:
    """Profile every classified column.

    Args:
        dataset: Ordered sequence of records
        schema: Column schemas produced by the classifier

    Returns:
        DatasetProfile with one ColumnProfile per schema entry
    """
    logger.info(f"Profiling dataset: {len(dataset)} rows, {len(schema)} columns")

    profiles = []
    for column in schema:
        profile = profile_column(dataset, column)
        profiles.append(profile)
        logger.debug(
            f"Column '{column.name}': missing={profile.missing_percentage}%, "
            f"unique={profile.unique_count}, constant={profile.is_constant}"
        )

    return DatasetProfile(columns=tuple(profiles), total_rows=len(dataset))
