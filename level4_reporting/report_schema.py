"""Report schema for an analysis run.

This module aggregates everything one pass over a dataset produced (column
types with their evidence, summary, chart, profile and a formatted preview)
into one serializable object.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from level2_classification.classifier import ColumnClassification
from level3_projection.chart import ChartSeries
from level3_projection.formatting import TablePreview
from level3_projection.summarizer import DatasetSummary
from settings.schema import EngineSettings
from utils.constants import APP_VERSION

from .profiler import DatasetProfile


def serialize_classifications(
    classifications: tuple[ColumnClassification, ...],
) -> list[dict[str, Any]]:
    """Serialize classifications with the rule that decided each type."""
    columns = []
    for result in classifications:
        entry = result.schema.to_dict()
        entry["evidence"] = result.evidence.to_dict() if result.evidence else None
        entry["matched_rule"] = (
            result.matched_rule.describe() if result.matched_rule else "fallback"
        )
        columns.append(entry)
    return columns


@dataclass(frozen=True)
class AnalysisReport:
    """Complete result of analysing one dataset."""

    run_id: str
    source: str
    classifications: tuple[ColumnClassification, ...]
    summary: DatasetSummary
    chart: Optional[ChartSeries]
    profile: DatasetProfile
    preview: TablePreview
    settings: EngineSettings
    version: str = APP_VERSION
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    )

    @property
    def schema(self):
        return tuple(result.schema for result in self.classifications)

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary for JSON serialization."""
        return {
            "version": self.version,
            "timestamp": self.timestamp,
            "run_id": self.run_id,
            "source": self.source,
            "schema": serialize_classifications(self.classifications),
            "summary": self.summary.to_dict(),
            "chart": self.chart.to_dict() if self.chart is not None else None,
            "profile": self.profile.to_dict(),
            "preview": self.preview.to_dict(),
            "settings": self.settings.model_dump(mode="json"),
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str, ensure_ascii=False)
