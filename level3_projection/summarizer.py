"""Dataset summarizer: row count and column counts per semantic type."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Sequence

from level2_classification.types import ColumnSchema, SemanticType
from utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DatasetSummary:
    """Row count and per-type column counts.

    ``count_by_type`` has a key for every semantic type, zero when unused,
    and is read-only.
    """

    total_rows: int
    count_by_type: Mapping[SemanticType, int] = field(
        default_factory=lambda: MappingProxyType({t: 0 for t in SemanticType})
    )

    @property
    def total_columns(self) -> int:
        return sum(self.count_by_type.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_rows": self.total_rows,
            "count_by_type": {t.value: count for t, count in self.count_by_type.items()},
        }


def summarize(dataset: Sequence[Any], schema: Sequence[ColumnSchema]) -> DatasetSummary:
    """Count columns per semantic type.

    Always succeeds; an empty schema yields zero counts.

    Args:
        dataset: Ordered sequence of records
        schema: Column schemas produced by the classifier

    Returns:
        DatasetSummary with total_rows == len(dataset)
    """
    counts = {semantic_type: 0 for semantic_type in SemanticType}
    for column in schema:
        counts[column.type] += 1

    summary = DatasetSummary(total_rows=len(dataset), count_by_type=MappingProxyType(counts))
    logger.debug(
        f"Summary: {summary.total_rows} rows, "
        + ", ".join(f"{t.value}={n}" for t, n in counts.items())
    )
    return summary
