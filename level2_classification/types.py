"""Semantic types and classification result objects."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SemanticType(str, Enum):
    """Inferred meaning of a column's values."""

    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    CATEGORY = "category"
    TEXT = "text"


# Column types usable as the horizontal axis of the default chart
DIMENSION_TYPES = (SemanticType.DATE, SemanticType.CATEGORY, SemanticType.TEXT)


@dataclass(frozen=True)
class ColumnSchema:
    """Inferred type of a single column."""

    name: str
    type: SemanticType

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type.value}


@dataclass(frozen=True)
class ColumnEvidence:
    """Ratios and counts computed over a column's sample window.

    All ratios are relative to ``sample_size``, the number of non-blank
    values in the window.
    """

    sample_size: int
    numeric_ratio: float
    date_ratio: float
    boolean_ratio: float
    distinct_count: int
    unique_ratio: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "sample_size": self.sample_size,
            "numeric_ratio": round(self.numeric_ratio, 4),
            "date_ratio": round(self.date_ratio, 4),
            "boolean_ratio": round(self.boolean_ratio, 4),
            "distinct_count": self.distinct_count,
            "unique_ratio": round(self.unique_ratio, 4),
        }
