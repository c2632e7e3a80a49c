"""Level 2: Column Classification.

This module coerces single raw values and assigns one semantic type to
every column using an ordered list of threshold rules.
"""

from .classifier import (
    ColumnClassification,
    classify,
    classify_columns,
    column_names,
    compute_evidence,
    sample_column,
)
from .coercers import (
    display_string,
    is_boolean_like,
    is_date_like,
    is_numeric,
    to_boolean_label,
    to_date_label,
    to_number,
)
from .rules import (
    DEFAULT_RULES,
    FALLBACK_TYPE,
    CardinalityRule,
    ClassificationRule,
    RatioRule,
    build_rules,
    evaluate_rules,
)
from .types import DIMENSION_TYPES, ColumnEvidence, ColumnSchema, SemanticType

__all__ = [
    "build_rules",
    "CardinalityRule",
    "ClassificationRule",
    "classify",
    "classify_columns",
    "column_names",
    "ColumnClassification",
    "ColumnEvidence",
    "ColumnSchema",
    "compute_evidence",
    "DEFAULT_RULES",
    "DIMENSION_TYPES",
    "display_string",
    "evaluate_rules",
    "FALLBACK_TYPE",
    "is_boolean_like",
    "is_date_like",
    "is_numeric",
    "RatioRule",
    "sample_column",
    "SemanticType",
    "to_boolean_label",
    "to_date_label",
    "to_number",
]
