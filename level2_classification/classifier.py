"""Column type classifier.

This module assigns exactly one semantic type to every column of a dataset.
Classification looks only at a bounded prefix of each column (the sample
window), so the result is deterministic given the same first rows.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from level1_ingestion.cells import is_blank
from settings.schema import EngineSettings, SerialDateSettings
from utils import get_logger

from .coercers import is_boolean_like, is_date_like, is_numeric
from .rules import ClassificationRule, build_rules, evaluate_rules
from .types import ColumnEvidence, ColumnSchema, SemanticType

logger = get_logger(__name__)


@dataclass(frozen=True)
class ColumnClassification:
    """Classification of one column with the evidence behind it.

    ``evidence`` is None when every sampled cell was blank; ``matched_rule``
    is None when the column fell through to the fallback type.
    """

    schema: ColumnSchema
    evidence: Optional[ColumnEvidence]
    matched_rule: Optional[ClassificationRule]


def column_names(dataset: Sequence[Mapping[str, Any]]) -> list[str]:
    """Column names in the insertion order of the first record's keys."""
    if not dataset or not isinstance(dataset[0], Mapping):
        return []
    return list(dataset[0].keys())


def sample_column(
    dataset: Sequence[Mapping[str, Any]], column: str, sample_size: int
) -> list[Any]:
    """Non-blank values of a column within the first ``sample_size`` records."""
    sample = []
    for row in dataset[:sample_size]:
        value = row.get(column) if isinstance(row, Mapping) else None
        if not is_blank(value):
            sample.append(value)
    return sample


def _distinct_key(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    try:
        hash(value)
    except TypeError:
        return repr(value)
    return value


def compute_evidence(
    sample: Sequence[Any], serial_window: Optional[SerialDateSettings] = None
) -> ColumnEvidence:
    """Compute type ratios and cardinality over a non-empty sample.

    Args:
        sample: Non-blank sampled values
        serial_window: Numeric window treated as spreadsheet date serials

    Returns:
        ColumnEvidence for the sample
    """
    serial_window = serial_window or SerialDateSettings()
    size = len(sample)
    numeric_count = sum(1 for v in sample if is_numeric(v))
    date_count = sum(1 for v in sample if is_date_like(v, serial_window))
    boolean_count = sum(1 for v in sample if is_boolean_like(v))
    # whitespace-only strings count toward the sample but not as distinct values
    distinct = {key for key in (_distinct_key(v) for v in sample) if key != ""}

    return ColumnEvidence(
        sample_size=size,
        numeric_ratio=numeric_count / size,
        date_ratio=date_count / size,
        boolean_ratio=boolean_count / size,
        distinct_count=len(distinct),
        unique_ratio=len(distinct) / size,
    )


def classify_columns(
    dataset: Sequence[Mapping[str, Any]], settings: Optional[EngineSettings] = None
) -> tuple[ColumnClassification, ...]:
    """Classify every column and keep the evidence and matched rule.

    Args:
        dataset: Ordered sequence of records
        settings: Optional engine settings (defaults apply when None)

    Returns:
        One ColumnClassification per column, in column order
    """
    if not dataset:
        return ()

    settings = settings or EngineSettings()
    rules = build_rules(settings.classifier)
    sample_size = min(len(dataset), settings.classifier.sample_size)
    names = column_names(dataset)

    logger.debug(f"Classifying {len(names)} columns over a {sample_size}-row sample")

    results = []
    for name in names:
        sample = sample_column(dataset, name, sample_size)
        if not sample:
            results.append(ColumnClassification(ColumnSchema(name, SemanticType.TEXT), None, None))
            logger.debug(f"Column '{name}': no non-blank values in sample, type=text")
            continue

        evidence = compute_evidence(sample, settings.serial_dates)
        semantic_type, rule = evaluate_rules(rules, evidence)
        results.append(ColumnClassification(ColumnSchema(name, semantic_type), evidence, rule))
        logger.debug(
            f"Column '{name}': type={semantic_type.value}, "
            f"numeric={evidence.numeric_ratio:.2f}, date={evidence.date_ratio:.2f}, "
            f"boolean={evidence.boolean_ratio:.2f}, distinct={evidence.distinct_count}"
        )

    return tuple(results)


def classify(
    dataset: Sequence[Mapping[str, Any]], settings: Optional[EngineSettings] = None
) -> tuple[ColumnSchema, ...]:
    """Infer one semantic type per column.

    Total over any dataset shape: an empty dataset yields an empty schema and
    malformed or mixed columns fall through to ``text``.

    Args:
        dataset: Ordered sequence of records
        settings: Optional engine settings (defaults apply when None)

    Returns:
        Tuple of ColumnSchema, in first-record key order
    """
    return tuple(result.schema for result in classify_columns(dataset, settings))
