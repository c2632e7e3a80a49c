"""Ordered classification rules.

A column's type is the type of the first rule that matches its evidence;
``text`` is the fallback when none does. Ratios are not mutually exclusive
(``"1"``/``"0"`` pass the numeric, boolean and date checks alike), so the
order of the rule list decides ties.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Union

from settings.schema import ClassifierSettings

from .types import ColumnEvidence, SemanticType

RatioMetric = Literal["numeric_ratio", "date_ratio", "boolean_ratio"]

FALLBACK_TYPE = SemanticType.TEXT


@dataclass(frozen=True)
class RatioRule:
    """Matches when one of the evidence ratios exceeds a threshold."""

    semantic_type: SemanticType
    metric: RatioMetric
    threshold: float

    @property
    def name(self) -> str:
        return self.semantic_type.value

    def matches(self, evidence: ColumnEvidence) -> bool:
        return getattr(evidence, self.metric) > self.threshold

    def describe(self) -> str:
        return f"{self.metric} > {self.threshold}"


@dataclass(frozen=True)
class CardinalityRule:
    """Matches low-cardinality columns: few distinct values that repeat."""

    semantic_type: SemanticType
    max_distinct: int
    max_unique_ratio: float

    @property
    def name(self) -> str:
        return self.semantic_type.value

    def matches(self, evidence: ColumnEvidence) -> bool:
        return (
            evidence.distinct_count <= self.max_distinct
            and evidence.unique_ratio < self.max_unique_ratio
        )

    def describe(self) -> str:
        return f"distinct_count <= {self.max_distinct} and unique_ratio < {self.max_unique_ratio}"


ClassificationRule = Union[RatioRule, CardinalityRule]


def build_rule(name: str, settings: ClassifierSettings) -> ClassificationRule:
    """Build a single named rule from classifier settings.

    Raises:
        ValueError: If the rule name is unknown
    """
    if name == "number":
        return RatioRule(SemanticType.NUMBER, "numeric_ratio", settings.numeric_threshold)
    if name == "date":
        return RatioRule(SemanticType.DATE, "date_ratio", settings.date_threshold)
    if name == "boolean":
        return RatioRule(SemanticType.BOOLEAN, "boolean_ratio", settings.boolean_threshold)
    if name == "category":
        return CardinalityRule(
            SemanticType.CATEGORY,
            settings.category_max_distinct,
            settings.category_max_unique_ratio,
        )
    raise ValueError(f"Unknown classification rule: {name}")


def build_rules(settings: Optional[ClassifierSettings] = None) -> tuple[ClassificationRule, ...]:
    """Build the ordered rule list from classifier settings."""
    settings = settings or ClassifierSettings()
    return tuple(build_rule(name, settings) for name in settings.rule_order)


DEFAULT_RULES = build_rules()


def evaluate_rules(
    rules: Sequence[ClassificationRule], evidence: ColumnEvidence
) -> tuple[SemanticType, Optional[ClassificationRule]]:
    """Return the type of the first matching rule, or the fallback type.

    Returns:
        Tuple of (semantic type, matched rule or None when falling back)
    """
    for rule in rules:
        if rule.matches(evidence):
            return rule.semantic_type, rule
    return FALLBACK_TYPE, None
