"""Tests for the ordered classification rules."""

import pytest

from level2_classification.classifier import compute_evidence
from level2_classification.rules import (
    DEFAULT_RULES,
    FALLBACK_TYPE,
    CardinalityRule,
    RatioRule,
    build_rule,
    build_rules,
    evaluate_rules,
)
from level2_classification.types import ColumnEvidence, SemanticType
from settings.schema import ClassifierSettings


def make_evidence(**overrides):
    values = dict(
        sample_size=10,
        numeric_ratio=0.0,
        date_ratio=0.0,
        boolean_ratio=0.0,
        distinct_count=10,
        unique_ratio=1.0,
    )
    values.update(overrides)
    return ColumnEvidence(**values)


class TestRatioRule:
    def test_threshold_is_strict(self):
        rule = RatioRule(SemanticType.NUMBER, "numeric_ratio", 0.7)
        assert not rule.matches(make_evidence(numeric_ratio=0.7))
        assert rule.matches(make_evidence(numeric_ratio=0.71))

    def test_reads_its_own_metric(self):
        rule = RatioRule(SemanticType.DATE, "date_ratio", 0.6)
        assert not rule.matches(make_evidence(numeric_ratio=1.0))
        assert rule.matches(make_evidence(date_ratio=0.9))


class TestCardinalityRule:
    rule = CardinalityRule(SemanticType.CATEGORY, max_distinct=20, max_unique_ratio=0.7)

    def test_low_cardinality_matches(self):
        assert self.rule.matches(make_evidence(distinct_count=20, unique_ratio=0.4))

    def test_too_many_distinct_values(self):
        assert not self.rule.matches(make_evidence(distinct_count=21, unique_ratio=0.4))

    def test_unique_ratio_is_strict(self):
        assert not self.rule.matches(make_evidence(distinct_count=7, unique_ratio=0.7))


class TestBuildRules:
    def test_default_order(self):
        assert [rule.name for rule in DEFAULT_RULES] == ["number", "date", "boolean", "category"]

    def test_thresholds_from_settings(self):
        settings = ClassifierSettings(numeric_threshold=0.9, category_max_distinct=5)
        rules = {rule.name: rule for rule in build_rules(settings)}
        assert rules["number"].threshold == 0.9
        assert rules["category"].max_distinct == 5

    def test_custom_order(self):
        rules = build_rules(ClassifierSettings(rule_order=("boolean", "number")))
        assert [rule.semantic_type for rule in rules] == [SemanticType.BOOLEAN, SemanticType.NUMBER]

    def test_unknown_rule(self):
        with pytest.raises(ValueError, match="Unknown classification rule"):
            build_rule("text", ClassifierSettings())


class TestEvaluateRules:
    def test_fallback(self):
        semantic_type, rule = evaluate_rules(DEFAULT_RULES, make_evidence())
        assert semantic_type == FALLBACK_TYPE == SemanticType.TEXT
        assert rule is None

    def test_zero_one_strings_prefer_number(self):
        evidence = compute_evidence(["1", "0", "1", "1"])
        assert evidence.numeric_ratio == 1.0
        assert evidence.boolean_ratio == 1.0

        semantic_type, rule = evaluate_rules(DEFAULT_RULES, evidence)
        assert semantic_type == SemanticType.NUMBER
        assert rule.metric == "numeric_ratio"

    def test_order_decides_ties(self):
        evidence = compute_evidence(["1", "0", "1", "1"])
        rules = build_rules(ClassifierSettings(rule_order=("boolean", "number", "date", "category")))
        semantic_type, _ = evaluate_rules(rules, evidence)
        assert semantic_type == SemanticType.BOOLEAN
