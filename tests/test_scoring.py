"""
Scoring Tests

Tests verify:
- Aggregation by exact advice text (max priority, first explanation)
- Confidence formula: min(1, round(0.5 + 0.05*p + 0.1*avg, 2))
- Category thresholds via named constants
- Ranking: priority desc, then first fired rule id as a STRING
- REC-n ids assigned over the ranked order
"""

import pytest

from sleep_advisor.facts import FactRecord
from sleep_advisor.rules import (
    PRIORITY_CRITICAL,
    PRIORITY_HIGH,
    PRIORITY_MEDIUM,
    Recommendation,
    RecommendationCategory,
    Rule,
    aggregate,
    classify_category,
    compute_confidence,
    evaluate,
    rank,
)


def make_recommendation(first_rule: str, priority: int) -> Recommendation:
    return Recommendation(
        id="",
        text=f"advice for {first_rule}",
        priority=priority,
        confidence=1.0,
        fired_rules=[first_rule],
        explanation="why",
        category=classify_category(priority),
    )


def shared_text_rules():
    """Three rules, two of which share identical advice text."""
    return [
        Rule(
            id="S1", priority=3,
            condition=lambda f: True,
            recommendation="Same advice",
            explanation=lambda f: "first explanation",
        ),
        Rule(
            id="OTHER", priority=6,
            condition=lambda f: True,
            recommendation="Different advice",
            explanation=lambda f: "other explanation",
        ),
        Rule(
            id="S2", priority=4,
            condition=lambda f: True,
            recommendation="Same advice",
            explanation=lambda f: "second explanation",
            and_joins=1,
        ),
    ]


class TestAggregate:
    """Test deduplication by advice text."""

    def test_identical_text_merges(self):
        matched, _ = evaluate(FactRecord.benign(), shared_text_rules())
        drafts = aggregate(matched)

        assert [d.text for d in drafts] == ["Same advice", "Different advice"]
        merged = drafts[0]
        assert merged.fired_rule_ids == ["S1", "S2"]
        assert merged.priority == 4
        assert merged.explanation == "first explanation"
        assert merged.conditions_matched == [1, 2]
        assert merged.average_conditions_matched == 1.5

    def test_text_change_splits(self):
        """A one-character wording change means a separate recommendation."""
        rules = [
            Rule(id="A", priority=5, condition=lambda f: True,
                 recommendation="Sleep more.", explanation=lambda f: ""),
            Rule(id="B", priority=5, condition=lambda f: True,
                 recommendation="Sleep more!", explanation=lambda f: ""),
        ]
        matched, _ = evaluate(FactRecord.benign(), rules)
        assert len(aggregate(matched)) == 2

    def test_empty(self):
        assert aggregate([]) == []

    def test_catalog_texts_are_distinct(self):
        """Every built-in rule maps to its own recommendation."""
        facts = FactRecord.benign(
            bedtime_consistent="no", sleep_duration=5, caffeine_after_3pm="yes",
            alcohol_before_bed="yes", late_screen_time=120, daytime_nap_minutes=90,
            exercise_within_3hrs_of_bed="yes", noise_level="high", light_level="bright",
            stress_level="high", room_temperature=28, uses_bed_for_work="yes",
            medical_issues="sleep_apnea",
        )
        matched, _ = evaluate(facts)
        assert len(matched) == 18
        assert len(aggregate(matched)) == 18


class TestConfidence:
    """Test the fixed confidence formula."""

    @pytest.mark.parametrize("priority,avg,expected", [
        (1, 1, 0.65),
        (4, 1.5, 0.85),
        (6, 1, 0.9),
        (7, 1, 0.95),
        (6, 2, 1.0),
        (8, 1, 1.0),
        (10, 2, 1.0),
    ])
    def test_formula(self, priority, avg, expected):
        assert compute_confidence(priority, avg) == pytest.approx(expected)

    def test_capped_at_one(self):
        assert compute_confidence(10, 5) == 1.0

    def test_two_decimals(self):
        value = compute_confidence(3, 4 / 3)
        assert value == round(value, 2)


class TestCategory:
    """Test category thresholds."""

    def test_uses_named_constants(self):
        assert PRIORITY_MEDIUM < PRIORITY_HIGH < PRIORITY_CRITICAL

    @pytest.mark.parametrize("priority,category", [
        (10, RecommendationCategory.CRITICAL),
        (9, RecommendationCategory.CRITICAL),
        (8, RecommendationCategory.HIGH),
        (7, RecommendationCategory.HIGH),
        (6, RecommendationCategory.MEDIUM),
        (5, RecommendationCategory.MEDIUM),
        (4, RecommendationCategory.LOW),
        (1, RecommendationCategory.LOW),
    ])
    def test_thresholds(self, priority, category):
        assert classify_category(priority) == category

    def test_serialized_value(self):
        assert classify_category(9).value == "critical"


class TestRank:
    """Test presentation ordering."""

    def test_priority_descending(self):
        ranked = rank([
            make_recommendation("R7", 6),
            make_recommendation("R2", 10),
            make_recommendation("R3", 8),
        ])
        assert [r.priority for r in ranked] == [10, 8, 6]

    def test_tie_break_is_lexicographic(self):
        """'R10' < 'R16' < 'R2' under string ordering."""
        ranked = rank([
            make_recommendation("R2", 9),
            make_recommendation("R16", 9),
            make_recommendation("R10", 9),
        ])
        assert [r.fired_rules[0] for r in ranked] == ["R10", "R16", "R2"]

    def test_ids_follow_ranked_order(self):
        ranked = rank([make_recommendation("R7", 6), make_recommendation("R2", 10)])
        assert [r.id for r in ranked] == ["REC-1", "REC-2"]
        assert ranked[0].fired_rules == ["R2"]

    def test_does_not_mutate_input(self):
        unranked = [make_recommendation("R7", 6)]
        rank(unranked)
        assert unranked[0].id == ""

    def test_empty(self):
        assert rank([]) == []
