"""
Recommendation Scoring — Aggregate, Score, Rank

Turns fired rules into user-facing recommendations:
1. Aggregate: rules with IDENTICAL advice text merge into one recommendation
2. Score: confidence from priority + estimated condition complexity
3. Categorize: critical / high / medium / low from priority
4. Rank: priority desc, then first fired rule id (string order)

Constraints:
- Formula constants and category thresholds are fixed contract values
- Merge key is the exact advice text, not the advice "concept"
- Tie-break is plain string comparison: "R10" < "R16" < "R2"
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .evaluator import RuleOutcome
from .schemas import Recommendation, RecommendationCategory


# ============================================================================
# SCORING CONSTANTS: Explicit, Named, No Magic Numbers
# ============================================================================

# confidence = BASE + PRIORITY_WEIGHT * priority + CONDITION_WEIGHT * avg_conditions
CONFIDENCE_BASE = 0.5
CONFIDENCE_PRIORITY_WEIGHT = 0.05
CONFIDENCE_CONDITION_WEIGHT = 0.1
CONFIDENCE_MAX = 1.0

# Category thresholds (priority scale 1-10)
PRIORITY_CRITICAL = 9   # At or above = critical
PRIORITY_HIGH = 7       # At or above = high
PRIORITY_MEDIUM = 5     # At or above = medium
# Below PRIORITY_MEDIUM = low

RECOMMENDATION_ID_PREFIX = "REC-"


@dataclass
class RecommendationDraft:
    """
    A recommendation before scoring and ranking.

    Only the first member's explanation is kept; later members'
    explanations were rendered during evaluation and are dropped here.
    """
    text: str
    priority: int
    explanation: str
    fired_rule_ids: List[str] = field(default_factory=list)
    conditions_matched: List[int] = field(default_factory=list)

    @property
    def average_conditions_matched(self) -> float:
        return sum(self.conditions_matched) / len(self.conditions_matched)


def aggregate(matched: Sequence[RuleOutcome]) -> List[RecommendationDraft]:
    """
    Merge matched rules that yield the same advice text.

    Args:
        matched: Matched outcomes in evaluation order

    Returns:
        Drafts in order of first appearance
    """
    drafts: Dict[str, RecommendationDraft] = {}

    for outcome in matched:
        rule = outcome.rule
        draft = drafts.get(rule.recommendation)
        if draft is None:
            draft = RecommendationDraft(
                text=rule.recommendation,
                priority=rule.priority,
                explanation=outcome.explanation,
            )
            drafts[rule.recommendation] = draft
        else:
            draft.priority = max(draft.priority, rule.priority)

        draft.fired_rule_ids.append(rule.id)
        draft.conditions_matched.append(rule.complexity)

    return list(drafts.values())


def compute_confidence(priority: int, average_conditions_matched: float) -> float:
    """
    Confidence score in [0, 1], two decimals.

    Higher priority and more specific (multi-condition) rules give
    higher confidence; the result is capped at CONFIDENCE_MAX.
    """
    confidence = (
        CONFIDENCE_BASE
        + CONFIDENCE_PRIORITY_WEIGHT * priority
        + CONFIDENCE_CONDITION_WEIGHT * average_conditions_matched
    )
    return min(CONFIDENCE_MAX, round(confidence, 2))


def classify_category(priority: int) -> RecommendationCategory:
    """
    Classify a priority into a severity bucket.

    Uses EXPLICIT NAMED CONSTANTS — no magic numbers.
    """
    if priority >= PRIORITY_CRITICAL:
        return RecommendationCategory.CRITICAL
    elif priority >= PRIORITY_HIGH:
        return RecommendationCategory.HIGH
    elif priority >= PRIORITY_MEDIUM:
        return RecommendationCategory.MEDIUM
    else:
        return RecommendationCategory.LOW


def score(draft: RecommendationDraft, recommendation_id: str = "") -> Recommendation:
    """Build a scored Recommendation from a draft (id is assigned by rank())."""
    return Recommendation(
        id=recommendation_id,
        text=draft.text,
        priority=draft.priority,
        confidence=compute_confidence(draft.priority, draft.average_conditions_matched),
        fired_rules=list(draft.fired_rule_ids),
        explanation=draft.explanation,
        category=classify_category(draft.priority),
    )


def rank(recommendations: Sequence[Recommendation]) -> List[Recommendation]:
    """
    Sort into presentation order and number them REC-1, REC-2, ...

    Stable sort: priority descending, ties by first fired rule id
    (lexicographic, NOT numeric).
    """
    ordered = sorted(
        recommendations,
        key=lambda r: (-r.priority, r.fired_rules[0]),
    )
    return [
        rec.model_copy(update={"id": f"{RECOMMENDATION_ID_PREFIX}{position}"})
        for position, rec in enumerate(ordered, start=1)
    ]
