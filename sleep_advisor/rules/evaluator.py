"""
Rule Evaluator — Single Forward Pass

Runs every rule in catalog order exactly once against one fact record.
"Forward chaining" here means data-driven firing only: conclusions are
never fed back in as new facts.

Constraints:
- Each rule produces an explicit RuleOutcome (matched / not matched / failed)
- A rule whose condition or explanation raises (or whose explanation is
  not a string) is isolated: logged, reported as failed, never fired.
  Remaining rules still run.
- No retries
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from sleep_advisor.facts import FactRecord
from .knowledge_base import RULES, Rule
from .schemas import FiredRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleOutcome:
    """Result of evaluating a single rule."""
    rule: Rule
    matched: bool
    explanation: Optional[str] = None  # Rendered only when matched
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_fired_rule(self) -> FiredRule:
        """FiredRule trace entry for a matched outcome."""
        return FiredRule(
            rule_id=self.rule.id,
            priority=self.rule.priority,
            conditions_matched=self.rule.complexity,
        )


def evaluate_rule(rule: Rule, facts: FactRecord) -> RuleOutcome:
    """
    Evaluate one rule.

    The explanation is rendered as part of firing, so a broken
    explanation generator isolates the rule just like a broken condition.
    """
    try:
        if not rule.condition(facts):
            return RuleOutcome(rule=rule, matched=False)
        explanation = rule.explanation(facts)
        if not isinstance(explanation, str):
            raise TypeError(f"explanation returned {type(explanation).__name__}")
    except Exception as e:
        logger.warning(f"[Evaluator] Skipping rule {rule.id}: {type(e).__name__}: {e}")
        return RuleOutcome(rule=rule, matched=False, error=f"{type(e).__name__}: {e}")

    return RuleOutcome(rule=rule, matched=True, explanation=explanation)


def evaluate(
    facts: FactRecord,
    rules: Sequence[Rule] = RULES,
) -> Tuple[List[RuleOutcome], List[RuleOutcome]]:
    """
    Evaluate all rules against a fact record.

    Args:
        facts: The caller's fact record (trusted, not re-validated)
        rules: Rule catalog, evaluated in order

    Returns:
        (matched, failures): matched outcomes in evaluation order,
        and the outcomes of rules that raised
    """
    matched: List[RuleOutcome] = []
    failures: List[RuleOutcome] = []

    for rule in rules:
        outcome = evaluate_rule(rule, facts)
        if outcome.failed:
            failures.append(outcome)
        elif outcome.matched:
            matched.append(outcome)

    if failures:
        logger.warning(
            f"[Evaluator] {len(failures)}/{len(rules)} rules failed: "
            f"{[o.rule.id for o in failures]}"
        )

    return matched, failures
