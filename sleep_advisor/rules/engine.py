"""
Inference Engine — Fact Record to Ranked, Explained Recommendations

Orchestrates one analysis pass:
    evaluate → aggregate → score → rank → AnalysisResult

Pure deterministic logic. Same input = Same recommendations and trace;
only meta.inference_time_ms varies between runs. No I/O, no shared
mutable state: the catalog is immutable and the grouping accumulator
lives inside a single call.
"""

import logging
import time
from typing import List, Sequence

from sleep_advisor.facts import FactRecord
from .evaluator import evaluate
from .knowledge_base import MEDICAL_ATTENTION_RULE_ID, RULES, Rule
from .schemas import AnalysisMeta, AnalysisResult, ExportEnvelope, Recommendation
from .scoring import aggregate, rank, score

logger = logging.getLogger(__name__)


class InferenceEngine:
    """
    Forward-chaining (single pass) sleep hygiene inference engine.

    Usage:
        from sleep_advisor.rules import inference_engine

        result = inference_engine.analyze(facts)
        top = inference_engine.top_priority(result, 3)
    """

    def __init__(self, rules: Sequence[Rule] = RULES):
        """
        Initialize engine with a rule catalog.

        Args:
            rules: Rule catalog (defaults to the built-in 18 rules)
        """
        self.rules = tuple(rules)

    def analyze(self, facts: FactRecord) -> AnalysisResult:
        """
        Run inference on one fact record.

        Never raises for per-rule faults: failing rules are skipped and
        the result is built from whatever fired.

        Args:
            facts: Complete fact record

        Returns:
            AnalysisResult with ranked recommendations, fired-rule trace
            (evaluation order, not deduplicated) and run metrics
        """
        start = time.perf_counter()

        matched, failures = evaluate(facts, self.rules)
        fired_rules = [outcome.to_fired_rule() for outcome in matched]

        recommendations = rank([score(draft) for draft in aggregate(matched)])

        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)

        logger.debug(
            f"[InferenceEngine] {len(fired_rules)}/{len(self.rules)} rules fired, "
            f"{len(failures)} failed, {len(recommendations)} recommendations "
            f"in {elapsed_ms}ms"
        )

        return AnalysisResult(
            recommendations=recommendations,
            fired_rules=fired_rules,
            meta=AnalysisMeta(
                inference_time_ms=elapsed_ms,
                total_rules_evaluated=len(self.rules),
                rules_matched=len(fired_rules),
            ),
        )

    def top_priority(self, result: AnalysisResult, n: int = 3) -> List[Recommendation]:
        """First n recommendations of an already-ranked result (no re-sort; n < 0 gives none)."""
        return result.recommendations[:max(n, 0)]

    def export_record(self, facts: FactRecord, result: AnalysisResult) -> ExportEnvelope:
        """
        Package answers and analysis into a serializable audit envelope.

        Pure transformation: writing it anywhere is the caller's job
        (see sleep_advisor.reports).
        """
        return ExportEnvelope(input=facts, analysis=result)

    def requires_medical_attention(self, result: AnalysisResult) -> bool:
        """True when the medical-condition rule contributed to any recommendation."""
        return any(
            MEDICAL_ATTENTION_RULE_ID in rec.fired_rules
            for rec in result.recommendations
        )


# Module-level singleton
inference_engine = InferenceEngine()
