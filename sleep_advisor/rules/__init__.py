"""
Rules Module — Sleep Hygiene Knowledge Base + Inference Engine

Public API:
- RULES: The 18-rule catalog
- InferenceEngine / inference_engine: analyze, top_priority, export_record
- AnalysisResult, Recommendation, FiredRule: Output contract
- RecommendationCategory: critical/high/medium/low
"""

from .knowledge_base import (
    Rule,
    RULES,
    MEDICAL_ATTENTION_RULE_ID,
    estimate_condition_complexity,
    get_rule_by_id,
    get_all_rule_ids,
)
from .schemas import (
    FiredRule,
    Recommendation,
    RecommendationCategory,
    AnalysisMeta,
    AnalysisResult,
    ExportEnvelope,
)
from .evaluator import RuleOutcome, evaluate, evaluate_rule
from .scoring import (
    RecommendationDraft,
    aggregate,
    compute_confidence,
    classify_category,
    rank,
    PRIORITY_CRITICAL,
    PRIORITY_HIGH,
    PRIORITY_MEDIUM,
)
from .engine import InferenceEngine, inference_engine

__all__ = [
    "Rule",
    "RULES",
    "MEDICAL_ATTENTION_RULE_ID",
    "estimate_condition_complexity",
    "get_rule_by_id",
    "get_all_rule_ids",
    "FiredRule",
    "Recommendation",
    "RecommendationCategory",
    "AnalysisMeta",
    "AnalysisResult",
    "ExportEnvelope",
    "RuleOutcome",
    "evaluate",
    "evaluate_rule",
    "RecommendationDraft",
    "aggregate",
    "compute_confidence",
    "classify_category",
    "rank",
    "PRIORITY_CRITICAL",
    "PRIORITY_HIGH",
    "PRIORITY_MEDIUM",
    "InferenceEngine",
    "inference_engine",
]
