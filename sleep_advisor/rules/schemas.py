"""
Result Schemas — Inference Output Contract

Field names serialize in camelCase (ruleId, firedRules, inferenceTimeMs ...)
because exported audit trails and the results view reference them by
those names. Python attributes stay snake_case.

Output guarantees:
- confidence in [0, 1]
- recommendations ordered by priority desc, then first fired rule id
- rules_matched == len(fired_rules)
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from sleep_advisor.facts import FactRecord


class _ContractModel(BaseModel):
    """Base for camelCase-serialized result models."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecommendationCategory(str, Enum):
    """Severity bucket derived from priority."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class FiredRule(_ContractModel):
    """A rule whose condition was true for the current fact record."""
    rule_id: str
    priority: int = Field(..., ge=1, le=10)
    conditions_matched: int = Field(..., ge=1, description="Estimated sub-condition count")


class Recommendation(_ContractModel):
    """
    One user-facing piece of advice, merged from every fired rule
    that produced the same advice text.
    """
    id: str = Field(..., description="REC-n, 1-based over the ranked order")
    text: str
    priority: int = Field(..., ge=1, le=10, description="Max priority of merged rules")
    confidence: float = Field(..., ge=0.0, le=1.0)
    fired_rules: List[str] = Field(..., min_length=1, description="Rule ids, evaluation order")
    explanation: str = Field(..., description="Explanation of the first contributing rule")
    category: RecommendationCategory


class AnalysisMeta(_ContractModel):
    """Run metrics for one analysis pass."""
    inference_time_ms: float = Field(..., ge=0)
    total_rules_evaluated: int = Field(..., ge=0)
    rules_matched: int = Field(..., ge=0)


class AnalysisResult(_ContractModel):
    """Complete output of InferenceEngine.analyze()."""
    recommendations: List[Recommendation] = Field(default_factory=list)
    fired_rules: List[FiredRule] = Field(default_factory=list)
    meta: AnalysisMeta


class ExportEnvelope(_ContractModel):
    """Audit/download document: the answers plus what was concluded from them."""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    input: FactRecord
    analysis: AnalysisResult

    @field_validator('timestamp')
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
