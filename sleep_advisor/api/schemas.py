"""
Pydantic Schemas — API Request/Response Models

Request bodies reuse FactRecord directly: out-of-domain answers are
rejected with 422 before they reach the inference engine.
"""

from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sleep_advisor.rules import Recommendation, Rule


class RuleSummary(BaseModel):
    """Catalog entry as exposed over HTTP (predicates are not serializable)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    priority: int
    recommendation: str
    complexity: int

    @classmethod
    def from_rule(cls, rule: Rule) -> "RuleSummary":
        return cls(
            id=rule.id,
            priority=rule.priority,
            recommendation=rule.recommendation,
            complexity=rule.complexity,
        )


class TopPriorityResponse(BaseModel):
    """Top-N recommendations plus the medical-attention flag."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recommendations: List[Recommendation]
    requires_medical_attention: bool


class ErrorResponse(BaseModel):
    """Error response body."""
    detail: str
