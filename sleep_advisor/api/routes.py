"""
API Routes — Endpoint Definitions

All handlers are async per the rest of the API. The engine itself is
synchronous and bounded (one pass over the catalog), so it is called inline.

Persisting the last answers/result is left to the client.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Query, Response, status

from sleep_advisor.config import settings
from sleep_advisor.facts import FactRecord
from sleep_advisor.reports import JSON_MEDIA_TYPE, generate_filename, generate_json_report
from sleep_advisor.rules import (
    RULES,
    AnalysisResult,
    get_rule_by_id,
    inference_engine,
)

from .schemas import ErrorResponse, RuleSummary, TopPriorityResponse

logger = logging.getLogger(__name__)


router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    response_model_by_alias=True,
    status_code=status.HTTP_200_OK,
    responses={422: {"description": "Validation error (answer out of domain)"}},
    summary="Analyze sleep hygiene answers",
    description="Runs every rule once and returns ranked, explained recommendations."
)
async def analyze(facts: FactRecord) -> AnalysisResult:
    """
    Analyze one fact record.

    - Validates all 13 answers against their domains
    - Returns recommendations, fired-rule trace and run metrics
    """
    result = inference_engine.analyze(facts)
    logger.info(
        f"Analysis complete: {result.meta.rules_matched} rules matched, "
        f"{len(result.recommendations)} recommendations"
    )
    return result


@router.post(
    "/analyze/top",
    response_model=TopPriorityResponse,
    response_model_by_alias=True,
    summary="Top priority recommendations",
)
async def analyze_top(
    facts: FactRecord,
    n: int = Query(default=settings.DEFAULT_TOP_N, ge=0, le=18, description="How many to return"),
) -> TopPriorityResponse:
    """Analyze and return only the n highest-ranked recommendations."""
    result = inference_engine.analyze(facts)
    return TopPriorityResponse(
        recommendations=inference_engine.top_priority(result, n),
        requires_medical_attention=inference_engine.requires_medical_attention(result),
    )


@router.post(
    "/export",
    summary="Download assessment as JSON",
    response_class=Response,
    responses={200: {"content": {JSON_MEDIA_TYPE: {}}}},
)
async def export_assessment(facts: FactRecord) -> Response:
    """
    Analyze and return the export envelope as a downloadable JSON file.
    """
    result = inference_engine.analyze(facts)
    envelope = inference_engine.export_record(facts, result)
    filename = generate_filename(envelope.timestamp)

    return Response(
        content=generate_json_report(envelope),
        media_type=JSON_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get(
    "/rules",
    response_model=List[RuleSummary],
    response_model_by_alias=True,
    summary="List the rule catalog",
)
async def list_rules() -> List[RuleSummary]:
    """All rules in evaluation order."""
    return [RuleSummary.from_rule(rule) for rule in RULES]


@router.get(
    "/rules/{rule_id}",
    response_model=RuleSummary,
    response_model_by_alias=True,
    responses={404: {"model": ErrorResponse, "description": "Unknown rule id"}},
    summary="Get one rule",
)
async def get_rule(rule_id: str) -> RuleSummary:
    """Look up a rule by its stable id (e.g. R13)."""
    rule = get_rule_by_id(rule_id)
    if rule is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Rule '{rule_id}' not found"
        )
    return RuleSummary.from_rule(rule)
