"""
Scoring API endpoints.

Stateless: every request carries the template sections, responses and
optional rule overrides; nothing is stored.
"""
from fastapi import APIRouter, HTTPException

from millcert.logger import logger
from millcert.schemas.scoring_request import ScoringRequest, SuggestionRequest, WhatIfRequest
from millcert.schemas.scoring_result import (
    ScoreResponse,
    ScoringResultOut,
    SuggestionsResponse,
    WhatIfOut,
    WhatIfResponse,
)
from millcert.services.scoring.engine import ScoringEngine
from millcert.services.scoring.suggestions import SuggestionGenerator
from millcert.services.scoring.what_if import WhatIfProjector

router = APIRouter(tags=["Scoring"])

engine = ScoringEngine()
projector = WhatIfProjector(engine)
suggestion_generator = SuggestionGenerator()


@router.post("/calculate", response_model=ScoreResponse)
async def calculate_score(request: ScoringRequest):
    """Score an audit."""
    try:
        result = engine.calculate_overall_score(
            request.domain_sections(),
            request.domain_responses(),
            request.domain_rules()
        )
    except Exception as e:
        logger.exception(f"Error calculating audit score: {e}")
        raise HTTPException(status_code=500, detail="Failed to calculate score")

    return ScoreResponse(scoring_result=ScoringResultOut.from_result(result))


@router.post("/what-if", response_model=WhatIfResponse)
async def what_if(request: WhatIfRequest):
    """Project the score after hypothetical answer changes."""
    try:
        analysis = projector.what_if_analysis(
            request.domain_sections(),
            request.domain_responses(),
            request.hypothetical_changes,
            request.domain_rules()
        )
    except Exception as e:
        logger.exception(f"Error performing what-if analysis: {e}")
        raise HTTPException(status_code=500, detail="Failed to perform analysis")

    return WhatIfResponse(analysis=WhatIfOut.from_result(analysis))


@router.post("/suggestions", response_model=SuggestionsResponse)
async def suggestions(request: SuggestionRequest):
    """Build an improvement plan from the audit's red flags."""
    try:
        result = engine.calculate_overall_score(
            request.domain_sections(),
            request.domain_responses(),
            request.domain_rules()
        )
        report = suggestion_generator.generate(
            result.red_flags,
            result.overall_percentage,
            request.target_score
        )
    except Exception as e:
        logger.exception(f"Error generating suggestions: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate suggestions")

    return SuggestionsResponse.from_report(report)
