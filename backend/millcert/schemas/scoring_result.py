"""
Pydantic schemas for scoring responses.
"""

from dataclasses import asdict
from typing import Literal, Optional

from pydantic import BaseModel, Field

from millcert.services.scoring.models import Category, Criticality, ScoringResult, WhatIfResult
from millcert.services.scoring.suggestions import SuggestionReport


class SectionScoreOut(BaseModel):
    """Score for one section."""
    section_id: str
    section_name: str
    score: float
    percentage: float
    total_points: float
    achieved_points: float
    item_count: int
    compliant_items: int
    passed: bool


class RedFlagOut(BaseModel):
    """Non-compliant item."""
    item_id: str
    section_id: str
    question: str
    criticality: Criticality
    issue: str
    recommendation: str
    priority: int = Field(..., ge=1, le=3)


class ScoringResultOut(BaseModel):
    """Complete scoring result."""
    overall_score: float
    overall_percentage: float
    category: Category
    section_scores: list[SectionScoreOut] = []
    red_flags: list[RedFlagOut] = []
    total_points: float
    achieved_points: float
    critical_failures: int
    major_issues: int
    minor_issues: int
    scoring_version: str

    @classmethod
    def from_result(cls, result: ScoringResult) -> "ScoringResultOut":
        return cls.model_validate(asdict(result))


class WhatIfOut(BaseModel):
    """Current vs. projected scoring."""
    current_score: ScoringResultOut
    projected_score: ScoringResultOut
    improvement: float
    items_to_fix: list[str]

    @classmethod
    def from_result(cls, result: WhatIfResult) -> "WhatIfOut":
        return cls.model_validate(asdict(result))


class SuggestionOut(BaseModel):
    """Improvement suggestion."""
    id: str
    title: str
    description: str
    priority: Literal["HIGH", "MEDIUM", "LOW"]
    category: Literal["QUICK_WIN", "CRITICAL", "IMPROVEMENT"]
    estimated_impact: float
    effort: Literal["LOW", "MEDIUM", "HIGH"]
    actions: list[str]
    related_items: list[str]
    training_modules: list[str] = []


class SuggestionSummary(BaseModel):
    quick_wins: int
    critical: int
    improvements: int


class ScoreResponse(BaseModel):
    """Response for /scoring/calculate."""
    success: bool = True
    scoring_result: ScoringResultOut


class WhatIfResponse(BaseModel):
    """Response for /scoring/what-if."""
    success: bool = True
    analysis: WhatIfOut


class SuggestionsResponse(BaseModel):
    """Response for /scoring/suggestions."""
    success: bool = True
    current_score: float
    target_score: Optional[float] = None
    score_diff: Optional[float] = None
    suggestions: list[SuggestionOut]
    summary: SuggestionSummary

    @classmethod
    def from_report(cls, report: SuggestionReport) -> "SuggestionsResponse":
        return cls.model_validate(asdict(report))
