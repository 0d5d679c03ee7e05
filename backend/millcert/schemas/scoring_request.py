"""
Pydantic schemas for scoring requests.

Field names are accepted in snake_case or camelCase so payloads stored by
the audit service can be posted unchanged.
"""

from dataclasses import replace
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from millcert.services.scoring.models import (
    AuditResponse,
    ChecklistItem,
    Criticality,
    ResponseType,
    ScoringRules,
    Section,
    TargetRange,
    Template,
    to_number,
)
from millcert.services.scoring.weights import default_scoring_rules


class _RequestModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class TargetRangeIn(_RequestModel):
    """Acceptable range for a numeric item."""
    min: float
    max: float


class ChecklistItemIn(_RequestModel):
    """Checklist item definition."""
    id: str
    question: str
    response_type: ResponseType
    criticality: Criticality
    weight: Optional[float] = Field(None, ge=0)
    target_value: Any = None
    target_range: Optional[TargetRangeIn] = None
    unit: str = ""
    tags: list[str] = []

    @field_validator("response_type", "criticality", mode="before")
    @classmethod
    def _upper(cls, v):
        return v.upper() if isinstance(v, str) else v

    def to_domain(self) -> ChecklistItem:
        target_value = self.target_value
        if self.response_type == ResponseType.NUMERIC:
            target_value = to_number(target_value)
        return ChecklistItem(
            id=self.id,
            question=self.question,
            response_type=self.response_type,
            criticality=self.criticality,
            weight=self.weight,
            target_value=target_value,
            target_range=TargetRange(self.target_range.min, self.target_range.max) if self.target_range else None,
            unit=self.unit,
            tags=tuple(self.tags)
        )


class SectionIn(_RequestModel):
    """Template section."""
    id: str
    name: str
    items: list[ChecklistItemIn] = []
    minimum_threshold: Optional[float] = None

    def to_domain(self) -> Section:
        return Section(
            id=self.id,
            name=self.name,
            items=tuple(i.to_domain() for i in self.items),
            minimum_threshold=self.minimum_threshold
        )


class TemplateIn(_RequestModel):
    """Certification checklist template."""
    id: str
    name: str
    sections: list[SectionIn] = []

    def to_domain(self) -> Template:
        return Template(id=self.id, name=self.name, sections=tuple(s.to_domain() for s in self.sections))


class AuditResponseIn(_RequestModel):
    """Auditor response to one item."""
    item_id: str
    value: Any = None
    evidence: list[str] = []
    notes: Optional[str] = None

    def to_domain(self) -> AuditResponse:
        return AuditResponse(
            item_id=self.item_id,
            value=self.value,
            evidence=tuple(self.evidence),
            notes=self.notes
        )


class ScoringRulesIn(_RequestModel):
    """Rule overrides; omitted fields fall back to configured defaults."""
    critical_weight: Optional[float] = Field(None, ge=0)
    major_weight: Optional[float] = Field(None, ge=0)
    minor_weight: Optional[float] = Field(None, ge=0)
    passing_threshold: Optional[float] = None
    excellent_threshold: Optional[float] = None
    good_threshold: Optional[float] = None
    needs_improvement_threshold: Optional[float] = None
    auto_fail_on_critical: Optional[bool] = None

    def to_domain(self) -> ScoringRules:
        return replace(default_scoring_rules(), **self.model_dump(exclude_none=True))


class ScoringRequest(_RequestModel):
    """Request to score an audit."""
    sections: list[SectionIn]
    responses: list[AuditResponseIn] = []
    rules: Optional[ScoringRulesIn] = None

    class Config:
        json_schema_extra = {
            "example": {
                "sections": [{
                    "id": "dosing",
                    "name": "Dosing Equipment",
                    "minimum_threshold": 70,
                    "items": [{
                        "id": "doser_accuracy",
                        "question": "What is the current doser accuracy (%)?",
                        "response_type": "NUMERIC",
                        "criticality": "MAJOR",
                        "weight": 5,
                        "target_value": 30,
                        "target_range": {"min": 20, "max": 40},
                        "unit": "%"
                    }]
                }],
                "responses": [{"item_id": "doser_accuracy", "value": 35}],
                "rules": {"auto_fail_on_critical": True}
            }
        }

    def domain_sections(self) -> list[Section]:
        return [s.to_domain() for s in self.sections]

    def domain_responses(self) -> list[AuditResponse]:
        return [r.to_domain() for r in self.responses]

    def domain_rules(self) -> ScoringRules:
        return self.rules.to_domain() if self.rules else default_scoring_rules()


class WhatIfRequest(ScoringRequest):
    """Request to project a score with hypothetical answers."""
    hypothetical_changes: dict[str, Any] = Field(..., description="Item id -> hypothetical value")


class SuggestionRequest(ScoringRequest):
    """Request for an improvement plan."""
    target_score: Optional[float] = Field(None, ge=0, le=100)
