"""
Scoring domain models.

Templates, responses and rules are read-only inputs; every result type is
rebuilt from scratch on each scoring pass.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class ResponseType(str, Enum):
    """How an auditor answers a checklist item."""
    YES_NO = "YES_NO"
    NUMERIC = "NUMERIC"
    TEXT = "TEXT"
    DROPDOWN = "DROPDOWN"
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"


class Criticality(str, Enum):
    """Item criticality tier."""
    CRITICAL = "CRITICAL"
    MAJOR = "MAJOR"
    MINOR = "MINOR"


class Category(str, Enum):
    """Overall audit classification."""
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    NEEDS_IMPROVEMENT = "NEEDS_IMPROVEMENT"
    NON_COMPLIANT = "NON_COMPLIANT"


@dataclass(frozen=True)
class TargetRange:
    """Acceptable numeric range for a NUMERIC item."""
    min: float
    max: float


@dataclass(frozen=True)
class ChecklistItem:
    """One audited question."""
    id: str
    question: str
    response_type: ResponseType
    criticality: Criticality
    weight: Optional[float] = None  # None -> tier default from rules
    target_value: Any = None
    target_range: Optional[TargetRange] = None
    unit: str = ""
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class Section:
    """Ordered group of checklist items."""
    id: str
    name: str
    items: tuple[ChecklistItem, ...] = ()
    minimum_threshold: Optional[float] = None


@dataclass(frozen=True)
class Template:
    """Certification checklist template."""
    id: str
    name: str
    sections: tuple[Section, ...] = ()


@dataclass(frozen=True)
class AuditResponse:
    """Auditor's raw answer to one item."""
    item_id: str
    value: Any = None
    evidence: tuple[str, ...] = ()
    notes: Optional[str] = None


@dataclass(frozen=True)
class ScoringRules:
    """Weighting policy and category thresholds for one scoring pass."""
    critical_weight: float = 10
    major_weight: float = 5
    minor_weight: float = 2
    passing_threshold: float = 75
    excellent_threshold: float = 90
    good_threshold: float = 75
    needs_improvement_threshold: float = 60
    auto_fail_on_critical: bool = True


# --- Tagged response values ---

@dataclass(frozen=True)
class BoolValue:
    value: bool


@dataclass(frozen=True)
class NumberValue:
    value: Optional[float]  # None when the raw value is not a readable number


@dataclass(frozen=True)
class TextValue:
    value: str


@dataclass(frozen=True)
class ChoiceValue:
    value: Any


ResponseValue = Union[BoolValue, NumberValue, TextValue, ChoiceValue]


def to_number(raw: Any) -> Optional[float]:
    """Read a raw value as a finite float; None when it is not one."""
    if isinstance(raw, bool) or raw is None:
        return None
    try:
        number = float(str(raw).strip()) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def read_value(item: ChecklistItem, response: AuditResponse) -> ResponseValue:
    """Read a raw response value as the variant for the item's response type."""
    raw = response.value
    if item.response_type == ResponseType.YES_NO:
        return BoolValue(raw is True or raw == "YES")
    if item.response_type == ResponseType.NUMERIC:
        return NumberValue(to_number(raw))
    if item.response_type == ResponseType.TEXT:
        if raw is None:
            return TextValue("")
        return TextValue(raw if isinstance(raw, str) else str(raw))
    return ChoiceValue(raw)


# --- Results ---

@dataclass(frozen=True)
class ItemScore:
    """Points earned by one item."""
    points: float
    max_points: float
    compliant: bool


@dataclass
class SectionScore:
    """Aggregated score for one section."""
    section_id: str
    section_name: str
    score: float
    percentage: float
    total_points: float
    achieved_points: float
    item_count: int
    compliant_items: int
    passed: bool


@dataclass
class RedFlag:
    """A non-compliant item surfaced for remediation."""
    item_id: str
    section_id: str
    question: str
    criticality: Criticality
    issue: str
    recommendation: str
    priority: int  # 1 = most urgent


@dataclass
class ScoringResult:
    """Complete scoring result for one audit."""
    overall_score: float
    overall_percentage: float
    category: Category
    section_scores: list[SectionScore] = field(default_factory=list)
    red_flags: list[RedFlag] = field(default_factory=list)
    total_points: float = 0
    achieved_points: float = 0
    critical_failures: int = 0
    major_issues: int = 0
    minor_issues: int = 0
    scoring_version: str = ""


@dataclass
class WhatIfResult:
    """Current vs. hypothetical scoring."""
    current_score: ScoringResult
    projected_score: ScoringResult
    improvement: float
    items_to_fix: list[str] = field(default_factory=list)
