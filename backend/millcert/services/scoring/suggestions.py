"""
Suggestion Generator - Turns red flags into an improvement plan.

Buckets:
- Quick wins: first 3 minor flags (low effort, +2 pts estimate)
- Critical fixes: every critical flag (+10 pts estimate)
- Major improvements: first 5 major flags (+5 pts estimate)
"""

from dataclasses import dataclass, field
from typing import Literal, Optional, Sequence

from millcert.services.scoring.models import Criticality, RedFlag
from millcert.services.scoring.recommendations import corrective_actions, related_training

Effort = Literal["LOW", "MEDIUM", "HIGH"]
SuggestionPriority = Literal["HIGH", "MEDIUM", "LOW"]
SuggestionCategory = Literal["QUICK_WIN", "CRITICAL", "IMPROVEMENT"]

EFFORT_SCORE = {"LOW": 1, "MEDIUM": 2, "HIGH": 3}

MAX_QUICK_WINS = 3
MAX_MAJOR_IMPROVEMENTS = 5


@dataclass
class Suggestion:
    """One recommended corrective action."""
    id: str
    title: str
    description: str
    priority: SuggestionPriority
    category: SuggestionCategory
    estimated_impact: float  # percentage points
    effort: Effort
    actions: list[str] = field(default_factory=list)
    related_items: list[str] = field(default_factory=list)
    training_modules: list[str] = field(default_factory=list)

    @property
    def value_score(self) -> float:
        return self.estimated_impact / EFFORT_SCORE[self.effort]


@dataclass
class SuggestionReport:
    """Suggestions plus summary counts."""
    current_score: float
    suggestions: list[Suggestion]
    summary: dict[str, int]
    target_score: Optional[float] = None
    score_diff: Optional[float] = None


class SuggestionGenerator:
    """Build improvement suggestions from red flags."""

    def generate(
        self,
        red_flags: Sequence[RedFlag],
        current_score: float,
        target_score: Optional[float] = None
    ) -> SuggestionReport:
        """Generate suggestions, re-ranked by value when a higher target is given.

        Args:
            red_flags: Flags from a scoring pass
            current_score: Current overall percentage
            target_score: Desired overall percentage (optional)

        Returns:
            SuggestionReport
        """
        minor = [f for f in red_flags if f.criticality == Criticality.MINOR]
        critical = [f for f in red_flags if f.criticality == Criticality.CRITICAL]
        major = [f for f in red_flags if f.criticality == Criticality.MAJOR]

        suggestions = []
        suggestions += [self._quick_win(i, f) for i, f in enumerate(minor[:MAX_QUICK_WINS])]
        suggestions += [self._critical_fix(i, f) for i, f in enumerate(critical)]
        suggestions += [self._improvement(i, f) for i, f in enumerate(major[:MAX_MAJOR_IMPROVEMENTS])]

        summary = {
            "quick_wins": sum(1 for s in suggestions if s.category == "QUICK_WIN"),
            "critical": sum(1 for s in suggestions if s.category == "CRITICAL"),
            "improvements": sum(1 for s in suggestions if s.category == "IMPROVEMENT"),
        }

        if target_score is not None and target_score > current_score:
            return SuggestionReport(
                current_score=current_score,
                suggestions=sorted(suggestions, key=lambda s: s.value_score, reverse=True),
                summary=summary,
                target_score=target_score,
                score_diff=target_score - current_score
            )

        return SuggestionReport(current_score=current_score, suggestions=suggestions, summary=summary)

    def _quick_win(self, index: int, flag: RedFlag) -> Suggestion:
        return Suggestion(
            id=f"qw-{index}",
            title=f"Quick Fix: {flag.question}",
            description=flag.recommendation,
            priority="MEDIUM",
            category="QUICK_WIN",
            estimated_impact=2,
            effort="LOW",
            actions=[flag.recommendation, "Document corrective action", "Update audit response"],
            related_items=[flag.item_id]
        )

    def _critical_fix(self, index: int, flag: RedFlag) -> Suggestion:
        return Suggestion(
            id=f"crit-{index}",
            title=f"Critical Issue: {flag.question}",
            description=flag.recommendation,
            priority="HIGH",
            category="CRITICAL",
            estimated_impact=10,
            effort="HIGH" if "equipment" in flag.question.lower() else "MEDIUM",
            actions=corrective_actions(flag.question, flag.recommendation),
            related_items=[flag.item_id],
            training_modules=related_training(flag.question)
        )

    def _improvement(self, index: int, flag: RedFlag) -> Suggestion:
        return Suggestion(
            id=f"maj-{index}",
            title=f"Major Improvement: {flag.question}",
            description=flag.recommendation,
            priority="MEDIUM",
            category="IMPROVEMENT",
            estimated_impact=5,
            effort="MEDIUM",
            actions=corrective_actions(flag.question, flag.recommendation),
            related_items=[flag.item_id],
            training_modules=related_training(flag.question)
        )
