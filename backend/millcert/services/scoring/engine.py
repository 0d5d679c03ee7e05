"""
Scoring Engine - Overall scorer that combines all section scores.

Coordinates:
- Section aggregation
- Red-flag detection
- Issue counts by criticality
- Category assignment with the critical auto-fail override
"""

from typing import Iterable, Sequence

from millcert.logger import logger
from millcert.services.scoring.item_evaluator import ItemEvaluator
from millcert.services.scoring.models import (
    AuditResponse,
    Category,
    Criticality,
    RedFlag,
    ScoringResult,
    ScoringRules,
    Section,
)
from millcert.services.scoring.red_flags import RedFlagDetector
from millcert.services.scoring.section_aggregator import SectionAggregator
from millcert.services.scoring.weights import SCORING_VERSION


def classify(percentage: float, critical_failures: int, rules: ScoringRules) -> Category:
    """Assign the audit category.

    Precedence: auto-fail on critical failures, then excellent, good and
    needs-improvement thresholds in that order. Thresholds are not checked
    for ordering.
    """
    if rules.auto_fail_on_critical and critical_failures > 0:
        return Category.NON_COMPLIANT
    if percentage >= rules.excellent_threshold:
        return Category.EXCELLENT
    if percentage >= rules.good_threshold:
        return Category.GOOD
    if percentage >= rules.needs_improvement_threshold:
        return Category.NEEDS_IMPROVEMENT
    return Category.NON_COMPLIANT


def _count(flags: list[RedFlag], criticality: Criticality) -> int:
    return sum(1 for f in flags if f.criticality == criticality)


class ScoringEngine:
    """Main scoring orchestrator."""

    def __init__(self):
        evaluator = ItemEvaluator()
        self.section_aggregator = SectionAggregator(evaluator)
        self.red_flag_detector = RedFlagDetector(evaluator)

    def calculate_overall_score(
        self,
        sections: Sequence[Section],
        responses: Iterable[AuditResponse],
        rules: ScoringRules
    ) -> ScoringResult:
        """Score a full audit.

        Args:
            sections: Template sections in declared order
            responses: All responses collected for the audit
            rules: Weighting policy and thresholds

        Returns:
            ScoringResult with section scores, red flags and category
        """
        responses = list(responses)

        section_scores = [
            self.section_aggregator.score(section, responses, rules)
            for section in sections
        ]

        total_points = sum(s.total_points for s in section_scores)
        achieved_points = sum(s.achieved_points for s in section_scores)
        overall_percentage = achieved_points / total_points * 100 if total_points > 0 else 0.0

        red_flags = self.red_flag_detector.detect(sections, responses, rules)
        critical_failures = _count(red_flags, Criticality.CRITICAL)
        major_issues = _count(red_flags, Criticality.MAJOR)
        minor_issues = _count(red_flags, Criticality.MINOR)

        category = classify(overall_percentage, critical_failures, rules)

        logger.info(
            f"Scored {len(section_scores)} sections: {achieved_points:g}/{total_points:g} "
            f"({overall_percentage:.1f}%), category={category.value}, "
            f"flags={critical_failures}/{major_issues}/{minor_issues}"
        )

        return ScoringResult(
            overall_score=achieved_points,
            overall_percentage=overall_percentage,
            category=category,
            section_scores=section_scores,
            red_flags=red_flags,
            total_points=total_points,
            achieved_points=achieved_points,
            critical_failures=critical_failures,
            major_issues=major_issues,
            minor_issues=minor_issues,
            scoring_version=SCORING_VERSION
        )
