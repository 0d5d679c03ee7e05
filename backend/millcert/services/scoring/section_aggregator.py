"""
Section Aggregator - Sums item scores within a section.
"""
from typing import Iterable, Optional

from millcert.services.scoring.item_evaluator import ItemEvaluator
from millcert.services.scoring.models import AuditResponse, ScoringRules, Section, SectionScore
from millcert.services.scoring.weights import max_points


def index_responses(responses: Iterable[AuditResponse]) -> dict[str, AuditResponse]:
    """Map item id to its response; the first response for an item wins."""
    indexed: dict[str, AuditResponse] = {}
    for response in responses:
        indexed.setdefault(response.item_id, response)
    return indexed


class SectionAggregator:
    """Scores one section."""

    def __init__(self, evaluator: Optional[ItemEvaluator] = None):
        self.evaluator = evaluator or ItemEvaluator()

    def score(
        self,
        section: Section,
        responses: Iterable[AuditResponse],
        rules: ScoringRules
    ) -> SectionScore:
        """
        Calculate the section score.
        Unanswered items add their max points to the total and nothing to the achieved points.
        """
        by_item = index_responses(responses)

        total_points = 0.0
        achieved_points = 0.0
        compliant_items = 0

        for item in section.items:
            response = by_item.get(item.id)
            if response is None:
                total_points += max_points(item, rules)
                continue

            result = self.evaluator.evaluate(item, response, rules)
            total_points += result.max_points
            achieved_points += result.points
            if result.compliant:
                compliant_items += 1

        percentage = achieved_points / total_points * 100 if total_points > 0 else 0.0
        if section.minimum_threshold is not None:
            passed = percentage >= section.minimum_threshold
        else:
            passed = True

        return SectionScore(
            section_id=section.id,
            section_name=section.name,
            score=achieved_points,
            percentage=percentage,
            total_points=total_points,
            achieved_points=achieved_points,
            item_count=len(section.items),
            compliant_items=compliant_items,
            passed=passed
        )
