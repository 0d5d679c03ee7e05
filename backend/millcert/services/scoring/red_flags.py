"""
Red-Flag Detector - Enumerates non-compliant answered items.

Unanswered items are not flagged; they only depress the section score.
"""
from typing import Iterable, Optional, Sequence

from millcert.services.scoring.item_evaluator import ItemEvaluator
from millcert.services.scoring.models import AuditResponse, RedFlag, ScoringRules, Section
from millcert.services.scoring.recommendations import describe_issue, recommendation_for
from millcert.services.scoring.section_aggregator import index_responses
from millcert.services.scoring.weights import PRIORITY_BY_CRITICALITY


class RedFlagDetector:
    """Detect red flags across all sections."""

    def __init__(self, evaluator: Optional[ItemEvaluator] = None):
        self.evaluator = evaluator or ItemEvaluator()

    def detect(
        self,
        sections: Sequence[Section],
        responses: Iterable[AuditResponse],
        rules: ScoringRules
    ) -> list[RedFlag]:
        """Return red flags sorted by priority (1 = most urgent).

        Flags with equal priority keep section and item declaration order.
        """
        by_item = index_responses(responses)
        flags = []

        for section in sections:
            for item in section.items:
                response = by_item.get(item.id)
                if response is None:
                    continue

                if self.evaluator.evaluate(item, response, rules).compliant:
                    continue

                flags.append(RedFlag(
                    item_id=item.id,
                    section_id=section.id,
                    question=item.question,
                    criticality=item.criticality,
                    issue=describe_issue(item, response),
                    recommendation=recommendation_for(item),
                    priority=PRIORITY_BY_CRITICALITY[item.criticality]
                ))

        return sorted(flags, key=lambda f: f.priority)
