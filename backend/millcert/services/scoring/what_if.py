"""
What-If Projector - Re-scores an audit with hypothetical answer changes.
"""
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional, Sequence

from millcert.logger import logger
from millcert.services.scoring.engine import ScoringEngine
from millcert.services.scoring.models import AuditResponse, ScoringRules, Section, WhatIfResult


def apply_changes(
    responses: Iterable[AuditResponse],
    hypothetical_changes: Mapping[str, Any]
) -> list[AuditResponse]:
    """Copy responses, overriding values for item ids in the change map.

    Items without an existing response are not added.
    """
    return [
        replace(r, value=hypothetical_changes[r.item_id]) if r.item_id in hypothetical_changes else r
        for r in responses
    ]


class WhatIfProjector:
    """Projects score improvement for hypothetical changes."""

    def __init__(self, engine: Optional[ScoringEngine] = None):
        self.engine = engine or ScoringEngine()

    def what_if_analysis(
        self,
        sections: Sequence[Section],
        current_responses: Iterable[AuditResponse],
        hypothetical_changes: Mapping[str, Any],
        rules: ScoringRules
    ) -> WhatIfResult:
        """Compare the current score with the score after applying changes.

        A negative improvement means the changes make the audit worse.
        """
        current_responses = list(current_responses)

        current_score = self.engine.calculate_overall_score(sections, current_responses, rules)
        modified = apply_changes(current_responses, hypothetical_changes)
        projected_score = self.engine.calculate_overall_score(sections, modified, rules)

        improvement = projected_score.overall_percentage - current_score.overall_percentage
        logger.info(
            f"What-if over {len(hypothetical_changes)} item(s): "
            f"{current_score.overall_percentage:.1f}% -> {projected_score.overall_percentage:.1f}%"
        )

        return WhatIfResult(
            current_score=current_score,
            projected_score=projected_score,
            improvement=improvement,
            items_to_fix=list(hypothetical_changes.keys())
        )
