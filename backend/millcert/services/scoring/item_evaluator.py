"""
Item Evaluator - Scores one checklist item against one response.

Rules:
- YES_NO: full points for True / "YES"
- NUMERIC: full points inside the optimal band, half inside [min, max], else 0
- DROPDOWN / MULTIPLE_CHOICE: full points when the answer equals the target
- TEXT: full points for any non-blank answer (content reviewed by humans)
"""

from millcert.logger import logger
from millcert.services.scoring.models import (
    AuditResponse,
    BoolValue,
    ChecklistItem,
    ItemScore,
    NumberValue,
    ScoringRules,
    TextValue,
    read_value,
)
from millcert.services.scoring.weights import OPTIMAL_BAND_RATIO, PARTIAL_CREDIT, max_points


def optimal_band(item: ChecklistItem) -> tuple[float, float]:
    """Full-credit window around the numeric target.

    Callers must check ``item.target_range`` first.
    """
    low, high = item.target_range.min, item.target_range.max
    target = item.target_value if item.target_value is not None else (low + high) / 2
    tolerance = (high - low) / 2
    return target - tolerance * OPTIMAL_BAND_RATIO, target + tolerance * OPTIMAL_BAND_RATIO


def same_value(answer, expected) -> bool:
    """Exact match; booleans never equal numbers (True != 1)."""
    if isinstance(answer, bool) != isinstance(expected, bool):
        return False
    return answer == expected


class ItemEvaluator:
    """Evaluate a single item response."""

    def evaluate(
        self,
        item: ChecklistItem,
        response: AuditResponse,
        rules: ScoringRules
    ) -> ItemScore:
        """Score one response.

        Args:
            item: The checklist item being answered
            response: The auditor's response for that item
            rules: Weighting policy for this pass

        Returns:
            ItemScore with points, max points and compliance
        """
        possible = max_points(item, rules)
        value = read_value(item, response)

        if isinstance(value, BoolValue):
            return self._all_or_nothing(possible, value.value)

        if isinstance(value, NumberValue):
            return self._score_numeric(item, value, possible)

        if isinstance(value, TextValue):
            return self._all_or_nothing(possible, bool(value.value.strip()))

        # DROPDOWN / MULTIPLE_CHOICE
        return self._all_or_nothing(possible, same_value(value.value, item.target_value))

    def _all_or_nothing(self, possible: float, passed: bool) -> ItemScore:
        if passed:
            return ItemScore(possible, possible, True)
        return ItemScore(0, possible, False)

    def _score_numeric(self, item: ChecklistItem, value: NumberValue, possible: float) -> ItemScore:
        if item.target_range is None:
            logger.warning(f"Numeric item {item.id} has no target range; scoring 0")
            return ItemScore(0, possible, False)

        if value.value is None:
            logger.warning(f"Unreadable numeric response for item {item.id}; scoring 0")
            return ItemScore(0, possible, False)

        band_min, band_max = optimal_band(item)
        if band_min <= value.value <= band_max:
            return ItemScore(possible, possible, True)

        # Partial credit still counts as non-compliant
        if item.target_range.min <= value.value <= item.target_range.max:
            return ItemScore(possible * PARTIAL_CREDIT, possible, False)

        return ItemScore(0, possible, False)
