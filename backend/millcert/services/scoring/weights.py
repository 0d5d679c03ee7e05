"""
Scoring Weights Configuration.

Tier weights and category thresholds come from settings by default; templates
can carry their own ScoringRules, which are threaded explicitly through every
scorer.
"""

from millcert.config import settings
from millcert.services.scoring.models import ChecklistItem, Criticality, ScoringRules

# Scoring version
SCORING_VERSION = "1.2"

# Red-flag priority per tier (1 = most urgent)
PRIORITY_BY_CRITICALITY = {
    Criticality.CRITICAL: 1,
    Criticality.MAJOR: 2,
    Criticality.MINOR: 3,
}

# Share of max points for a NUMERIC value inside [min, max] but outside the optimal band
PARTIAL_CREDIT = 0.5

# Optimal band half-width as a share of the range tolerance
OPTIMAL_BAND_RATIO = 0.1


def default_scoring_rules() -> ScoringRules:
    """Build ScoringRules from environment-backed settings."""
    return ScoringRules(
        critical_weight=settings.CRITICAL_WEIGHT,
        major_weight=settings.MAJOR_WEIGHT,
        minor_weight=settings.MINOR_WEIGHT,
        passing_threshold=settings.PASSING_THRESHOLD,
        excellent_threshold=settings.EXCELLENT_THRESHOLD,
        good_threshold=settings.GOOD_THRESHOLD,
        needs_improvement_threshold=settings.NEEDS_IMPROVEMENT_THRESHOLD,
        auto_fail_on_critical=settings.AUTO_FAIL_ON_CRITICAL,
    )


def tier_weight(criticality: Criticality, rules: ScoringRules) -> float:
    """Default point weight for a criticality tier."""
    weights = {
        Criticality.CRITICAL: rules.critical_weight,
        Criticality.MAJOR: rules.major_weight,
        Criticality.MINOR: rules.minor_weight,
    }
    return weights[criticality]


def max_points(item: ChecklistItem, rules: ScoringRules) -> float:
    """Explicit item weight when set (0 included), else the tier default."""
    if item.weight is not None:
        return item.weight
    return tier_weight(item.criticality, rules)


# --- Validation (Prevent Drift) ---
def _validate_priorities():
    """Every tier must map to a distinct priority."""
    if set(PRIORITY_BY_CRITICALITY) != set(Criticality):
        raise ValueError("CRITICAL: priority table does not cover every criticality tier")
    if len(set(PRIORITY_BY_CRITICALITY.values())) != len(PRIORITY_BY_CRITICALITY):
        raise ValueError("CRITICAL: criticality tiers share a red-flag priority")

_validate_priorities()
