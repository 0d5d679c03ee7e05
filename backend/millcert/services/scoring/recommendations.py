"""
Remediation rules - Issue text, recommendations, corrective actions and training.

Items can name a rule explicitly through their tags; otherwise rules are
matched by keywords in the lower-cased question text.
"""

from dataclasses import dataclass
from typing import Optional

from millcert.services.scoring.item_evaluator import optimal_band
from millcert.services.scoring.models import (
    AuditResponse,
    ChecklistItem,
    NumberValue,
    ResponseType,
    read_value,
)


@dataclass(frozen=True)
class RemediationRule:
    """Recommendation and corrective actions for one kind of non-compliance."""
    tag: str
    recommendation: str
    all_of: tuple[str, ...] = ()
    any_of: tuple[str, ...] = ()
    actions: tuple[str, ...] = ()

    def matches(self, question: str) -> bool:
        if not (self.all_of or self.any_of):
            return False
        if self.all_of and not all(k in question for k in self.all_of):
            return False
        if self.any_of and not any(k in question for k in self.any_of):
            return False
        return True


REMEDIATION_RULES = (
    RemediationRule(
        tag="doser_calibration",
        all_of=("doser", "calibration"),
        recommendation="Re-calibrate doser within 7 days and upload new calibration certificate",
        actions=(
            "Stop production immediately",
            "Perform full doser calibration check",
            "Adjust doser settings as needed",
            "Run verification test (minimum 3 cycles)",
            "Document calibration results",
            "Upload calibration certificate",
            "Resume production only after approval",
        ),
    ),
    RemediationRule(
        tag="premix_storage",
        all_of=("premix", "storage"),
        recommendation=(
            "Install temperature monitoring and ventilation system. "
            "Verify storage conditions daily."
        ),
        actions=(
            "Inspect current storage conditions",
            "Install temperature monitoring device",
            "Ensure ventilation system is functional",
            "Transfer premix to appropriate storage if needed",
            "Implement daily temperature logging",
            "Train staff on proper premix handling",
        ),
    ),
    RemediationRule(
        tag="quality_control",
        any_of=("qc", "quality control"),
        recommendation="Implement daily QC log and maintain for minimum 12 months",
        actions=(
            "Review QC procedures and requirements",
            "Implement daily QC sampling schedule",
            "Create QC log templates",
            "Train operators on sampling techniques",
            "Establish sample retention policy",
            "Set up regular QC review meetings",
        ),
    ),
    RemediationRule(
        tag="documentation",
        any_of=("record", "documentation"),
        recommendation=(
            "Establish documentation procedures and train staff on "
            "record keeping requirements"
        ),
    ),
)

RULES_BY_TAG = {rule.tag: rule for rule in REMEDIATION_RULES}
RULES_BY_RECOMMENDATION = {rule.recommendation: rule for rule in REMEDIATION_RULES}

# (keywords, training modules); every matching entry contributes
TRAINING_RULES = (
    (("doser", "calibration"), ("Volumetric Doser Calibration", "Advanced Dosing Calibration")),
    (("premix",), ("Premix Handling and Storage",)),
    (("qc", "quality"), ("Quality Control Sampling Techniques",)),
    (("mixing", "blend"), ("Mixing Uniformity Verification",)),
)

GENERIC_ACTIONS = (
    "Assign responsibility to specific person",
    "Set completion deadline",
    "Document corrective action",
    "Verify effectiveness",
)


def find_rule(item: ChecklistItem) -> Optional[RemediationRule]:
    """Rule named by the item's tags, else the first keyword match on the question."""
    for tag in item.tags:
        if tag in RULES_BY_TAG:
            return RULES_BY_TAG[tag]

    question = item.question.lower()
    for rule in REMEDIATION_RULES:
        if rule.matches(question):
            return rule
    return None


def recommendation_for(item: ChecklistItem) -> str:
    rule = find_rule(item)
    if rule:
        return rule.recommendation
    return f"Review and address non-compliance for: {item.question}"


def corrective_actions(question: str, recommendation: str) -> list[str]:
    """Step-by-step corrective actions for a flagged item."""
    rule = RULES_BY_RECOMMENDATION.get(recommendation)
    if rule is None:
        lowered = question.lower()
        rule = next((r for r in REMEDIATION_RULES if r.matches(lowered)), None)
    if rule and rule.actions:
        return list(rule.actions)
    return [recommendation, *GENERIC_ACTIONS]


def related_training(question: str) -> list[str]:
    lowered = question.lower()
    modules = []
    for keywords, names in TRAINING_RULES:
        if any(k in lowered for k in keywords):
            modules.extend(names)
    return modules


def describe_issue(item: ChecklistItem, response: AuditResponse) -> str:
    """Issue text for a non-compliant response, templated per response type."""
    if item.response_type == ResponseType.YES_NO:
        return f"Failed compliance check: {item.question}"

    if item.response_type == ResponseType.NUMERIC:
        unit = f" {item.unit}" if item.unit else ""
        value = read_value(item, response)
        if item.target_range is None:
            return f"No acceptable range configured for: {item.question}"
        if isinstance(value, NumberValue) and value.value is None:
            return f"Value {response.value!r} could not be read as a number"

        low, high = item.target_range.min, item.target_range.max
        if low <= value.value <= high:
            band_min, band_max = optimal_band(item)
            return (
                f"Value {response.value}{unit} is within acceptable range but outside "
                f"the optimal band ({band_min:g}-{band_max:g}{unit})"
            )
        return f"Value {response.value}{unit} is outside acceptable range ({low:g}-{high:g}{unit})"

    return f"Non-compliant response for: {item.question}"
