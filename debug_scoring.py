import json
import os
import sys

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "backend")))

from millcert.schemas.scoring_request import AuditResponseIn, TemplateIn
from millcert.services.scoring.engine import ScoringEngine
from millcert.services.scoring.suggestions import SuggestionGenerator
from millcert.services.scoring.weights import default_scoring_rules
from millcert.services.scoring.what_if import WhatIfProjector

def main(path: str):
    with open(path, "r") as f:
        audit = json.load(f)

    template = TemplateIn.model_validate(audit["template"]).to_domain()
    responses = [AuditResponseIn.model_validate(r).to_domain() for r in audit["responses"]]
    rules = default_scoring_rules()

    engine = ScoringEngine()
    result = engine.calculate_overall_score(template.sections, responses, rules)

    print(f"Template: {template.name}")
    print(f"Score: {result.achieved_points:g}/{result.total_points:g} = {result.overall_percentage:.1f}%")
    print(f"Category: {result.category.value}")
    for section in result.section_scores:
        print(f"  {section.section_name}: {section.percentage:.1f}% passed={section.passed}")

    print(f"Red flags: {len(result.red_flags)}")
    for flag in result.red_flags:
        print(f"  P{flag.priority} [{flag.criticality.value}] {flag.issue}")
        print(f"     -> {flag.recommendation}")

    changes = audit.get("hypotheticalChanges") or {}
    if changes:
        analysis = WhatIfProjector(engine).what_if_analysis(template.sections, responses, changes, rules)
        print(f"What-if: {analysis.projected_score.overall_percentage:.1f}% "
              f"({analysis.improvement:+.1f}), category {analysis.projected_score.category.value}")

    report = SuggestionGenerator().generate(result.red_flags, result.overall_percentage, target_score=90)
    print(f"Suggestions ({report.summary}):")
    for suggestion in report.suggestions:
        print(f"  {suggestion.id} {suggestion.title} [{suggestion.effort}]")

if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else os.path.join(os.path.dirname(__file__), "samples", "fortified_rice_audit.json"))
