"""
Property-based tests for the scoring engine.

Uses hypothesis to check invariants that must hold for any template and
response set.
"""

import math

from hypothesis import given, settings, strategies as st

from factories import answer, numeric_item, section, yes_no_item
from millcert.services.scoring.engine import ScoringEngine
from millcert.services.scoring.item_evaluator import ItemEvaluator
from millcert.services.scoring.models import Category, Criticality, ScoringRules
from millcert.services.scoring.section_aggregator import SectionAggregator

RULES = ScoringRules()

criticalities = st.sampled_from(list(Criticality))
yes_no_answers = st.one_of(st.none(), st.sampled_from(["YES", "NO", True, False, "maybe"]))


@st.composite
def audits(draw):
    """A single-section yes/no audit; None answers are left unanswered."""
    size = draw(st.integers(min_value=0, max_value=20))
    items = [
        yes_no_item(
            f"i{i}",
            criticality=draw(criticalities),
            weight=draw(st.one_of(st.none(), st.integers(min_value=0, max_value=20)))
        )
        for i in range(size)
    ]
    responses = []
    for item in items:
        value = draw(yes_no_answers)
        if value is not None:
            responses.append(answer(item.id, value))
    return [section(*items)], responses


class TestScoringProperties:

    @settings(max_examples=100, deadline=None)
    @given(audits())
    def test_idempotent(self, audit):
        sections, responses = audit
        engine = ScoringEngine()
        assert engine.calculate_overall_score(sections, responses, RULES) == \
            engine.calculate_overall_score(sections, responses, RULES)

    @settings(max_examples=100, deadline=None)
    @given(audits())
    def test_weight_conservation(self, audit):
        sections, responses = audit
        score = SectionAggregator().score(sections[0], responses, RULES)
        expected = sum(
            item.weight if item.weight is not None else
            {Criticality.CRITICAL: 10, Criticality.MAJOR: 5, Criticality.MINOR: 2}[item.criticality]
            for item in sections[0].items
        )
        assert math.isclose(score.total_points, expected)
        assert 0 <= score.percentage <= 100

    @settings(max_examples=100, deadline=None)
    @given(audits())
    def test_red_flags_sorted_by_priority(self, audit):
        sections, responses = audit
        result = ScoringEngine().calculate_overall_score(sections, responses, RULES)
        priorities = [f.priority for f in result.red_flags]
        assert priorities == sorted(priorities)
        assert result.critical_failures + result.major_issues + result.minor_issues == len(result.red_flags)

    @settings(max_examples=100, deadline=None)
    @given(audits())
    def test_auto_fail_override(self, audit):
        sections, responses = audit
        result = ScoringEngine().calculate_overall_score(sections, responses, RULES)
        if result.critical_failures > 0:
            assert result.category == Category.NON_COMPLIANT

    @settings(max_examples=200, deadline=None)
    @given(
        low=st.integers(min_value=-500, max_value=500),
        width=st.integers(min_value=1, max_value=200),
        data=st.data()
    )
    def test_numeric_monotonic_toward_target(self, low, width, data):
        high = low + width
        target = data.draw(st.integers(min_value=low, max_value=high))
        far = data.draw(st.integers(min_value=low - 100, max_value=high + 100))
        near = data.draw(st.integers(min_value=min(far, target), max_value=max(far, target)))

        item = numeric_item(target=target, low=low, high=high)
        evaluator = ItemEvaluator()
        far_points = evaluator.evaluate(item, answer(item.id, far), RULES).points
        near_points = evaluator.evaluate(item, answer(item.id, near), RULES).points

        assert near_points >= far_points
