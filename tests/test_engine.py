"""
Overall scoring tests, including the reference audit scenarios.
"""

import pytest

from factories import answer, numeric_item, section, yes_no_item
from millcert.services.scoring.engine import classify
from millcert.services.scoring.models import Category, Criticality, ScoringRules
from millcert.services.scoring.weights import SCORING_VERSION


def minor_section(passed: int, failed: int, id="s1"):
    """Section of weight-1 MINOR yes/no items, `passed` of them answered YES."""
    items = [yes_no_item(f"{id}-{i}", criticality=Criticality.MINOR, weight=1) for i in range(passed + failed)]
    responses = [answer(item.id, "YES" if i < passed else "NO") for i, item in enumerate(items)]
    return section(*items, id=id), responses


class TestScenarios:

    def test_a_failed_critical_yes_no(self, engine, rules):
        item = yes_no_item("premix_temp", criticality=Criticality.CRITICAL, weight=10)
        result = engine.calculate_overall_score([section(item)], [answer("premix_temp", "NO")], rules)

        assert result.achieved_points == 0
        assert result.total_points == 10
        assert result.category == Category.NON_COMPLIANT
        assert len(result.red_flags) == 1
        assert result.red_flags[0].priority == 1
        assert result.critical_failures == 1

    def test_b_numeric_on_target(self, engine, rules):
        result = engine.calculate_overall_score([section(numeric_item())], [answer("doser_accuracy", 30)], rules)

        assert result.achieved_points == 5
        assert result.overall_percentage == 100
        assert result.red_flags == []
        assert result.category == Category.EXCELLENT

    def test_c_numeric_partial_credit(self, engine, rules):
        result = engine.calculate_overall_score([section(numeric_item())], [answer("doser_accuracy", 35)], rules)

        assert result.achieved_points == 2.5
        assert result.section_scores[0].compliant_items == 0
        assert len(result.red_flags) == 1
        assert result.red_flags[0].priority == 2
        assert result.major_issues == 1

    def test_d_numeric_out_of_range(self, engine, rules):
        result = engine.calculate_overall_score([section(numeric_item())], [answer("doser_accuracy", 50)], rules)

        assert result.achieved_points == 0
        assert len(result.red_flags) == 1
        assert result.category == Category.NON_COMPLIANT


class TestOverallScore:

    def test_sums_across_sections(self, engine, rules):
        s1, r1 = minor_section(3, 1, id="s1")
        s2, r2 = minor_section(1, 3, id="s2")
        result = engine.calculate_overall_score([s1, s2], r1 + r2, rules)

        assert result.total_points == 8
        assert result.achieved_points == 4
        assert result.overall_score == 4
        assert result.overall_percentage == 50
        assert [s.section_id for s in result.section_scores] == ["s1", "s2"]
        assert result.minor_issues == 4
        assert result.scoring_version == SCORING_VERSION

    def test_no_sections(self, engine, rules):
        result = engine.calculate_overall_score([], [], rules)
        assert result.total_points == 0
        assert result.overall_percentage == 0
        assert result.category == Category.NON_COMPLIANT

    def test_partial_audit_is_scoreable(self, engine, rules):
        sec = section(yes_no_item("a", weight=5), yes_no_item("b", weight=5))
        result = engine.calculate_overall_score([sec], [answer("a", "YES")], rules)
        assert result.overall_percentage == 50
        assert result.red_flags == []

    def test_accepts_iterators(self, engine, rules):
        sec, responses = minor_section(2, 0)
        result = engine.calculate_overall_score([sec], iter(responses), rules)
        assert result.overall_percentage == 100

    def test_idempotent(self, engine, rules):
        sec = section(
            yes_no_item("a", criticality=Criticality.CRITICAL),
            numeric_item("n"),
            yes_no_item("b", criticality=Criticality.MINOR),
        )
        responses = [answer("a", "NO"), answer("n", 35), answer("b", "YES")]
        assert engine.calculate_overall_score([sec], responses, rules) == \
            engine.calculate_overall_score([sec], responses, rules)


class TestCategory:

    @pytest.mark.parametrize("passed,failed,expected", [
        (10, 0, Category.EXCELLENT),
        (19, 1, Category.EXCELLENT),
        (3, 1, Category.GOOD),
        (8, 2, Category.GOOD),
        (7, 3, Category.NEEDS_IMPROVEMENT),
        (13, 7, Category.NEEDS_IMPROVEMENT),
        (1, 1, Category.NON_COMPLIANT),
        (0, 4, Category.NON_COMPLIANT),
    ])
    def test_thresholds(self, engine, rules, passed, failed, expected):
        sec, responses = minor_section(passed, failed)
        assert engine.calculate_overall_score([sec], responses, rules).category == expected

    def test_auto_fail_overrides_percentage(self, engine, rules):
        sec, responses = minor_section(99, 0)
        critical = yes_no_item("crit", criticality=Criticality.CRITICAL, weight=1)
        sections = [sec, section(critical, id="s2")]
        responses = responses + [answer("crit", "NO")]

        result = engine.calculate_overall_score(sections, responses, rules)

        assert result.overall_percentage == pytest.approx(99)
        assert result.critical_failures == 1
        assert result.category == Category.NON_COMPLIANT

    def test_auto_fail_disabled(self, engine):
        rules = ScoringRules(auto_fail_on_critical=False)
        sec, responses = minor_section(99, 0)
        critical = yes_no_item("crit", criticality=Criticality.CRITICAL, weight=1)
        result = engine.calculate_overall_score(
            [sec, section(critical, id="s2")], responses + [answer("crit", "NO")], rules
        )
        assert result.category == Category.EXCELLENT

    def test_unanswered_critical_does_not_auto_fail(self, engine, rules):
        sec, responses = minor_section(99, 0)
        critical = yes_no_item("crit", criticality=Criticality.CRITICAL, weight=1)
        result = engine.calculate_overall_score([sec, section(critical, id="s2")], responses, rules)
        assert result.critical_failures == 0
        assert result.category == Category.EXCELLENT

    def test_misconfigured_thresholds_follow_precedence(self):
        rules = ScoringRules(excellent_threshold=90, good_threshold=95, needs_improvement_threshold=85)
        assert classify(92, 0, rules) == Category.EXCELLENT
        assert classify(88, 0, rules) == Category.NEEDS_IMPROVEMENT
        assert classify(50, 0, rules) == Category.NON_COMPLIANT

    def test_classify_auto_fail(self, rules):
        assert classify(100, 1, rules) == Category.NON_COMPLIANT
        assert classify(100, 0, rules) == Category.EXCELLENT
