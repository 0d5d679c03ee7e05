"""
Pytest configuration and fixtures.

Usage:
    pytest tests/ -v
"""

import pytest

from millcert.services.scoring.engine import ScoringEngine
from millcert.services.scoring.item_evaluator import ItemEvaluator
from millcert.services.scoring.models import ScoringRules


@pytest.fixture
def rules():
    """Default rules: 10/5/2 weights, 90/75/60 thresholds, auto-fail on."""
    return ScoringRules()


@pytest.fixture
def evaluator():
    return ItemEvaluator()


@pytest.fixture
def engine():
    return ScoringEngine()
