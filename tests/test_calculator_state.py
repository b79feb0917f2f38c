"""
Tests for the displayed calculator state (models/calculator_state.py,
models/nutrition_input.py).
"""

import pytest
from pydantic import ValidationError

from models.calculator_state import CalculatorState, CalculatorStatus
from models.nutrition_estimate import NutritionEstimate
from models.nutrition_input import ActivityLevel, ValidationFailure, ValidationIssue


ESTIMATE = NutritionEstimate(calories=2000, protein=90, carbs=180, fat=30, water=1.8)


def test_idle_has_nothing_populated():
    state = CalculatorState.idle()
    assert state.status is CalculatorStatus.IDLE
    assert state.issues is None
    assert state.estimate is None


def test_invalid_carries_issues_only():
    state = CalculatorState.invalid([ValidationIssue(message="Age is required")])
    assert state.status is CalculatorStatus.INVALID
    assert [i.message for i in state.issues] == ["Age is required"]
    assert state.estimate is None


def test_valid_carries_estimate_only():
    state = CalculatorState.valid(ESTIMATE)
    assert state.status is CalculatorStatus.VALID
    assert state.estimate == ESTIMATE
    assert state.issues is None


@pytest.mark.parametrize("kwargs", [
    {"status": CalculatorStatus.IDLE, "estimate": ESTIMATE},
    {"status": CalculatorStatus.INVALID},
    {"status": CalculatorStatus.INVALID, "issues": [ValidationIssue(message="x")], "estimate": ESTIMATE},
    {"status": CalculatorStatus.VALID},
    {"status": CalculatorStatus.VALID, "estimate": ESTIMATE, "issues": [ValidationIssue(message="x")]},
])
def test_mismatched_slots_are_rejected(kwargs):
    with pytest.raises(ValidationError):
        CalculatorState(**kwargs)


def test_failure_requires_at_least_one_issue():
    with pytest.raises(ValidationError):
        ValidationFailure(issues=[])


@pytest.mark.parametrize("level,label", [
    (ActivityLevel.SEDENTARY, "Sedentary"),
    (ActivityLevel.LIGHT, "Light"),
    (ActivityLevel.MODERATE, "Moderate"),
    (ActivityLevel.ACTIVE, "Active"),
    (ActivityLevel.VERY_ACTIVE, "Very Active"),
])
def test_activity_labels(level, label):
    assert level.label == label
