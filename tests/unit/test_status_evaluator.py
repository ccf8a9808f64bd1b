# ============================================================================
# FILE: tests/unit/test_status_evaluator.py
# ============================================================================
"""
Unit tests for the reference-range status evaluator
"""

import pytest

from medical_report_analyzer import ParameterStatus, StatusEvaluator
from medical_report_analyzer.validators import evaluate_status

N = ParameterStatus.NORMAL
A = ParameterStatus.ABNORMAL
C = ParameterStatus.CRITICAL


@pytest.fixture
def evaluator():
    return StatusEvaluator()


@pytest.mark.parametrize("value,expected", [
    (69.9, A), (70, N), (100, N), (101, A), (125, A), (125.5, C), (126, C),
])
def test_glucose_boundaries(evaluator, value, expected):
    assert evaluator.evaluate("Glucose", value) is expected


@pytest.mark.parametrize("value,expected", [
    (150, N), (199, N), (200, A), (239, A), (240, C), (300, C),
])
def test_cholesterol_boundaries(evaluator, value, expected):
    assert evaluator.evaluate("Cholesterol", value) is expected


@pytest.mark.parametrize("value,expected", [
    (11.9, A), (12, N), (14.2, N), (16, N), (16.1, A), (20, A),
])
def test_hemoglobin_never_critical(evaluator, value, expected):
    assert evaluator.evaluate("Hemoglobin", value) is expected


@pytest.mark.parametrize("pressure,expected", [
    ((119, 79), N),
    ((135, 85), A),
    ((145, 70), C),
    ((120, 79), A),
    ((119, 80), A),
    ((110, 90), C),
    ((140, 60), C),
])
def test_blood_pressure(evaluator, pressure, expected):
    assert evaluator.evaluate("Blood Pressure", pressure) is expected


@pytest.mark.parametrize("name", ["Heart Rate", "Temperature", "WBC Count", "HDL", "Unknown"])
def test_parameters_without_rules_are_normal(evaluator, name):
    assert evaluator.has_rule(name) is False
    assert evaluator.evaluate(name, 99999) is N


def test_custom_rule_injection():
    """New rules plug in without touching the extractor"""
    def fever(value, ranges):
        return C if value >= ranges["critical_at"] else N

    evaluator = StatusEvaluator(
        rules={"Temperature": fever},
        reference_ranges={"Temperature": {"critical_at": 103.0}},
    )
    assert evaluator.evaluate("Temperature", 104) is C
    assert evaluator.evaluate("Temperature", 98.6) is N
    assert evaluator.evaluate("Glucose", 300) is N


def test_module_level_helper():
    assert evaluate_status("Glucose", 126) is C
    assert evaluate_status("Blood Pressure", (119, 79)) is N
