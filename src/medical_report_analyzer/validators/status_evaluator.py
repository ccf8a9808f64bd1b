# ============================================================================
# src/medical_report_analyzer/validators/status_evaluator.py
# ============================================================================
"""
Status Evaluator

Classifies an extracted value as normal / abnormal / critical against the
hard-coded reference ranges. Deterministic and side-effect free.

Rules:
- Hemoglobin: normal within [12, 16], otherwise abnormal
- Blood Pressure: normal if systolic < 120 and diastolic < 80,
  critical if systolic >= 140 or diastolic >= 90, otherwise abnormal
- Glucose: normal within [70, 100], critical above 125, otherwise abnormal
- Cholesterol: normal below 200, critical from 240, otherwise abnormal
- Anything else: normal

The normal check always runs before the critical check.
"""

from typing import Callable, Dict, Mapping, Optional
import logging

from ..constants import REFERENCE_RANGES, ParameterStatus
from ..core.context import NumericValue

logger = logging.getLogger(__name__)

StatusRule = Callable[[NumericValue, Mapping[str, float]], ParameterStatus]


def _hemoglobin_status(value: float, ranges: Mapping[str, float]) -> ParameterStatus:
    if ranges["normal_min"] <= value <= ranges["normal_max"]:
        return ParameterStatus.NORMAL
    return ParameterStatus.ABNORMAL


def _blood_pressure_status(value, ranges: Mapping[str, float]) -> ParameterStatus:
    systolic, diastolic = value
    if systolic < ranges["systolic_normal_below"] and diastolic < ranges["diastolic_normal_below"]:
        return ParameterStatus.NORMAL
    if systolic >= ranges["systolic_critical_at"] or diastolic >= ranges["diastolic_critical_at"]:
        return ParameterStatus.CRITICAL
    return ParameterStatus.ABNORMAL


def _glucose_status(value: float, ranges: Mapping[str, float]) -> ParameterStatus:
    if ranges["normal_min"] <= value <= ranges["normal_max"]:
        return ParameterStatus.NORMAL
    if value > ranges["critical_above"]:
        return ParameterStatus.CRITICAL
    return ParameterStatus.ABNORMAL


def _cholesterol_status(value: float, ranges: Mapping[str, float]) -> ParameterStatus:
    if value < ranges["normal_below"]:
        return ParameterStatus.NORMAL
    if value >= ranges["critical_at"]:
        return ParameterStatus.CRITICAL
    return ParameterStatus.ABNORMAL


STATUS_RULES: Dict[str, StatusRule] = {
    "Hemoglobin": _hemoglobin_status,
    "Blood Pressure": _blood_pressure_status,
    "Glucose": _glucose_status,
    "Cholesterol": _cholesterol_status,
}


class StatusEvaluator:
    """
    Range checker keyed by parameter display name.

    Rules and ranges are injectable so the catalog can grow without touching
    the extractor.
    """

    def __init__(
        self,
        rules: Optional[Mapping[str, StatusRule]] = None,
        reference_ranges: Optional[Mapping[str, Mapping[str, float]]] = None,
    ):
        self.rules = dict(rules if rules is not None else STATUS_RULES)
        self.reference_ranges = dict(
            reference_ranges if reference_ranges is not None else REFERENCE_RANGES
        )

    def has_rule(self, parameter_name: str) -> bool:
        return parameter_name in self.rules

    def evaluate(self, parameter_name: str, numeric_value: NumericValue) -> ParameterStatus:
        """
        Args:
            parameter_name: Catalog display name (e.g. "Glucose")
            numeric_value: Parsed value, or (systolic, diastolic) for blood pressure

        Returns:
            ParameterStatus; NORMAL for parameters without a rule
        """
        rule = self.rules.get(parameter_name)
        if rule is None:
            return ParameterStatus.NORMAL

        status = rule(numeric_value, self.reference_ranges.get(parameter_name, {}))
        logger.debug(f"{parameter_name}={numeric_value} -> {status.value}")
        return status


def evaluate_status(parameter_name: str, numeric_value: NumericValue) -> ParameterStatus:
    """Evaluate with the default rules and ranges."""
    return _default_evaluator.evaluate(parameter_name, numeric_value)


_default_evaluator = StatusEvaluator()
