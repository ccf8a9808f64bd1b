# ============================================================================
# src/medical_report_analyzer/core/context/parameter.py
# ============================================================================
"""
Single extracted clinical measurement
- value keeps the matched text plus unit, e.g. "13.5 g/dl"
- numeric_value is a float, or a (systolic, diastolic) pair for blood pressure
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from ...constants import ParameterStatus

NumericValue = Union[float, Tuple[float, float]]


@dataclass(frozen=True)
class Parameter:
    name: str
    value: str
    numeric_value: NumericValue
    unit: str = ""
    status: ParameterStatus = ParameterStatus.NORMAL

    @property
    def is_abnormal(self) -> bool:
        """True for both abnormal and critical values."""
        return self.status.is_out_of_range

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "unit": self.unit,
            "status": self.status.value,
        }
