# ============================================================================
# src/medical_report_analyzer/processors/summary_generator.py
# ============================================================================
"""
Summary Generator

Builds a plain-language narrative for a medical document from its report
type and extracted parameters.

Templates:
- Blood Test / Urine Analysis / Lipid Profile: name or flag out-of-range
  values and recommend follow-up, otherwise reassure
- X-Ray: no structured parameters, so scan the text for reassuring
  ("normal", "clear", "no acute") or concerning ("abnormal", "findings",
  "opacity") wording
- Everything else (ECG, Prescription, General, missing type): count of
  parameters found and how many are out of range

Lab-style templates that found no parameters at all say so explicitly
instead of claiming normal results. Always returns a non-empty string.
"""

from typing import Callable, Dict, Optional, Sequence
import logging

from ..constants import ReportType
from ..core.context import Parameter

logger = logging.getLogger(__name__)

REASSURING_XRAY_TERMS = ("normal", "clear", "no acute")
CONCERNING_XRAY_TERMS = ("abnormal", "findings", "opacity")


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def _no_parameters_found(label: str) -> str:
    return (
        f"Your {label} has been processed, but 0 parameters were found in the extracted text. "
        "Please review the report details with your healthcare provider for proper medical interpretation."
    )


class SummaryGenerator:
    """
    Report-type-aware templated summaries.
    """

    def __init__(self):
        self._templates: Dict[ReportType, Callable[[str, Sequence[Parameter]], str]] = {
            ReportType.BLOOD_TEST: self._blood_test_summary,
            ReportType.URINE_ANALYSIS: self._urine_analysis_summary,
            ReportType.LIPID_PROFILE: self._lipid_profile_summary,
            ReportType.XRAY: self._xray_summary,
        }

    def generate(
        self,
        raw_text: Optional[str],
        report_type: Optional[ReportType],
        parameters: Sequence[Parameter],
    ) -> str:
        """
        Args:
            raw_text: OCR text, only consulted by the X-Ray template
            report_type: Classified type; None uses the generic template
            parameters: Extracted parameters in catalog order

        Returns:
            Summary text
        """
        text_lower = (raw_text or "").lower()
        template = self._templates.get(report_type)

        if template is None:
            summary = self._generic_summary(report_type, parameters)
        else:
            summary = template(text_lower, parameters)

        logger.debug(f"Generated summary for {report_type.value if report_type else 'unknown type'}")
        return summary

    def _blood_test_summary(self, text_lower: str, parameters: Sequence[Parameter]) -> str:
        if not parameters:
            return _no_parameters_found("blood test report")

        abnormal = [p for p in parameters if p.is_abnormal]
        if abnormal:
            names = ", ".join(p.name for p in abnormal)
            verb = _plural(len(abnormal), "is", "are")
            return (
                "Your blood test shows some values that may need attention. "
                f"Specifically, {names} {verb} outside the normal range. "
                "Please consult with your healthcare provider to discuss these results "
                "and any necessary follow-up actions."
            )
        return (
            "Your blood test results appear to be within normal ranges. "
            "All measured parameters are in the expected values. "
            "Continue with your regular health monitoring and maintain a healthy lifestyle."
        )

    def _urine_analysis_summary(self, text_lower: str, parameters: Sequence[Parameter]) -> str:
        if not parameters:
            return _no_parameters_found("urine analysis report")

        summary = "Your urine analysis report has been processed. "
        if any(p.is_abnormal for p in parameters):
            names = ", ".join(p.name for p in parameters if p.is_abnormal)
            return summary + (
                f"Some values may require attention ({names}). "
                "Please discuss the results with your healthcare provider."
            )
        return summary + "The results appear to be within normal limits. No immediate concerns detected."

    def _lipid_profile_summary(self, text_lower: str, parameters: Sequence[Parameter]) -> str:
        if not parameters:
            return _no_parameters_found("lipid profile")

        summary = "Your lipid profile has been analyzed. "
        if any(p.is_abnormal for p in parameters):
            names = ", ".join(p.name for p in parameters if p.is_abnormal)
            return summary + (
                f"Some cholesterol levels may be outside the optimal range ({names}). "
                "Your healthcare provider can help you understand these results and "
                "recommend lifestyle changes or treatments if needed."
            )
        return summary + (
            "Your cholesterol levels are within healthy ranges. "
            "Continue maintaining a balanced diet and regular exercise."
        )

    def _xray_summary(self, text_lower: str, parameters: Sequence[Parameter]) -> str:
        summary = "Your X-ray report has been reviewed. "
        if any(term in text_lower for term in REASSURING_XRAY_TERMS):
            return summary + "The X-ray appears to show normal findings with no acute abnormalities detected."
        if any(term in text_lower for term in CONCERNING_XRAY_TERMS):
            return summary + (
                "The report indicates some findings that should be discussed with your "
                "healthcare provider or radiologist for detailed interpretation."
            )
        return summary + "Please review the detailed findings with your healthcare provider for proper interpretation."

    def _generic_summary(self, report_type: Optional[ReportType], parameters: Sequence[Parameter]) -> str:
        label = report_type.value if report_type else "medical report"
        if not parameters:
            return _no_parameters_found(label)

        count = len(parameters)
        summary = (
            f"Your {label} has been processed. "
            f"The report contains {count} measured {_plural(count, 'parameter', 'parameters')}. "
        )
        abnormal_count = sum(1 for p in parameters if p.is_abnormal)
        if abnormal_count > 0:
            summary += (
                f"{abnormal_count} {_plural(abnormal_count, 'parameter is', 'parameters are')} "
                "outside the normal range. "
            )
        return summary + (
            "Please consult with your healthcare provider for detailed interpretation "
            "and any necessary follow-up."
        )
