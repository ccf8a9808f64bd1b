# ============================================================================
# src/medical_report_analyzer/constants/report_types.py
# ============================================================================
"""
Report Types and Result Statuses
- Closed set of report categories assigned by the keyword classifier
- Terminal pipeline statuses
- Per-parameter clinical status
"""

from enum import Enum


class ReportType(str, Enum):
    """
    Report category for a medical document.
    Values are the display labels sent to clients.
    """
    BLOOD_TEST = "Blood Test Report"
    URINE_ANALYSIS = "Urine Analysis Report"
    LIPID_PROFILE = "Lipid Profile Report"
    XRAY = "X-Ray Report"
    ECG = "ECG Report"
    PRESCRIPTION = "Prescription"
    GENERAL_MEDICAL = "General Medical Report"


class AnalysisStatus(str, Enum):
    MEDICAL_DOCUMENT = "medical_document"
    NOT_MEDICAL_DOCUMENT = "not_medical_document"
    UNSUPPORTED_FORMAT = "unsupported_format"


class ParameterStatus(str, Enum):
    NORMAL = "normal"
    ABNORMAL = "abnormal"
    CRITICAL = "critical"

    @property
    def is_out_of_range(self) -> bool:
        return self is not ParameterStatus.NORMAL
