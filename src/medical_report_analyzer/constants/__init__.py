# ============================================================================
# src/medical_report_analyzer/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .report_types import ReportType, AnalysisStatus, ParameterStatus
from .medical_vocabulary import (
    MEDICAL_KEYWORDS,
    MIN_MEDICAL_KEYWORDS,
    CONFIDENCE_SATURATION_COUNT,
    REPORT_TYPE_RULES,
    DEFAULT_REPORT_TYPE,
)
from .reference_ranges import REFERENCE_RANGES
from .messages import UNSUPPORTED_FORMAT_MESSAGE
