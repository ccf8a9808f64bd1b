# ============================================================================
# src/medical_report_analyzer/core/__init__.py
# ============================================================================
"""
Core result types. The pipeline lives in core.pipeline and is imported
from there directly, since the stage modules depend on core.context.
"""

from .context import (
    RawDocument,
    MedicalClassification,
    Parameter,
    AnalysisResult,
)

__all__ = [
    "RawDocument",
    "MedicalClassification",
    "Parameter",
    "AnalysisResult",
]
