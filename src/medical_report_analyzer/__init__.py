# ============================================================================
# src/medical_report_analyzer/__init__.py
# ============================================================================
"""
Medical Report Analyzer

Turns OCR text from a scanned medical document into structured data:
medical/non-medical decision, report type, extracted clinical parameters
with normal/abnormal/critical status, and a plain-language summary.

Usage:
    from medical_report_analyzer import ReportPipeline

    result = ReportPipeline().run(ocr_text, source_confidence=92.0)
    payload = result.to_dict()
"""

from .constants import ReportType, AnalysisStatus, ParameterStatus
from .core.context import (
    RawDocument,
    MedicalClassification,
    Parameter,
    AnalysisResult,
)
from .classifiers import KeywordClassifier
from .validators import StatusEvaluator
from .extractors import ParameterExtractor
from .processors import SummaryGenerator
from .core.pipeline import ReportPipeline

__version__ = "0.1.0"

__all__ = [
    "ReportType",
    "AnalysisStatus",
    "ParameterStatus",
    "RawDocument",
    "MedicalClassification",
    "Parameter",
    "AnalysisResult",
    "KeywordClassifier",
    "StatusEvaluator",
    "ParameterExtractor",
    "SummaryGenerator",
    "ReportPipeline",
]
