# src/medical_report_analyzer/core/context/__init__.py

from .raw_document import RawDocument
from .classification import MedicalClassification
from .parameter import Parameter, NumericValue
from .analysis_result import AnalysisResult

__all__ = [
    "RawDocument",
    "MedicalClassification",
    "Parameter",
    "NumericValue",
    "AnalysisResult",
]
