# ============================================================================
# src/medical_report_analyzer/core/context/analysis_result.py
# ============================================================================
"""
Terminal pipeline output
- One of three statuses: medical, not medical, unsupported format
- parameters and summary are only populated for medical documents
- to_dict() produces the payload shape the HTTP layer returns
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ...constants import AnalysisStatus
from .classification import MedicalClassification
from .parameter import Parameter


@dataclass(frozen=True)
class AnalysisResult:
    status: AnalysisStatus
    raw_text: str
    classification: MedicalClassification
    source_confidence: float = 0.0
    parameters: Tuple[Parameter, ...] = ()
    summary: Optional[str] = None

    @property
    def is_medical(self) -> bool:
        return self.status is AnalysisStatus.MEDICAL_DOCUMENT

    @property
    def abnormal_parameters(self) -> Tuple[Parameter, ...]:
        return tuple(p for p in self.parameters if p.is_abnormal)

    def to_dict(self) -> Dict[str, Any]:
        classification = self.classification.to_dict()

        if self.status is AnalysisStatus.UNSUPPORTED_FORMAT:
            return {
                "status": self.status.value,
                "rawText": self.raw_text,
                "ocrConfidence": 0,
                "medicalConfidence": 0,
                "foundKeywords": [],
                "keywordCount": 0,
                "parameters": [],
            }

        if self.status is AnalysisStatus.NOT_MEDICAL_DOCUMENT:
            return {
                "status": self.status.value,
                "rawText": self.raw_text,
                "ocrConfidence": self.source_confidence,
                "medicalConfidence": classification["medicalConfidence"],
                "isMedical": False,
                "foundKeywords": classification["foundKeywords"],
                "keywordCount": classification["keywordCount"],
            }

        return {
            "status": self.status.value,
            "text": self.raw_text,
            "ocrConfidence": self.source_confidence,
            "medicalConfidence": classification["medicalConfidence"],
            "isMedical": classification["isMedical"],
            "reportType": classification["reportType"],
            "parameters": [p.to_dict() for p in self.parameters],
            "foundKeywords": classification["foundKeywords"],
            "keywordCount": classification["keywordCount"],
            "summary": self.summary,
        }
