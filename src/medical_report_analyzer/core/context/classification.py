# ============================================================================
# src/medical_report_analyzer/core/context/classification.py
# ============================================================================
"""
Keyword classification outcome
- is_medical is true exactly when keyword_count >= 2
- report_type is only set for medical documents
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ...constants import ReportType


@dataclass(frozen=True)
class MedicalClassification:
    is_medical: bool
    report_type: Optional[ReportType]
    medical_confidence: float
    found_keywords: Tuple[str, ...] = ()

    @property
    def keyword_count(self) -> int:
        return len(self.found_keywords)

    @classmethod
    def empty(cls) -> "MedicalClassification":
        """Classification used when no text was analyzed at all."""
        return cls(
            is_medical=False,
            report_type=None,
            medical_confidence=0.0,
            found_keywords=(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isMedical": self.is_medical,
            "reportType": self.report_type.value if self.report_type else None,
            "medicalConfidence": self.medical_confidence,
            "foundKeywords": list(self.found_keywords),
            "keywordCount": self.keyword_count,
        }
