# ============================================================================
# src/medical_report_analyzer/core/context/raw_document.py
# ============================================================================
"""
Pipeline input unit
- Text produced by whichever OCR backend handled the upload
- OCR confidence on a 0-100 scale
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawDocument:
    text: str = ""
    source_confidence: float = 0.0
