# ============================================================================
# src/medical_report_analyzer/classifiers/keyword_classifier.py
# ============================================================================
"""
Keyword Classifier

First stage of the pipeline. Decides whether OCR text is a medical
document and, if so, which report category it belongs to.

1. KEYWORD SCAN
   - Lower-case the text
   - Record every vocabulary term present as a substring (no word boundaries)

2. MEDICAL DECISION
   - Medical iff at least 2 distinct terms were found
   - Confidence = min(count / 5, 1.0), a heuristic signal, not a probability

3. REPORT TYPE (medical documents only)
   - Walk the report type rules in priority order, first match wins
   - Fall back to General Medical Report

Pure function of the input text, no side effects.
"""

from typing import Iterable, Optional, Sequence, Tuple
import logging

from ..constants import (
    MEDICAL_KEYWORDS,
    MIN_MEDICAL_KEYWORDS,
    CONFIDENCE_SATURATION_COUNT,
    REPORT_TYPE_RULES,
    DEFAULT_REPORT_TYPE,
    ReportType,
)
from ..core.context import MedicalClassification

logger = logging.getLogger(__name__)


class KeywordClassifier:
    """
    Scores text against a fixed medical vocabulary.

    The vocabulary and report type rules can be swapped for tests or for a
    different deployment; the thresholds stay fixed.
    """

    def __init__(
        self,
        keywords: Optional[Sequence[str]] = None,
        report_type_rules: Optional[Sequence[Tuple[ReportType, Iterable[str]]]] = None,
    ):
        vocabulary = keywords if keywords is not None else MEDICAL_KEYWORDS
        # Distinct terms only, first occurrence keeps its position
        self.keywords = tuple(dict.fromkeys(k.lower() for k in vocabulary))
        rules = report_type_rules if report_type_rules is not None else REPORT_TYPE_RULES
        self.report_type_rules = tuple(
            (report_type, tuple(term.lower() for term in terms))
            for report_type, terms in rules
        )

    def classify(self, text: Optional[str]) -> MedicalClassification:
        """
        Classify raw OCR text.

        Args:
            text: Extracted text; None and empty strings classify as non-medical

        Returns:
            MedicalClassification with found keywords in vocabulary order
        """
        text_lower = (text or "").lower()

        found_keywords = tuple(k for k in self.keywords if k in text_lower)
        keyword_count = len(found_keywords)
        is_medical = keyword_count >= MIN_MEDICAL_KEYWORDS
        medical_confidence = min(keyword_count / CONFIDENCE_SATURATION_COUNT, 1.0)

        report_type = self.detect_report_type(text_lower) if is_medical else None

        logger.debug(
            f"Keyword scan: {keyword_count} terms, medical={is_medical}, "
            f"type={report_type.value if report_type else None}"
        )

        return MedicalClassification(
            is_medical=is_medical,
            report_type=report_type,
            medical_confidence=medical_confidence,
            found_keywords=found_keywords,
        )

    def detect_report_type(self, text_lower: str) -> ReportType:
        """Return the first report type whose terms appear in the lower-cased text."""
        for report_type, terms in self.report_type_rules:
            if any(term in text_lower for term in terms):
                return report_type
        return DEFAULT_REPORT_TYPE
