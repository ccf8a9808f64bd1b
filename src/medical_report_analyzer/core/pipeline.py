# ============================================================================
# src/medical_report_analyzer/core/pipeline.py
# ============================================================================
"""
Report Pipeline

Single entry point called by the OCR/HTTP layer once text has been
extracted. Stateless; every run builds fresh, immutable results.

Pipeline Flow:
    format check → Keyword Classifier → Parameter Extractor
                 → Summary Generator → AnalysisResult

Early exits:
1. Unsupported file format → UNSUPPORTED_FORMAT, nothing else runs
2. Fewer than 2 medical keywords → NOT_MEDICAL_DOCUMENT, no extraction
   or summary

The pipeline never raises for any text input; empty or missing text takes
the non-medical path.
"""

from typing import Optional
import logging

from ..classifiers.keyword_classifier import KeywordClassifier
from ..constants import AnalysisStatus, UNSUPPORTED_FORMAT_MESSAGE
from ..extractors.parameter_extractor import ParameterExtractor
from ..processors.summary_generator import SummaryGenerator
from ..utils.logging import log_performance
from .context import AnalysisResult, MedicalClassification, RawDocument

logger = logging.getLogger(__name__)


class ReportPipeline:
    """
    Sequences classification, extraction and summary generation.

    Stages are injected so callers (and tests) can substitute them; the
    defaults are the deterministic keyword/pattern implementations.
    """

    def __init__(
        self,
        classifier: Optional[KeywordClassifier] = None,
        extractor: Optional[ParameterExtractor] = None,
        summary_generator: Optional[SummaryGenerator] = None,
    ):
        self.classifier = classifier or KeywordClassifier()
        self.extractor = extractor or ParameterExtractor()
        self.summary_generator = summary_generator or SummaryGenerator()

    @log_performance(logger, "Report pipeline")
    def run(
        self,
        raw_text: Optional[str],
        source_confidence: Optional[float] = 0.0,
        format_supported: bool = True,
    ) -> AnalysisResult:
        """
        Analyze OCR output.

        Args:
            raw_text: Extracted document text
            source_confidence: OCR confidence, 0-100
            format_supported: False when the upload was neither an image nor a PDF

        Returns:
            AnalysisResult in one of the three terminal statuses
        """
        if not format_supported:
            logger.info("Unsupported file format, skipping analysis")
            return AnalysisResult(
                status=AnalysisStatus.UNSUPPORTED_FORMAT,
                raw_text=UNSUPPORTED_FORMAT_MESSAGE,
                classification=MedicalClassification.empty(),
                source_confidence=0.0,
            )

        text = raw_text or ""
        confidence = float(source_confidence or 0.0)

        classification = self.classifier.classify(text)
        if not classification.is_medical:
            logger.info(
                f"Not a medical document ({classification.keyword_count} keywords found)"
            )
            return AnalysisResult(
                status=AnalysisStatus.NOT_MEDICAL_DOCUMENT,
                raw_text=text,
                classification=classification,
                source_confidence=confidence,
            )

        parameters = tuple(self.extractor.extract(text))
        summary = self.summary_generator.generate(text, classification.report_type, parameters)

        abnormal_count = sum(1 for p in parameters if p.is_abnormal)
        logger.info(
            f"Medical document: {classification.report_type.value}, "
            f"{len(parameters)} parameters, {abnormal_count} out of range",
            extra={
                "status": AnalysisStatus.MEDICAL_DOCUMENT.value,
                "report_type": classification.report_type.value,
                "parameter_count": len(parameters),
                "abnormal_count": abnormal_count,
            },
        )

        return AnalysisResult(
            status=AnalysisStatus.MEDICAL_DOCUMENT,
            raw_text=text,
            classification=classification,
            source_confidence=confidence,
            parameters=parameters,
            summary=summary,
        )

    def run_document(self, document: RawDocument, format_supported: bool = True) -> AnalysisResult:
        """Analyze a RawDocument produced by an OCR backend."""
        return self.run(document.text, document.source_confidence, format_supported)
