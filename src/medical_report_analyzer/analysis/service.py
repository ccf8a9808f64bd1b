# ============================================================================
# src/medical_report_analyzer/analysis/service.py
# ============================================================================
"""
Report Analysis Service

Calling layer around the deterministic pipeline:

1. Derive the format flag from the upload mime type
2. Run ReportPipeline (synchronous, never raises)
3. For medical documents only, optionally ask the LLM client for a
   narrative analysis, with timeout and retry

Every LLM failure (timeout, connection, bad JSON) is converted into the
fallback analysis here; nothing propagates to the HTTP layer.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import asyncio
import logging

from ..config import analysis_settings
from ..core.context import AnalysisResult, RawDocument
from ..core.pipeline import ReportPipeline
from ..utils.exceptions import (
    AnalysisClientError,
    AnalysisResponseError,
    AnalysisTimeoutError,
)
from ..utils.file_utils import is_supported_format
from .base import BaseAnalysisClient
from .prompts import (
    HEALTH_SUMMARY_FALLBACK,
    build_health_summary_prompt,
    build_report_analysis_prompt,
    fallback_analysis,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportAnalysis:
    """Pipeline result plus the optional LLM analysis."""
    result: AnalysisResult
    ai_analysis: Optional[Dict[str, Any]] = None
    ai_success: bool = False
    ai_error: Optional[str] = None
    ai_model: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = self.result.to_dict()
        payload["aiAnalysis"] = self.ai_analysis
        return payload


class ReportAnalysisService:
    """
    Owns the LLM collaborator and the timeout/retry policy around it.

    Args:
        pipeline: Pipeline to run; a default ReportPipeline if omitted
        client: LLM client; enrichment is skipped without one
        timeout: Seconds per LLM attempt (ANALYSIS_TIMEOUT)
        max_retries: Extra attempts after a failure (ANALYSIS_MAX_RETRIES)
        enable_ai_analysis: Default for analyze(enrich=None) (ENABLE_AI_ANALYSIS)
    """

    def __init__(
        self,
        pipeline: Optional[ReportPipeline] = None,
        client: Optional[BaseAnalysisClient] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        enable_ai_analysis: Optional[bool] = None,
    ):
        self.pipeline = pipeline or ReportPipeline()
        self.client = client
        self.timeout = timeout if timeout is not None else analysis_settings.ANALYSIS_TIMEOUT
        self.max_retries = max_retries if max_retries is not None else analysis_settings.ANALYSIS_MAX_RETRIES
        self.enable_ai_analysis = (
            enable_ai_analysis if enable_ai_analysis is not None
            else analysis_settings.ENABLE_AI_ANALYSIS
        )

    async def analyze(
        self,
        document: RawDocument,
        mime_type: Optional[str] = None,
        format_supported: Optional[bool] = None,
        enrich: Optional[bool] = None,
    ) -> ReportAnalysis:
        """
        Analyze OCR output and optionally enrich it.

        Args:
            document: Text and OCR confidence from the OCR backend
            mime_type: Upload content type, used when format_supported is None
            format_supported: Explicit format flag; wins over mime_type
            enrich: Request LLM analysis; defaults to ENABLE_AI_ANALYSIS
        """
        if format_supported is None:
            format_supported = True if mime_type is None else is_supported_format(mime_type)

        result = self.pipeline.run_document(document, format_supported=format_supported)

        should_enrich = self.enable_ai_analysis if enrich is None else enrich
        if not result.is_medical or not should_enrich or self.client is None:
            return ReportAnalysis(result=result)

        prompt = build_report_analysis_prompt(result.raw_text, result.classification.report_type)
        try:
            response = await self._generate_with_retry(prompt, json_mode=True)
            analysis = self.client.extract_json(response["text"])
            if analysis is None:
                raise AnalysisResponseError("LLM returned no parseable JSON", response["text"])
        except AnalysisClientError as e:
            logger.error(f"AI analysis failed, using fallback: {e}")
            return self._fallback(result, e)
        except Exception as e:
            logger.error(f"Unexpected AI analysis failure, using fallback: {e!r}", exc_info=True)
            return self._fallback(result, e)

        logger.info("AI analysis completed")
        return ReportAnalysis(
            result=result,
            ai_analysis=analysis,
            ai_success=True,
            ai_model=response.get("model", self.client.model_name),
        )

    async def generate_health_summary(self, text: str) -> str:
        """Short LLM narrative of arbitrary medical text, or a fixed fallback."""
        if self.client is None:
            return HEALTH_SUMMARY_FALLBACK

        try:
            response = await self._generate_with_retry(build_health_summary_prompt(text))
        except AnalysisClientError as e:
            logger.error(f"Health summary failed: {e}")
            return HEALTH_SUMMARY_FALLBACK
        except Exception as e:
            logger.error(f"Unexpected health summary failure: {e!r}", exc_info=True)
            return HEALTH_SUMMARY_FALLBACK

        return response.get("text") or HEALTH_SUMMARY_FALLBACK

    def _fallback(self, result: AnalysisResult, error: Exception) -> ReportAnalysis:
        return ReportAnalysis(
            result=result,
            ai_analysis=fallback_analysis(),
            ai_success=False,
            ai_error=str(error) or type(error).__name__,
            ai_model=self.client.model_name,
        )

    async def _generate_with_retry(self, prompt: str, json_mode: bool = False) -> Dict[str, Any]:
        """
        Call the client up to max_retries + 1 times.

        Raises:
            AnalysisClientError: the last failure once attempts are exhausted
        """
        attempts = self.max_retries + 1
        last_error: Optional[AnalysisClientError] = None

        for attempt in range(1, attempts + 1):
            try:
                return await asyncio.wait_for(
                    self.client.generate(prompt, json_mode=json_mode),
                    timeout=self.timeout,
                )
            except asyncio.TimeoutError:
                last_error = AnalysisTimeoutError(
                    f"LLM call timed out after {self.timeout}s", timeout=self.timeout
                )
            except AnalysisClientError as e:
                last_error = e
            except (ConnectionError, OSError) as e:
                last_error = AnalysisClientError(f"LLM call failed: {e}")

            logger.warning(f"LLM attempt {attempt}/{attempts} failed: {last_error}")

        raise last_error
