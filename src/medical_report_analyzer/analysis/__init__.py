# ============================================================================
# src/medical_report_analyzer/analysis/__init__.py
# ============================================================================
"""
Optional LLM analysis around the deterministic pipeline
"""

from .base import BaseAnalysisClient, BackendType
from .client import create_client
from .ollama_client import OllamaAnalysisClient
from .service import ReportAnalysisService, ReportAnalysis
from .prompts import (
    DISCLAIMER,
    HEALTH_SUMMARY_FALLBACK,
    build_report_analysis_prompt,
    build_health_summary_prompt,
    fallback_analysis,
)

__all__ = [
    "BaseAnalysisClient",
    "BackendType",
    "create_client",
    "OllamaAnalysisClient",
    "ReportAnalysisService",
    "ReportAnalysis",
    "DISCLAIMER",
    "HEALTH_SUMMARY_FALLBACK",
    "build_report_analysis_prompt",
    "build_health_summary_prompt",
    "fallback_analysis",
]
