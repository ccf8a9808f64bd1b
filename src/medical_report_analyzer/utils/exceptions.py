# ============================================================================
# src/medical_report_analyzer/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the report analyzer.

The analysis pipeline itself raises none of these; they come from the LLM
collaborator and configuration layer, and the analysis service turns them
into fallback results.
"""


class MedicalReportError(Exception):
    """Base exception for all report analyzer errors."""
    pass


class ConfigurationError(MedicalReportError):
    """Invalid configuration."""
    pass


class AnalysisClientError(MedicalReportError):
    """Error from the LLM analysis backend."""
    pass


class AnalysisTimeoutError(AnalysisClientError):
    """LLM request exceeded its timeout."""
    def __init__(self, message: str, timeout: float):
        super().__init__(message)
        self.timeout = timeout


class AnalysisConnectionError(AnalysisClientError):
    """LLM backend unreachable."""
    pass


class AnalysisResponseError(AnalysisClientError):
    """LLM response could not be parsed into an analysis."""
    def __init__(self, message: str, response_text: str = ""):
        super().__init__(message)
        self.response_text = response_text
