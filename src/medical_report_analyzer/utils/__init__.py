# ============================================================================
# src/medical_report_analyzer/utils/__init__.py
# ============================================================================
"""
Utility modules for the report analyzer.
"""

from .exceptions import (
    MedicalReportError,
    ConfigurationError,
    AnalysisClientError,
    AnalysisTimeoutError,
    AnalysisConnectionError,
    AnalysisResponseError,
)

from .logging import (
    setup_logging,
    setup_logging_from_settings,
    log_performance,
    JsonFormatter,
)

from .file_utils import (
    is_pdf,
    is_image,
    is_supported_format,
    is_within_size_limit,
)

__all__ = [
    # Exceptions
    'MedicalReportError',
    'ConfigurationError',
    'AnalysisClientError',
    'AnalysisTimeoutError',
    'AnalysisConnectionError',
    'AnalysisResponseError',
    # Logging
    'setup_logging',
    'setup_logging_from_settings',
    'log_performance',
    'JsonFormatter',
    # File Utils
    'is_pdf',
    'is_image',
    'is_supported_format',
    'is_within_size_limit',
]
