# ============================================================================
# src/medical_report_analyzer/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .logging_config import LoggingSettings, logging_settings
from .intake_config import IntakeSettings, intake_settings
from .analysis_config import AnalysisSettings, analysis_settings
