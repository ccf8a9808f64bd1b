# ============================================================================
# src/medical_report_analyzer/constants/messages.py
# ============================================================================
"""
User-facing messages for terminal pipeline statuses
"""

UNSUPPORTED_FORMAT_MESSAGE = (
    "Unsupported file format. Please upload a PDF or image file."
)
