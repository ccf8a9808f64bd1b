# ============================================================================
# src/medical_report_analyzer/analysis/prompts.py
# ============================================================================
"""
Prompts for the optional LLM analysis, and the fallback used whenever the
LLM cannot produce one.
"""

import copy
from typing import Any, Dict, Optional

from ..constants import ReportType

DISCLAIMER = (
    "This is an AI-generated analysis for informational purposes only. "
    "Always consult with a qualified healthcare professional for medical advice."
)

HEALTH_SUMMARY_FALLBACK = "Unable to generate summary. Please review the full text."

_FALLBACK_ANALYSIS: Dict[str, Any] = {
    "summary": "AI analysis unavailable. Please review the extracted text manually.",
    "keyFindings": ["Unable to generate AI analysis"],
    "parameters": [],
    "concerns": ["AI analysis failed - manual review recommended"],
    "recommendations": ["Consult with a healthcare professional for proper interpretation"],
    "disclaimer": DISCLAIMER,
}

REPORT_ANALYSIS_PROMPT = """You are a medical AI assistant analyzing a medical report.

EXTRACTED TEXT FROM MEDICAL REPORT:
{text}

REPORT TYPE: {report_type}

Please provide a comprehensive analysis in the following JSON format:
{{
  "summary": "A brief 2-3 sentence summary of the report",
  "keyFindings": ["List of 3-5 key findings from the report"],
  "parameters": [
    {{
      "name": "Parameter name",
      "value": "Value with unit",
      "normalRange": "Normal range",
      "status": "normal/high/low",
      "interpretation": "Brief explanation"
    }}
  ],
  "concerns": ["List any abnormal findings or health concerns"],
  "recommendations": ["List 2-4 general health recommendations based on the report"],
  "disclaimer": "{disclaimer}"
}}

IMPORTANT:
- Extract actual values from the report text
- Provide accurate normal ranges for each parameter
- Mark status as "normal", "high", or "low" based on the values
- Be specific and factual
- If information is unclear or missing, indicate that
- Focus only on medical information present in the text

Return ONLY the JSON object, no additional text."""

HEALTH_SUMMARY_PROMPT = """Provide a brief, clear summary of this medical information in 2-3 sentences:

{text}

Focus on the most important health information and findings."""


def build_report_analysis_prompt(text: str, report_type: Optional[ReportType] = None) -> str:
    label = report_type.value if report_type else ReportType.GENERAL_MEDICAL.value
    return REPORT_ANALYSIS_PROMPT.format(text=text, report_type=label, disclaimer=DISCLAIMER)


def build_health_summary_prompt(text: str) -> str:
    return HEALTH_SUMMARY_PROMPT.format(text=text)


def fallback_analysis() -> Dict[str, Any]:
    """Fresh copy of the analysis returned when the LLM call fails."""
    return copy.deepcopy(_FALLBACK_ANALYSIS)
