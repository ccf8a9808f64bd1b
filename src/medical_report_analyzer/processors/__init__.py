# src/medical_report_analyzer/processors/__init__.py

from .summary_generator import SummaryGenerator

__all__ = ["SummaryGenerator"]
