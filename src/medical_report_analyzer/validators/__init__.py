# src/medical_report_analyzer/validators/__init__.py

from .status_evaluator import StatusEvaluator, STATUS_RULES, evaluate_status

__all__ = ["StatusEvaluator", "STATUS_RULES", "evaluate_status"]
