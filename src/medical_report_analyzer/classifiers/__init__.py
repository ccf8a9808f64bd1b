# src/medical_report_analyzer/classifiers/__init__.py

from .keyword_classifier import KeywordClassifier

__all__ = ["KeywordClassifier"]
