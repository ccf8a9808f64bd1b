# src/medical_report_analyzer/extractors/__init__.py

from .parameter_catalog import (
    PARAMETER_CATALOG,
    CatalogEntry,
    parse_number,
    parse_pressure,
)
from .parameter_extractor import ParameterExtractor

__all__ = [
    "PARAMETER_CATALOG",
    "CatalogEntry",
    "parse_number",
    "parse_pressure",
    "ParameterExtractor",
]
