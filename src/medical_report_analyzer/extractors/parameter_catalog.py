# ============================================================================
# src/medical_report_analyzer/extractors/parameter_catalog.py
# ============================================================================
"""
Parameter Catalog

Ordered table of named extraction rules. Each entry pairs a display name
with a case-insensitive pattern and a parser:

- group 1 captures the numeric text (or "120/80" for blood pressure)
- group 2, when the pattern has one, captures the unit token

Catalog order is output order. Adding a measurement means adding a row.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple
import re

from ..core.context import NumericValue


def parse_number(raw: str) -> float:
    """Parse a numeric capture, ignoring thousands separators."""
    return float(raw.replace(",", ""))


def parse_pressure(raw: str) -> Tuple[float, float]:
    """Parse "systolic/diastolic" into a pair."""
    systolic, diastolic = raw.split("/")
    return parse_number(systolic), parse_number(diastolic)


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    pattern: re.Pattern
    parser: Callable[[str], NumericValue] = parse_number

    def search(self, text: str) -> Optional[re.Match]:
        return self.pattern.search(text)


def _entry(name: str, pattern: str, parser=parse_number) -> CatalogEntry:
    return CatalogEntry(name=name, pattern=re.compile(pattern, re.IGNORECASE), parser=parser)


PARAMETER_CATALOG: Tuple[CatalogEntry, ...] = (
    _entry("Hemoglobin", r"hemoglobin[:\s]*([0-9.]+)\s*(g/dl|mg/dl)"),
    _entry("Blood Pressure", r"blood\s*pressure[:\s]*([0-9]+/[0-9]+)\s*mmhg", parse_pressure),
    _entry("Heart Rate", r"heart\s*rate[:\s]*([0-9]+)\s*(bpm|beats)"),
    _entry("Temperature", r"temperature[:\s]*([0-9.]+)\s*°?[fc]"),
    _entry("Glucose", r"glucose[:\s]*([0-9.]+)\s*(mg/dl)"),
    _entry("Cholesterol", r"cholesterol[:\s]*([0-9.]+)\s*(mg/dl)"),
    _entry("WBC Count", r"wbc(?:\s*count)?[:\s]*([0-9,]+)\s*(/[μµ]l|per|ul)"),
    _entry("RBC Count", r"rbc(?:\s*count)?[:\s]*([0-9.]+)\s*(million|mil)"),
    _entry("Platelet Count", r"platelets?(?:\s*count)?[:\s]*([0-9,]+)\s*(/[μµ]l|per|ul)"),
    _entry("Hematocrit", r"hematocrit[:\s]*([0-9.]+)\s*%"),
    _entry("HDL", r"hdl(?:\s*cholesterol)?[:\s]*([0-9.]+)\s*(mg/dl)"),
    _entry("LDL", r"ldl(?:\s*cholesterol)?[:\s]*([0-9.]+)\s*(mg/dl)"),
    _entry("Triglycerides", r"triglycerides[:\s]*([0-9.]+)\s*(mg/dl)"),
)
