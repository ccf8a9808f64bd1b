# ============================================================================
# src/medical_report_analyzer/extractors/parameter_extractor.py
# ============================================================================
"""
Parameter Extractor

Runs every catalog entry independently against the full text and keeps the
first match per entry. A missing field is normal; a match whose number does
not parse (e.g. "1.2.3") is skipped and extraction continues.
"""

from typing import List, Optional, Sequence
import logging

from ..core.context import Parameter
from ..validators.status_evaluator import StatusEvaluator
from .parameter_catalog import PARAMETER_CATALOG, CatalogEntry

logger = logging.getLogger(__name__)


class ParameterExtractor:
    """
    Pulls (name, value, unit) triples for known clinical measurements and
    attaches a status from the StatusEvaluator.
    """

    def __init__(
        self,
        catalog: Optional[Sequence[CatalogEntry]] = None,
        evaluator: Optional[StatusEvaluator] = None,
    ):
        self.catalog = tuple(catalog if catalog is not None else PARAMETER_CATALOG)
        self.evaluator = evaluator or StatusEvaluator()

    def extract(self, text: Optional[str]) -> List[Parameter]:
        """
        Extract parameters in catalog order.

        Args:
            text: Full OCR text of a medical document

        Returns:
            At most one Parameter per catalog entry
        """
        text = text or ""
        parameters = []

        for entry in self.catalog:
            parameter = self._extract_entry(entry, text)
            if parameter is not None:
                parameters.append(parameter)

        logger.info(f"Extracted {len(parameters)} of {len(self.catalog)} catalog parameters")
        return parameters

    def _extract_entry(self, entry: CatalogEntry, text: str) -> Optional[Parameter]:
        match = entry.search(text)
        if not match:
            return None

        raw_value = match.group(1)
        unit = match.group(2) if match.re.groups >= 2 and match.group(2) else ""

        try:
            numeric_value = entry.parser(raw_value)
        except ValueError:
            logger.warning(f"Could not parse {entry.name} value '{raw_value}', skipping")
            return None

        return Parameter(
            name=entry.name,
            value=f"{raw_value} {unit}" if unit else raw_value,
            numeric_value=numeric_value,
            unit=unit,
            status=self.evaluator.evaluate(entry.name, numeric_value),
        )
