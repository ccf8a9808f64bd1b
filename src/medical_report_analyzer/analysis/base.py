# ============================================================================
# src/medical_report_analyzer/analysis/base.py
# ============================================================================
"""
Base Analysis Client Interface

Abstract interface for the LLM backends that produce the optional
narrative analysis of a medical report. Clients are constructed
explicitly and passed to ReportAnalysisService, so tests can substitute
a fake.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
from enum import Enum
import logging
import json
import re

from json_repair import repair_json

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class BackendType(Enum):
    """Supported analysis backends."""
    OLLAMA = "ollama"


class BaseAnalysisClient(ABC):
    """
    Abstract base class for LLM analysis clients.

    All backends must implement:
    - generate(): Async text generation
    - health_check(): Verify backend is available
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.logger = logging.getLogger(self.__class__.__name__)

        self._inference_count = 0
        self._total_inference_time = 0.0

    @property
    @abstractmethod
    def backend_type(self) -> BackendType:
        """Return the backend type."""
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the model identifier."""
        pass

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False
    ) -> Dict[str, Any]:
        """
        Generate response from prompt.

        Returns:
            {
                "text": str,              # Generated text
                "model": str,             # Model identifier
                "backend": str,           # Backend type
                "inference_time": float,  # Seconds
            }
        """
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """
        Check if the backend is available and ready.

        Returns:
            {"healthy": bool, "backend": str, "model": str, "details": str}
        """
        pass

    async def close(self) -> None:
        """Release backend resources."""
        return None

    def extract_json(self, response_text: str) -> Optional[Dict]:
        """
        Extract a JSON object from generated text.

        Models often wrap JSON in Markdown fences or prose. Tries a direct
        parse, then json_repair, then the first balanced {...} block.
        """
        if not response_text or not response_text.strip():
            self.logger.warning("Empty response text, no JSON to extract")
            return None

        cleaned = _CODE_FENCE.sub("", response_text.strip())

        # Try 1: Direct parse
        try:
            parsed = json.loads(cleaned)
            if isinstance(parsed, dict):
                return parsed
        except json.JSONDecodeError:
            pass

        # Try 2: json_repair on the whole response
        repaired = repair_json(cleaned, return_objects=True)
        if isinstance(repaired, dict) and repaired:
            self.logger.debug("json_repair fixed entire response")
            return repaired

        # Try 3: First balanced brace block
        start_idx = cleaned.find('{')
        if start_idx == -1:
            self.logger.warning("No JSON found in response")
            return None

        depth = 0
        end_idx = len(cleaned) - 1
        for i, char in enumerate(cleaned[start_idx:], start=start_idx):
            if char == '{':
                depth += 1
            elif char == '}':
                depth -= 1
                if depth == 0:
                    end_idx = i
                    break

        block = cleaned[start_idx:end_idx + 1]
        try:
            return json.loads(block)
        except json.JSONDecodeError:
            pass

        repaired = repair_json(block, return_objects=True)
        if isinstance(repaired, dict) and repaired:
            self.logger.debug("json_repair fixed extracted JSON block")
            return repaired

        self.logger.warning(f"Could not parse JSON from response: {response_text[:200]}...")
        return None

    def get_statistics(self) -> Dict[str, Any]:
        """Get inference statistics."""
        avg_time = (
            self._total_inference_time / self._inference_count
            if self._inference_count > 0
            else 0.0
        )
        return {
            "backend": self.backend_type.value,
            "model": self.model_name,
            "inference_count": self._inference_count,
            "total_inference_time": self._total_inference_time,
            "average_inference_time": avg_time,
        }
