# ============================================================================
# src/medical_report_analyzer/analysis/client.py
# ============================================================================
"""
Analysis Client Factory

Builds an LLM analysis client from a config dict. Each call returns a new
client; the caller owns its lifecycle (construct once, pass to
ReportAnalysisService, close on shutdown).

Usage:
    from medical_report_analyzer.analysis.client import create_client

    client = create_client({'backend': 'ollama'})
    result = await client.generate("Summarize this report ...")
    await client.close()
"""

from typing import Dict, Any, Optional
import logging

from .base import BaseAnalysisClient, BackendType
from .ollama_client import OllamaAnalysisClient, DEFAULT_OLLAMA_MODEL
from ..config import analysis_settings
from ..utils.exceptions import ConfigurationError

DEFAULT_BACKEND = "ollama"

logger = logging.getLogger(__name__)


def create_client(config: Optional[Dict[str, Any]] = None) -> BaseAnalysisClient:
    """
    Create an analysis client.

    Settings from the environment (AnalysisSettings) are the defaults;
    passed config values take precedence.

    Args:
        config: Configuration dict, at minimum:
            - backend: "ollama" (default)
            - ollama_host, ollama_model, max_tokens, temperature, request_timeout

    Raises:
        ConfigurationError: If backend type is not supported
    """
    config = {**analysis_settings.client_config(), **(config or {})}
    backend = str(config.get('backend', DEFAULT_BACKEND)).lower()

    if backend == BackendType.OLLAMA.value:
        client = OllamaAnalysisClient(config)
    else:
        raise ConfigurationError(
            f"Unknown analysis backend: {backend}. Supported backends: ollama"
        )

    logger.info(f"Created {backend} analysis client ({client.model_name})")
    return client


__all__ = [
    "create_client",
    "BaseAnalysisClient",
    "BackendType",
    "OllamaAnalysisClient",
    "DEFAULT_BACKEND",
    "DEFAULT_OLLAMA_MODEL",
]
