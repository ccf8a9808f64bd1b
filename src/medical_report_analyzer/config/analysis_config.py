# ============================================================================
# src/medical_report_analyzer/config/analysis_config.py
# ============================================================================
"""
AI Analysis Settings
- Optional LLM enrichment of medical documents
- Backend connection
- Timeout and retry policy (owned by the calling layer, not the pipeline)
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalysisSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENABLE_AI_ANALYSIS: bool = Field(
        default=False,
        description="Request an LLM narrative analysis for medical documents"
    )
    ANALYSIS_BACKEND: str = Field(
        default="ollama",
        description="LLM backend used for narrative analysis"
    )
    OLLAMA_HOST: str = Field(
        default="http://localhost:11434",
        description="Ollama server URL"
    )
    OLLAMA_MODEL: str = Field(
        default="MedAIBase/MedGemma1.5:4b-it-q8_0",
        description="Model name served by Ollama"
    )
    ANALYSIS_MAX_TOKENS: int = Field(
        default=1000,
        gt=0,
        description="Maximum tokens to generate per analysis"
    )
    ANALYSIS_TEMPERATURE: float = Field(
        default=0.1,
        ge=0.0, le=2.0,
        description="Sampling temperature"
    )
    ANALYSIS_TIMEOUT: float = Field(
        default=60.0,
        gt=0,
        description="Seconds to wait for one LLM call before giving up"
    )
    ANALYSIS_MAX_RETRIES: int = Field(
        default=2,
        ge=0,
        description="Extra attempts after a failed LLM call"
    )

    def client_config(self) -> dict:
        """Config dict understood by analysis.client.create_client()."""
        return {
            "backend": self.ANALYSIS_BACKEND,
            "ollama_host": self.OLLAMA_HOST,
            "ollama_model": self.OLLAMA_MODEL,
            "max_tokens": self.ANALYSIS_MAX_TOKENS,
            "temperature": self.ANALYSIS_TEMPERATURE,
            "request_timeout": self.ANALYSIS_TIMEOUT,
        }

analysis_settings = AnalysisSettings()
