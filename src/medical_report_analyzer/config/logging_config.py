# ============================================================================
# src/medical_report_analyzer/config/logging_config.py
# ============================================================================
"""
Logging Settings
- Log level
- Optional log file
- JSON output
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_FILE: Optional[Path] = Field(
        default=None,
        description="Also write logs to this file when set"
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Emit JSON log lines instead of plain text"
    )

logging_settings = LoggingSettings()
