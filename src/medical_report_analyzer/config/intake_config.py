# ============================================================================
# src/medical_report_analyzer/config/intake_config.py
# ============================================================================
"""
Upload Intake Settings
- Accepted mime types
- Upload size limit
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IntakeSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MAX_UPLOAD_SIZE_MB: float = Field(
        default=10,
        gt=0,
        description="Largest accepted upload in megabytes"
    )
    ALLOWED_MIME_TYPES: List[str] = Field(
        default_factory=lambda: ["image/jpeg", "image/jpg", "image/png", "application/pdf"],
        description="Upload content types the OCR layer can turn into text"
    )

intake_settings = IntakeSettings()
