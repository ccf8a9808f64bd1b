# ============================================================================
# src/medical_report_analyzer/utils/file_utils.py
# ============================================================================
"""
Upload format helpers.

Decide whether an upload's mime type is one the OCR layer can turn into
text; the result is the format flag handed to ReportPipeline.run().
"""

from typing import Iterable, Optional

from ..config import intake_settings


def _normalize(mime_type: Optional[str]) -> str:
    return (mime_type or "").strip().lower()


def is_pdf(mime_type: Optional[str]) -> bool:
    """Check if mime type denotes a PDF."""
    return "pdf" in _normalize(mime_type)


def is_image(mime_type: Optional[str]) -> bool:
    """Check if mime type denotes a JPEG or PNG image."""
    mime = _normalize(mime_type)
    return mime.startswith("image/") and any(kind in mime for kind in ("jpeg", "jpg", "png"))


def is_supported_format(mime_type: Optional[str], allowed: Optional[Iterable[str]] = None) -> bool:
    """
    Check a mime type against the upload whitelist.

    Args:
        mime_type: Upload content type (e.g. "image/png")
        allowed: Whitelist override; defaults to ALLOWED_MIME_TYPES
    """
    allowed_types = allowed if allowed is not None else intake_settings.ALLOWED_MIME_TYPES
    mime = _normalize(mime_type)
    if mime not in {_normalize(t) for t in allowed_types}:
        return False
    return is_pdf(mime) or is_image(mime)


def is_within_size_limit(size_bytes: int, max_mb: Optional[float] = None) -> bool:
    """Check an upload size against MAX_UPLOAD_SIZE_MB."""
    limit_mb = max_mb if max_mb is not None else intake_settings.MAX_UPLOAD_SIZE_MB
    return 0 <= size_bytes <= limit_mb * 1024 * 1024
