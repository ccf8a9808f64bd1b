# ============================================================================
# src/medical_report_analyzer/constants/medical_vocabulary.py
# ============================================================================
"""
Medical Vocabulary
- Keywords used to decide whether OCR text is a medical document
- Priority-ordered report type rules
- Classification thresholds

Matching is plain lower-case substring search. Short terms such as "bp"
also match inside longer words ("bpm"), and each hit counts separately.
"""

from .report_types import ReportType

# Order is preserved in foundKeywords
MEDICAL_KEYWORDS = (
    "blood", "hemoglobin", "cbc", "mmhg", "mg/dl", "pulse", "bp",
    "wbc", "rbc", "diagnosis", "glucose", "cholesterol", "urine",
    "urinalysis", "x-ray", "ecg", "ekg", "heart rate", "temperature",
    "bpm", "g/dl", "μl", "platelet", "hematocrit", "lipid",
    "triglycerides", "hdl", "ldl", "creatinine", "prescription",
    "medication", "dosage", "physician", "laboratory",
)

# A single incidental term is not enough evidence
MIN_MEDICAL_KEYWORDS = 2

# Confidence grows linearly and saturates at this many keywords
CONFIDENCE_SATURATION_COUNT = 5

# First matching rule wins
REPORT_TYPE_RULES = (
    (ReportType.BLOOD_TEST, ("blood", "hemoglobin", "cbc")),
    (ReportType.URINE_ANALYSIS, ("urine", "urinalysis")),
    (ReportType.LIPID_PROFILE, ("cholesterol", "lipid")),
    (ReportType.XRAY, ("x-ray", "chest", "radiolog")),
    (ReportType.ECG, ("ecg", "ekg", "electrocardiogram")),
    (ReportType.PRESCRIPTION, ("prescription", "medication", "dosage")),
)

DEFAULT_REPORT_TYPE = ReportType.GENERAL_MEDICAL
