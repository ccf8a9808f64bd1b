# ============================================================================
# src/medical_report_analyzer/constants/reference_ranges.py
# ============================================================================
"""
Reference Ranges
- Normal and critical thresholds for the parameters that have status rules
- Parameters not listed here are always reported as normal

Bounds are inclusive where the key says "min"/"max" and exclusive where it
says "below"/"above". "at" thresholds are inclusive lower bounds.
"""

REFERENCE_RANGES = {
    "Hemoglobin": {
        "normal_min": 12.0,
        "normal_max": 16.0,
    },
    "Blood Pressure": {
        "systolic_normal_below": 120.0,
        "diastolic_normal_below": 80.0,
        "systolic_critical_at": 140.0,
        "diastolic_critical_at": 90.0,
    },
    "Glucose": {
        "normal_min": 70.0,
        "normal_max": 100.0,
        "critical_above": 125.0,
    },
    "Cholesterol": {
        "normal_below": 200.0,
        "critical_at": 240.0,
    },
}
