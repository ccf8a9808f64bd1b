def test_constants():
    """Test medical constants are loaded"""
    from medical_report_analyzer.constants import (
        MEDICAL_KEYWORDS, REPORT_TYPE_RULES, REFERENCE_RANGES,
        MIN_MEDICAL_KEYWORDS, CONFIDENCE_SATURATION_COUNT, ReportType,
    )

    assert 25 <= len(MEDICAL_KEYWORDS) <= 35
    assert len(set(MEDICAL_KEYWORDS)) == len(MEDICAL_KEYWORDS)
    assert all(k == k.lower() for k in MEDICAL_KEYWORDS)

    assert MIN_MEDICAL_KEYWORDS == 2
    assert CONFIDENCE_SATURATION_COUNT == 5

    # Priority order, general medical is the fallback
    assert [rule[0] for rule in REPORT_TYPE_RULES] == [
        ReportType.BLOOD_TEST, ReportType.URINE_ANALYSIS, ReportType.LIPID_PROFILE,
        ReportType.XRAY, ReportType.ECG, ReportType.PRESCRIPTION,
    ]

    assert set(REFERENCE_RANGES) == {"Hemoglobin", "Blood Pressure", "Glucose", "Cholesterol"}
    assert REFERENCE_RANGES["Glucose"]["critical_above"] == 125.0
