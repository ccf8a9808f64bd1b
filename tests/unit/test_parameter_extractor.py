# ============================================================================
# FILE: tests/unit/test_parameter_extractor.py
# ============================================================================
"""
Unit tests for the catalog-driven parameter extractor
"""

import re

import pytest

from medical_report_analyzer import ParameterExtractor, ParameterStatus
from medical_report_analyzer.extractors import (
    PARAMETER_CATALOG,
    CatalogEntry,
    parse_number,
    parse_pressure,
)


@pytest.fixture
def extractor():
    return ParameterExtractor()


def _by_name(parameters):
    return {p.name: p for p in parameters}


def test_catalog_order():
    assert [entry.name for entry in PARAMETER_CATALOG] == [
        "Hemoglobin", "Blood Pressure", "Heart Rate", "Temperature", "Glucose",
        "Cholesterol", "WBC Count", "RBC Count", "Platelet Count", "Hematocrit",
        "HDL", "LDL", "Triglycerides",
    ]


def test_parsers():
    assert parse_number("250,000") == 250000.0
    assert parse_pressure("120/80") == (120.0, 80.0)
    with pytest.raises(ValueError):
        parse_number("1.2.3")


def test_full_lab_report(extractor, sample_lab_text):
    params = _by_name(extractor.extract(sample_lab_text))

    assert params["Hemoglobin"].value == "11.2 g/dl"
    assert params["Hemoglobin"].unit == "g/dl"
    assert params["Hemoglobin"].status is ParameterStatus.ABNORMAL

    assert params["WBC Count"].value == "7,500 /μl"
    assert params["WBC Count"].numeric_value == 7500.0

    assert params["RBC Count"].value == "4.8 million"
    assert params["Platelet Count"].numeric_value == 250000.0
    assert params["Platelet Count"].unit == "per"

    assert params["Hematocrit"].value == "42.1"
    assert params["Hematocrit"].unit == ""

    assert params["Blood Pressure"].value == "118/76"
    assert params["Blood Pressure"].numeric_value == (118.0, 76.0)
    assert params["Blood Pressure"].status is ParameterStatus.NORMAL

    assert params["Heart Rate"].value == "72 bpm"
    assert params["Temperature"].value == "98.6"

    assert params["Glucose"].status is ParameterStatus.CRITICAL
    assert "Cholesterol" not in params


def test_output_follows_catalog_order(extractor):
    text = "Glucose: 90 mg/dl. Later, Hemoglobin: 14 g/dl."
    assert [p.name for p in extractor.extract(text)] == ["Hemoglobin", "Glucose"]


def test_first_match_only(extractor):
    params = extractor.extract("Glucose: 90 mg/dl then Glucose: 150 mg/dl")
    assert len(params) == 1
    assert params[0].value == "90 mg/dl"
    assert params[0].status is ParameterStatus.NORMAL


def test_no_numeric_value_yields_nothing(extractor):
    assert extractor.extract("Blood drawn; hemoglobin levels were checked.") == []


def test_empty_and_none_text(extractor):
    assert extractor.extract("") == []
    assert extractor.extract(None) == []


def test_malformed_number_is_skipped(extractor):
    params = extractor.extract("Hemoglobin: 1.2.3 g/dl. Glucose: 95 mg/dl")
    assert [p.name for p in params] == ["Glucose"]


def test_unit_case_is_preserved(extractor):
    params = extractor.extract("HEMOGLOBIN: 13 G/DL")
    assert params[0].value == "13 G/DL"
    assert params[0].unit == "G/DL"


def test_lipid_panel(extractor):
    text = """
    Total Cholesterol: 245 mg/dl
    HDL Cholesterol: 38 mg/dl
    LDL: 160 mg/dl
    Triglycerides: 210 mg/dl
    """
    params = _by_name(extractor.extract(text))
    assert params["Cholesterol"].status is ParameterStatus.CRITICAL
    assert params["HDL"].value == "38 mg/dl"
    assert params["LDL"].value == "160 mg/dl"
    assert params["Triglycerides"].numeric_value == 210.0
    # No reference ranges for these
    assert params["Triglycerides"].status is ParameterStatus.NORMAL


@pytest.mark.parametrize("text,expected", [
    ("Blood Pressure: 119/79 mmhg", ParameterStatus.NORMAL),
    ("Blood Pressure: 135/85 mmhg", ParameterStatus.ABNORMAL),
    ("Blood Pressure: 145/70 mmhg", ParameterStatus.CRITICAL),
    ("bloodpressure 150/95 mmHg", ParameterStatus.CRITICAL),
])
def test_blood_pressure_status(extractor, text, expected):
    params = extractor.extract(text)
    assert params[0].name == "Blood Pressure"
    assert params[0].status is expected


def test_custom_catalog_entry():
    entry = CatalogEntry(
        name="Creatinine",
        pattern=re.compile(r"creatinine[:\s]*([0-9.]+)\s*(mg/dl)", re.IGNORECASE),
    )
    extractor = ParameterExtractor(catalog=[entry])
    params = extractor.extract("Creatinine: 1.1 mg/dl")
    assert params[0].name == "Creatinine"
    assert params[0].value == "1.1 mg/dl"
    assert params[0].status is ParameterStatus.NORMAL
