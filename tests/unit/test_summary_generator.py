# ============================================================================
# FILE: tests/unit/test_summary_generator.py
# ============================================================================
"""
Unit tests for report-type-aware summaries
"""

import pytest

from medical_report_analyzer import ParameterStatus, ReportType, SummaryGenerator

A = ParameterStatus.ABNORMAL
C = ParameterStatus.CRITICAL


@pytest.fixture
def generator():
    return SummaryGenerator()


class TestBloodTest:

    def test_all_normal(self, generator, make_parameter):
        summary = generator.generate("", ReportType.BLOOD_TEST, [make_parameter("Hemoglobin")])
        assert "within normal ranges" in summary
        assert "regular health monitoring" in summary

    def test_single_abnormal_named(self, generator, make_parameter):
        params = [make_parameter("Hemoglobin"), make_parameter("Blood Pressure", C)]
        summary = generator.generate("", ReportType.BLOOD_TEST, params)
        assert "Specifically, Blood Pressure is outside the normal range." in summary
        assert "healthcare provider" in summary

    def test_multiple_abnormal_joined(self, generator, make_parameter):
        params = [make_parameter("Hemoglobin", A), make_parameter("Glucose", C)]
        summary = generator.generate("", ReportType.BLOOD_TEST, params)
        assert "Hemoglobin, Glucose are outside the normal range" in summary

    def test_no_parameters(self, generator):
        summary = generator.generate("hemoglobin checked", ReportType.BLOOD_TEST, [])
        assert "0 parameters" in summary
        assert "within normal ranges" not in summary


class TestLabStyleTemplates:

    def test_urine_normal(self, generator, make_parameter):
        summary = generator.generate("", ReportType.URINE_ANALYSIS, [make_parameter("Glucose")])
        assert summary.startswith("Your urine analysis report has been processed.")
        assert "within normal limits" in summary

    def test_urine_abnormal(self, generator, make_parameter):
        summary = generator.generate("", ReportType.URINE_ANALYSIS, [make_parameter("Glucose", A)])
        assert "Glucose" in summary
        assert "may require attention" in summary

    def test_lipid_abnormal(self, generator, make_parameter):
        params = [make_parameter("Cholesterol", C), make_parameter("HDL")]
        summary = generator.generate("", ReportType.LIPID_PROFILE, params)
        assert "outside the optimal range (Cholesterol)" in summary

    def test_lipid_normal(self, generator, make_parameter):
        summary = generator.generate("", ReportType.LIPID_PROFILE, [make_parameter("Cholesterol")])
        assert "within healthy ranges" in summary


class TestXRay:
    """X-ray summaries look at the wording of the report"""

    def test_reassuring(self, generator):
        summary = generator.generate("Lungs are CLEAR.", ReportType.XRAY, [])
        assert "no acute abnormalities" in summary

    def test_concerning(self, generator):
        summary = generator.generate("Opacity in the left lower lobe.", ReportType.XRAY, [])
        assert "radiologist" in summary

    def test_neither(self, generator):
        summary = generator.generate("Two views obtained.", ReportType.XRAY, [])
        assert summary == (
            "Your X-ray report has been reviewed. Please review the detailed findings "
            "with your healthcare provider for proper interpretation."
        )

    def test_reassuring_wins_over_concerning(self, generator):
        summary = generator.generate("Findings: normal heart size.", ReportType.XRAY, [])
        assert "no acute abnormalities" in summary


class TestGeneric:

    @pytest.mark.parametrize("report_type", [
        ReportType.ECG, ReportType.PRESCRIPTION, ReportType.GENERAL_MEDICAL,
    ])
    def test_counts(self, generator, make_parameter, report_type):
        params = [make_parameter("Heart Rate"), make_parameter("Glucose", A)]
        summary = generator.generate("", report_type, params)
        assert summary.startswith(f"Your {report_type.value} has been processed.")
        assert "contains 2 measured parameters" in summary
        assert "1 parameter is outside the normal range" in summary

    def test_single_parameter_all_normal(self, generator, make_parameter):
        summary = generator.generate("", ReportType.ECG, [make_parameter("Heart Rate")])
        assert "contains 1 measured parameter." in summary
        assert "outside the normal range" not in summary

    def test_missing_report_type(self, generator):
        summary = generator.generate(None, None, [])
        assert summary.startswith("Your medical report has been processed")
        assert "0 parameters" in summary


def test_summary_never_empty(generator, make_parameter):
    for report_type in list(ReportType) + [None]:
        for params in ([], [make_parameter("Glucose", C)]):
            assert generator.generate("", report_type, params)
