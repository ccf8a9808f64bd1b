# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import asyncio
from typing import Any, Dict, List, Optional, Union

import pytest

from medical_report_analyzer import ReportPipeline, Parameter, ParameterStatus
from medical_report_analyzer.analysis.base import BaseAnalysisClient, BackendType


@pytest.fixture
def sample_blood_text():
    """End-to-end blood test sample"""
    return "Patient CBC Report. Hemoglobin: 13.5 g/dl. Blood Pressure: 150/95 mmhg."


@pytest.fixture
def sample_lab_text():
    """Multi-parameter lab report as OCR would return it"""
    return """
    City Diagnostics Laboratory
    Patient: Jane Doe        Physician: Dr. Rao

    COMPLETE BLOOD COUNT (CBC)
    Hemoglobin: 11.2 g/dl
    WBC: 7,500 /μl
    RBC: 4.8 million/μl
    Platelet Count: 250,000 per microliter
    Hematocrit: 42.1 %

    VITALS
    Blood Pressure: 118/76 mmhg
    Heart Rate: 72 bpm
    Temperature: 98.6 °F

    CHEMISTRY
    Glucose: 130 mg/dl
    """


@pytest.fixture
def sample_xray_text():
    """Chest X-ray report with no measurable parameters"""
    return """
    RADIOLOGY
    Examination: Chest X-Ray PA view
    Diagnosis: lungs are clear, no acute cardiopulmonary process.
    """


@pytest.fixture
def sample_non_medical_text():
    return "Quarterly sales meeting agenda. Please bring the test results of the marketing campaign."


@pytest.fixture
def pipeline():
    return ReportPipeline()


@pytest.fixture
def make_parameter():
    """Build a Parameter with only the fields a test cares about"""
    def _make(name: str, status: ParameterStatus = ParameterStatus.NORMAL, value: str = "1") -> Parameter:
        return Parameter(name=name, value=value, numeric_value=1.0, status=status)
    return _make


class FakeAnalysisClient(BaseAnalysisClient):
    """
    Scripted LLM client.

    Each generate() call consumes the next item of `responses`: a string is
    returned as generated text, an exception instance is raised, and a float
    makes the call sleep that many seconds first.
    """

    def __init__(self, responses: Optional[List[Union[str, Exception, float]]] = None):
        super().__init__({})
        self.responses = list(responses or [])
        self.prompts: List[str] = []

    @property
    def backend_type(self) -> BackendType:
        return BackendType.OLLAMA

    @property
    def model_name(self) -> str:
        return "fake-model"

    async def generate(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False
    ) -> Dict[str, Any]:
        self.prompts.append(prompt)
        item = self.responses.pop(0) if self.responses else ""
        if isinstance(item, float):
            await asyncio.sleep(item)
            item = ""
        if isinstance(item, Exception):
            raise item
        return {"text": item, "model": self.model_name, "backend": "fake", "inference_time": 0.0}

    async def health_check(self) -> Dict[str, Any]:
        return {"healthy": True, "backend": "fake", "model": self.model_name, "details": "ok"}


@pytest.fixture
def fake_client_factory():
    return FakeAnalysisClient
