"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from estimation_hub.app import app


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def sample_thread() -> str:
    """A short estimation thread with one answer per team."""
    return (
        "John: estimates needed for ABC Fund\n"
        "DS: 2h for annotation, 30m for UI fix\n"
        "LE: 1h for logic\n"
        "QA: 4-6 hours for testing"
    )


@pytest.fixture()
def extraction_payload() -> dict:
    """A well-formed six-field model response for the sample thread."""
    return {
        "fund_name": {"value": "ABC Fund", "confidence": 0.95},
        "items": {"value": None, "confidence": 0.2},
        "ds_estimation": {"value": "2h for annotation, 30m for UI fix", "confidence": 0.9},
        "le_estimation": {"value": "1h for logic", "confidence": 0.9},
        "qa_estimation": {"value": "4-6 hours for testing", "confidence": 0.85},
        "clickup_link": {"value": None, "confidence": 0.1},
    }
