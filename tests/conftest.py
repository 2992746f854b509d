"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import json

import pytest
from fastapi.testclient import TestClient

from althy.config.settings import settings


@pytest.fixture
def sample_plan_payload() -> dict:
    """Plan payload in the shape the plan model is asked to produce."""
    return {
        "weekly_plan": [
            {"day": "Mon", "time": "7am", "activity": "Run 5 km"},
        ],
        "milestones": [
            {"date": "2026-03-01", "goal": "Run a 10k"},
        ],
    }


@pytest.fixture
def sample_plan_text(sample_plan_payload: dict) -> str:
    return json.dumps(sample_plan_payload)


@pytest.fixture
def llm_configured(monkeypatch):
    """Pretend an OpenAI key is configured."""
    monkeypatch.setattr(settings, "openai_api_key", "sk-test")


@pytest.fixture
def llm_not_configured(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "")


@pytest.fixture
def client() -> TestClient:
    from althy.main import create_app

    return TestClient(create_app())
