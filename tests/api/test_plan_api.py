"""Tests for the plan API endpoints.

The LLM call is replaced with a stub; the normalizer runs for real.
"""

import pytest
from fastapi.testclient import TestClient

from althy.plans import generator
from althy.services.llm.errors import LLMCallError, LLMNotConfiguredError


@pytest.fixture
def stub_plan_text(monkeypatch):
    """Make generate_plan_text return a fixed string and record the goals it saw."""
    goals: list[str] = []

    def _install(raw_text: str) -> list[str]:
        async def _fake_generate_plan_text(goal: str) -> str:
            goals.append(goal)
            return raw_text

        monkeypatch.setattr(generator, "generate_plan_text", _fake_generate_plan_text)
        return goals

    return _install


def test_create_plan_success(client: TestClient, stub_plan_text, sample_plan_text: str):
    goals = stub_plan_text(sample_plan_text)

    response = client.post("/api/plan", json={"goal": "  Run a 10k by March  "})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "plan": {
            "weekly_plan": [{"weekdayIndex": 0, "time": "07:00", "activity": "Run 5 km"}],
            "milestones": [{"date": "2026-03-01", "goal": "Run a 10k"}],
        },
    }
    assert goals == ["Run a 10k by March"]


@pytest.mark.parametrize("body", [{}, {"goal": ""}, {"goal": "   "}, {"goal": None}])
def test_create_plan_requires_goal(client: TestClient, stub_plan_text, sample_plan_text: str, body: dict):
    goals = stub_plan_text(sample_plan_text)

    response = client.post("/api/plan", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Goal is required."}
    assert goals == []


def test_create_plan_invalid_model_output(client: TestClient, stub_plan_text):
    stub_plan_text('{"weekly_plan": [{"day": "Frunday", "time": "7am", "activity": "Run"}], "milestones": []}')

    response = client.post("/api/plan", json={"goal": "Run more"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid day: Frunday", "kind": "INVALID_DAY"}


def test_create_plan_model_returned_prose(client: TestClient, stub_plan_text):
    stub_plan_text("Sure! Here is your plan: run every Monday.")

    response = client.post("/api/plan", json={"goal": "Run more"})

    assert response.status_code == 400
    assert response.json() == {"error": "Model returned invalid JSON", "kind": "MALFORMED_PAYLOAD"}


def test_create_plan_llm_not_configured(client: TestClient, monkeypatch):
    async def _raise(goal: str) -> str:
        raise LLMNotConfiguredError()

    monkeypatch.setattr(generator, "generate_plan_text", _raise)

    response = client.post("/api/plan", json={"goal": "Run more"})

    assert response.status_code == 503
    assert "OPENAI_API_KEY" in response.json()["error"]


def test_create_plan_llm_failure(client: TestClient, monkeypatch):
    async def _raise(goal: str) -> str:
        raise LLMCallError("Failed to generate plan: timeout")

    monkeypatch.setattr(generator, "generate_plan_text", _raise)

    response = client.post("/api/plan", json={"goal": "Run more"})

    assert response.status_code == 502
    assert response.json() == {"error": "Failed to generate plan"}


def test_normalize_plan_endpoint(client: TestClient):
    raw = '{"weekly_plan": [{"day": "Fri", "time": "2:30pm", "activity": " Swim "}], "milestones": [{"date": "March 1, 2026", "goal": "Swim 1 km"}]}'

    response = client.post("/api/plan/normalize", json={"raw": raw})

    assert response.status_code == 200
    assert response.json()["plan"] == {
        "weekly_plan": [{"weekdayIndex": 4, "time": "14:30", "activity": "Swim"}],
        "milestones": [{"date": "March 1, 2026", "goal": "Swim 1 km"}],
    }


@pytest.mark.parametrize(
    ("raw", "kind"),
    [
        ("{not json", "MALFORMED_PAYLOAD"),
        pytest.param("[" * 200000, "MALFORMED_PAYLOAD", id="deeply-nested-array"),
        ('{"weekly_plan": []}', "MISSING_FIELD"),
        ('{"weekly_plan": [{"day": "Mon", "time": "noon", "activity": "Run"}], "milestones": []}', "INVALID_TIME"),
        ('{"weekly_plan": [], "milestones": [{"date": "soon", "goal": "Run"}]}', "INVALID_DATE"),
        (None, "MALFORMED_PAYLOAD"),
    ],
)
def test_normalize_plan_endpoint_rejects(client: TestClient, raw, kind: str):
    response = client.post("/api/plan/normalize", json={"raw": raw})

    assert response.status_code == 400
    assert response.json()["kind"] == kind


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_openapi_documents_normalized_plan(client: TestClient):
    schemas = client.get("/openapi.json").json()["components"]["schemas"]

    assert schemas["PlanResponse"]["properties"]["plan"]["$ref"] == "#/components/schemas/NormalizedPlan"
    assert "weekdayIndex" in schemas["WeeklyItem"]["properties"]
    assert "prompt" in schemas["PromptRequest"]["properties"]
