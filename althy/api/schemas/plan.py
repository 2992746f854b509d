from pydantic import BaseModel, Field

from althy.plans.types import NormalizedPlan


class PlanRequest(BaseModel):
    goal: str | None = Field(None, description="Free-form goal to plan for")


class NormalizePlanRequest(BaseModel):
    raw: str | None = Field(None, description="Raw plan text as returned by the model")


class PlanResponse(BaseModel):
    success: bool = True
    plan: NormalizedPlan


class ErrorResponse(BaseModel):
    error: str
    kind: str | None = None
