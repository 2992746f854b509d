"""Validated plan schema.

These models are only ever built by the normalizer. They are frozen so a
plan handed to a caller cannot be changed after validation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WeeklyItem(BaseModel):
    """One recurring activity in the weekly plan.

    Attributes:
        weekday_index: 0=Mon ... 6=Sun (serialized as weekdayIndex)
        time: 24-hour zero-padded "HH:MM"
        activity: Trimmed, non-empty description
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    weekday_index: int = Field(..., ge=0, le=6, alias="weekdayIndex")
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    activity: str = Field(..., min_length=1)


class Milestone(BaseModel):
    """A dated goal. The date string is kept exactly as the model wrote it."""

    model_config = ConfigDict(frozen=True)

    date: str
    goal: str = Field(..., min_length=1)


class NormalizedPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    weekly_plan: list[WeeklyItem] = Field(default_factory=list)
    milestones: list[Milestone] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Serialize with wire field names (weekdayIndex)."""
        return self.model_dump(by_alias=True)
