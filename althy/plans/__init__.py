"""Plans module - goal-driven weekly plans and milestones.

This module provides:
- Validated plan schema (weekly items, milestones)
- Normalization of model-generated plan text
- Plan text generation from a free-form goal
"""

from althy.plans.errors import PlanValidationError, ValidationErrorKind
from althy.plans.normalizer import normalize, normalize_day, normalize_payload, normalize_time, validate_date
from althy.plans.types import Milestone, NormalizedPlan, WeeklyItem

__all__ = [
    "Milestone",
    "NormalizedPlan",
    "PlanValidationError",
    "ValidationErrorKind",
    "WeeklyItem",
    "normalize",
    "normalize_day",
    "normalize_payload",
    "normalize_time",
    "validate_date",
]
