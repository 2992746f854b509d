"""Plan validation error types.

Every failure raised while normalizing a model-generated plan is a
PlanValidationError. The kind tells callers which check failed:

- MALFORMED_PAYLOAD: Input is not valid JSON, or a list item is not an object
- MISSING_FIELD: weekly_plan or milestones is absent or not a list
- INVALID_DAY: Day name is not a recognized weekday
- INVALID_TIME: Time is neither HH:MM nor a 12-hour am/pm time
- INVALID_DATE: Milestone date does not match any accepted format
- EMPTY_TEXT: Activity or goal is missing or empty after trimming
"""

from enum import StrEnum
from typing import Any


class ValidationErrorKind(StrEnum):
    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_DAY = "INVALID_DAY"
    INVALID_TIME = "INVALID_TIME"
    INVALID_DATE = "INVALID_DATE"
    EMPTY_TEXT = "EMPTY_TEXT"


class PlanValidationError(ValueError):
    """Raised when a plan payload fails a structural or semantic check.

    Attributes:
        kind: Which check failed
        value: The offending original value (None for structural errors)
        message: Human-readable description, also used as str(error)
    """

    def __init__(self, kind: ValidationErrorKind, message: str, value: Any = None):
        self.kind = kind
        self.value = value
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "kind": self.kind.value}
