"""Plan normalization.

Turns the raw text returned by the plan model into a NormalizedPlan:
- Day names (full or 3-letter) become weekday indexes, 0=Mon ... 6=Sun
- Free-text times become zero-padded 24-hour "HH:MM"
- Milestone dates are checked against a fixed list of formats and kept as-is
- Activities and goals are trimmed and must not be empty

Day, month and am/pm names are matched against the English tables below,
never through strptime, so results do not depend on LC_TIME.

Normalization is fail-fast: the first invalid field aborts the whole plan.
Nothing here does I/O or logging.
"""

import datetime as dt
import json
import re
from collections.abc import Mapping
from typing import Any

from althy.plans.errors import PlanValidationError, ValidationErrorKind
from althy.plans.types import Milestone, NormalizedPlan, WeeklyItem

WEEKDAY_INDEX: dict[str, int] = {
    "monday": 0,
    "mon": 0,
    "tuesday": 1,
    "tue": 1,
    "wednesday": 2,
    "wed": 2,
    "thursday": 3,
    "thu": 3,
    "friday": 4,
    "fri": 4,
    "saturday": 5,
    "sat": 5,
    "sunday": 6,
    "sun": 6,
}

MONTH_NUMBER: dict[str, int] = {
    "january": 1,
    "jan": 1,
    "february": 2,
    "feb": 2,
    "march": 3,
    "mar": 3,
    "april": 4,
    "apr": 4,
    "may": 5,
    "june": 6,
    "jun": 6,
    "july": 7,
    "jul": 7,
    "august": 8,
    "aug": 8,
    "september": 9,
    "sep": 9,
    "sept": 9,
    "october": 10,
    "oct": 10,
    "november": 11,
    "nov": 11,
    "december": 12,
    "dec": 12,
}

# Human formats accepted for milestone dates, on top of ISO-8601
MILESTONE_DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?P<month>[a-z]+)\.?\s+(?P<day>[0-9]{1,2}),?\s+(?P<year>[0-9]{4})"),  # March 1, 2026 / Mar 1, 2026
    re.compile(r"(?P<day>[0-9]{1,2})\s+(?P<month>[a-z]+)\.?,?\s+(?P<year>[0-9]{4})"),  # 1 March 2026 / 1 Mar 2026
    re.compile(r"(?P<month>[0-9]{1,2})/(?P<day>[0-9]{1,2})/(?P<year>[0-9]{4})"),  # 03/01/2026
    re.compile(r"(?P<year>[0-9]{4})/(?P<month>[0-9]{1,2})/(?P<day>[0-9]{1,2})"),  # 2026/03/01
)

_NON_LETTER_RE = re.compile(r"[^a-z]")
_WHITESPACE_RE = re.compile(r"\s+")
_HHMM_RE = re.compile(r"[0-9]{2}:[0-9]{2}")
_TWELVE_HOUR_RE = re.compile(
    r"(?P<hour>[0-9]{1,2})(?::(?P<minute>[0-9]{2}))?(?::(?P<second>[0-9]{2}))?(?P<meridiem>am|pm)"
)


def normalize_day(day: Any) -> int:
    """Map a weekday name or abbreviation to its index.

    Args:
        day: Day name as written by the model, e.g. "Monday", "mon", "Tue."

    Returns:
        Weekday index, 0=Mon ... 6=Sun

    Raises:
        PlanValidationError: INVALID_DAY if the name is not recognized
    """
    if isinstance(day, str):
        key = _NON_LETTER_RE.sub("", day.strip().lower())
        if key in WEEKDAY_INDEX:
            return WEEKDAY_INDEX[key]
    raise PlanValidationError(ValidationErrorKind.INVALID_DAY, f"Invalid day: {day}", day)


def _twelve_hour_to_24(cleaned: str) -> str | None:
    match = _TWELVE_HOUR_RE.fullmatch(cleaned)
    if not match:
        return None
    hour = int(match.group("hour"))
    minute = int(match.group("minute") or 0)
    second = int(match.group("second") or 0)
    if not (1 <= hour <= 12 and minute < 60 and second < 60):
        return None
    hour %= 12
    if match.group("meridiem") == "pm":
        hour += 12
    return f"{hour:02d}:{minute:02d}"


def normalize_time(time: Any) -> str:
    """Convert a 12-hour or 24-hour time string to "HH:MM".

    "7am", "7:30 PM", "07:00am" and "7:00:00pm" are parsed as 12-hour times;
    seconds are dropped. Anything without am/pm must already be a valid
    "HH:MM" and is returned unchanged.

    Raises:
        PlanValidationError: INVALID_TIME if the value cannot be read as a time
    """
    if isinstance(time, str):
        cleaned = _WHITESPACE_RE.sub("", time.lower())

        if "am" in cleaned or "pm" in cleaned:
            converted = _twelve_hour_to_24(cleaned)
            if converted is not None:
                return converted
        elif _HHMM_RE.fullmatch(cleaned):
            hours, minutes = (int(part) for part in cleaned.split(":"))
            if hours < 24 and minutes < 60:
                return cleaned

    raise PlanValidationError(ValidationErrorKind.INVALID_TIME, f"Invalid time: {time}", time)


def validate_date(date: Any) -> str:
    """Check that a milestone date is readable and return it unchanged.

    Accepted: ISO-8601 dates and datetimes, plus MILESTONE_DATE_PATTERNS.

    Raises:
        PlanValidationError: INVALID_DATE if no accepted format matches
    """
    if isinstance(date, str) and _is_parseable_date(date.strip()):
        return date
    raise PlanValidationError(ValidationErrorKind.INVALID_DATE, f"Invalid date: {date}", date)


def _month_from_token(token: str) -> int | None:
    if token.isdigit():
        return int(token)
    return MONTH_NUMBER.get(token)


def _is_parseable_date(value: str) -> bool:
    if not value:
        return False
    try:
        dt.datetime.fromisoformat(value)
    except ValueError:
        pass
    else:
        return True

    lowered = value.lower()
    for pattern in MILESTONE_DATE_PATTERNS:
        match = pattern.fullmatch(lowered)
        if not match:
            continue
        month = _month_from_token(match.group("month"))
        if month is None:
            continue
        try:
            dt.date(int(match.group("year")), month, int(match.group("day")))
        except ValueError:
            continue
        return True
    return False


def _normalize_text(value: Any, label: str, index: int) -> str:
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise PlanValidationError(ValidationErrorKind.EMPTY_TEXT, f"Empty {label} at index {index}", value)
    return text


def _require_object(item: Any, field: str, index: int) -> Mapping[str, Any]:
    if not isinstance(item, Mapping):
        raise PlanValidationError(
            ValidationErrorKind.MALFORMED_PAYLOAD,
            f"Invalid {field} item at index {index}",
            item,
        )
    return item


def _normalize_weekly_item(item: Any, index: int) -> WeeklyItem:
    entry = _require_object(item, "weekly_plan", index)
    return WeeklyItem(
        weekday_index=normalize_day(entry.get("day")),
        time=normalize_time(entry.get("time")),
        activity=_normalize_text(entry.get("activity"), "activity", index),
    )


def _normalize_milestone(item: Any, index: int) -> Milestone:
    entry = _require_object(item, "milestones", index)
    return Milestone(
        date=validate_date(entry.get("date")),
        goal=_normalize_text(entry.get("goal"), "goal", index),
    )


def normalize_payload(data: Any) -> NormalizedPlan:
    """Validate an already-decoded plan payload.

    Args:
        data: Decoded JSON value expected to hold weekly_plan and milestones lists

    Returns:
        NormalizedPlan with both lists in input order

    Raises:
        PlanValidationError: On the first invalid field
    """
    if not isinstance(data, Mapping):
        raise PlanValidationError(ValidationErrorKind.MISSING_FIELD, "Missing weekly_plan or milestones")

    weekly_plan = data.get("weekly_plan")
    milestones = data.get("milestones")
    if not isinstance(weekly_plan, list) or not isinstance(milestones, list):
        raise PlanValidationError(ValidationErrorKind.MISSING_FIELD, "Missing weekly_plan or milestones")

    return NormalizedPlan(
        weekly_plan=[_normalize_weekly_item(item, i) for i, item in enumerate(weekly_plan)],
        milestones=[_normalize_milestone(item, i) for i, item in enumerate(milestones)],
    )


def normalize(raw_text: str) -> NormalizedPlan:
    """Parse and validate the plan text returned by the model.

    Args:
        raw_text: JSON document with weekly_plan and milestones arrays

    Returns:
        NormalizedPlan

    Raises:
        PlanValidationError: MALFORMED_PAYLOAD if the text is not JSON or is nested too deeply, otherwise
            whatever normalize_payload raises
    """
    if not isinstance(raw_text, (str, bytes, bytearray)):
        raise PlanValidationError(ValidationErrorKind.MALFORMED_PAYLOAD, "Model returned invalid JSON", raw_text)
    try:
        data = json.loads(raw_text)
    except (ValueError, RecursionError) as e:
        # Nesting deeper than the interpreter recursion limit raises RecursionError
        raise PlanValidationError(ValidationErrorKind.MALFORMED_PAYLOAD, "Model returned invalid JSON", raw_text) from e

    return normalize_payload(data)
