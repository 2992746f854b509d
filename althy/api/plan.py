"""Plan API endpoints.

Generates a weekly plan and milestones from a goal, and validates plan text
produced elsewhere. Validation failures are returned as 400 with an "error"
message and the failing check's "kind".
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from loguru import logger

from althy.api.schemas.plan import ErrorResponse, NormalizePlanRequest, PlanRequest, PlanResponse
from althy.plans import generator
from althy.plans.errors import PlanValidationError
from althy.plans.normalizer import normalize
from althy.services.llm.errors import LLMCallError, LLMNotConfiguredError

router = APIRouter(prefix="/api/plan", tags=["plan"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _validation_error(e: PlanValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=e.to_dict())


@router.post("", response_model=PlanResponse, responses=_ERROR_RESPONSES)
async def create_plan(req: PlanRequest) -> PlanResponse | JSONResponse:
    """Generate a plan for a goal and return it normalized.

    Returns:
        {"success": true, "plan": {...}}; 400 for a missing goal or an
        invalid model response, 503 if the LLM is not configured, 502 if the
        LLM call fails
    """
    goal = (req.goal or "").strip()
    if not goal:
        return _error(status.HTTP_400_BAD_REQUEST, "Goal is required.")

    logger.info("Plan generation requested", goal_length=len(goal))

    try:
        raw_text = await generator.generate_plan_text(goal)
    except LLMNotConfiguredError as e:
        logger.warning("Plan generation requested but LLM is not configured")
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, str(e))
    except LLMCallError:
        logger.exception("Failed to generate plan")
        return _error(status.HTTP_502_BAD_GATEWAY, "Failed to generate plan")

    try:
        plan = normalize(raw_text)
    except PlanValidationError as e:
        logger.warning("Model returned an invalid plan", kind=e.kind.value, error=e.message)
        return _validation_error(e)

    logger.info(
        "Plan generated",
        weekly_items=len(plan.weekly_plan),
        milestones=len(plan.milestones),
    )
    return PlanResponse(plan=plan)


@router.post("/normalize", response_model=PlanResponse, responses=_ERROR_RESPONSES)
async def normalize_plan(req: NormalizePlanRequest) -> PlanResponse | JSONResponse:
    """Validate plan text without calling the LLM."""
    try:
        plan = normalize(req.raw)
    except PlanValidationError as e:
        logger.info("Rejected plan text", kind=e.kind.value, error=e.message)
        return _validation_error(e)

    return PlanResponse(plan=plan)
