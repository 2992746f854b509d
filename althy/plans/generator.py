from loguru import logger
from pydantic_ai import Agent

from althy.config.settings import settings
from althy.services.llm.errors import LLMCallError
from althy.services.llm.model import get_model

SYSTEM_PROMPT = """You are a personal planning assistant.

Your task is to turn ONE goal into a weekly routine and a list of milestones.

Rules:
- You must output ONLY valid JSON. No markdown, no code fences, no commentary.
- The JSON object must have exactly two keys: "weekly_plan" and "milestones".
- "weekly_plan" is a list of {"day": string, "time": string, "activity": string}.
- "day" must be an English weekday name (Monday ... Sunday).
- "time" must be "HH:MM" (24-hour) or a 12-hour time like "7am" or "6:30pm".
- "milestones" is a list of {"date": string, "goal": string}.
- "date" must be an ISO-8601 date (YYYY-MM-DD).
- Activities and goals must be short and non-empty.
"""


def build_plan_prompt(goal: str) -> str:
    """Build the user prompt for a single goal."""
    return f"""Create a plan for this goal:

{goal.strip()}

Return JSON like:
{{"weekly_plan": [{{"day": "Monday", "time": "7am", "activity": "Run 5 km"}}],
 "milestones": [{{"date": "2026-03-01", "goal": "Run a 10k"}}]}}
"""


async def generate_plan_text(goal: str) -> str:
    """Ask the plan model for a weekly plan and return its raw text.

    The text is not validated here; pass it to althy.plans.normalizer.normalize.

    Args:
        goal: Free-form goal description from the user

    Returns:
        Raw model output

    Raises:
        LLMNotConfiguredError: If no API key is configured
        LLMCallError: If the model call fails
    """
    model = get_model("openai", settings.plan_model)
    agent = Agent(
        model=model,
        system_prompt=SYSTEM_PROMPT,
    )

    logger.debug("generate_plan_text: Calling LLM for plan generation", model=settings.plan_model, goal_length=len(goal))

    try:
        result = await agent.run(build_plan_prompt(goal))
    except Exception as e:
        logger.error(
            "generate_plan_text: Failed to generate plan",
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise LLMCallError(f"Failed to generate plan: {e}") from e

    raw_text = str(result.output)
    logger.debug("generate_plan_text: Plan text received", output_length=len(raw_text))
    return raw_text
