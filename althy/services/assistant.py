"""Free-form assistant prompts."""

from loguru import logger
from pydantic_ai import Agent

from althy.config.settings import settings
from althy.services.llm.errors import LLMCallError
from althy.services.llm.model import get_model


async def generate_response(prompt: str) -> str:
    """Send a prompt to the assistant model and return the reply text.

    Raises:
        LLMNotConfiguredError: If no API key is configured
        LLMCallError: If the model call fails
    """
    model = get_model("openai", settings.assistant_model)
    agent = Agent(model=model)

    try:
        result = await agent.run(prompt)
    except Exception as e:
        logger.exception("OpenAI API error", model=settings.assistant_model)
        raise LLMCallError(str(e) or "OpenAI API error") from e

    return str(result.output)
