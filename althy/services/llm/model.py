"""LLM model abstraction for consistent model access across the application."""

from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from althy.config.settings import settings
from althy.services.llm.errors import LLMNotConfiguredError


def get_model(provider: str, model_name: str):
    if provider == "openai":
        if not settings.llm_configured:
            raise LLMNotConfiguredError(provider)
        return OpenAIChatModel(model_name, provider=OpenAIProvider(api_key=settings.openai_api_key))

    raise ValueError(f"Unsupported LLM provider: {provider}")
