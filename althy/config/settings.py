from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    plan_model: str = Field(
        default="gpt-4o-mini",
        validation_alias="PLAN_MODEL",
        description="Model used to draft weekly plans from a goal",
    )
    assistant_model: str = Field(
        default="gpt-3.5-turbo",
        validation_alias="ASSISTANT_MODEL",
        description="Model used for free-form assistant prompts",
    )
    client_url: str = Field(
        default="http://localhost:3001",  # Default for local dev; set to the deployed frontend in production
        validation_alias="CLIENT_URL",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def llm_configured(self) -> bool:
        return bool(self.openai_api_key.strip())

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("openai_api_key")
    @classmethod
    def validate_openai_api_key(cls, value: str) -> str:
        """Warn when no OpenAI key is configured.

        Empty values are allowed for local development and tests.
        Plan generation and assistant prompts return 503 without a key.
        """
        if not value:
            logger.warning(
                "OPENAI_API_KEY is not set. Plan generation and assistant features will not work. "
                "Set it in .env file or environment variables."
            )
        return value


settings = Settings()
