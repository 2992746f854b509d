class LLMNotConfiguredError(RuntimeError):
    """Raised when an LLM call is attempted without an API key."""

    def __init__(self, provider: str = "openai"):
        self.provider = provider
        super().__init__("OpenAI API is not configured. Please set OPENAI_API_KEY environment variable.")


class LLMCallError(RuntimeError):
    """Raised when the LLM provider fails to return a response."""
